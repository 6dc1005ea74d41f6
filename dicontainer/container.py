from typing import Any, List, Optional, Type, TypeVar, Union

from dicontainer.abc import ContainerProtocol
from dicontainer.configuration import DiConfiguration
from dicontainer.lifetime import Lifetime
from dicontainer.provider import DependencyProvider

T = TypeVar("T")


class Container(ContainerProtocol):
    """
    Configuration class for a collection of services, that can also resolve them
    through a lazily built provider.
    """

    __slots__ = ("_configuration", "_provider", "strict")

    def __init__(self, *, strict: bool = False, introspector=None):
        self._configuration = DiConfiguration(introspector)
        self._provider: Optional[DependencyProvider] = None
        self.strict = strict

    @property
    def configuration(self) -> DiConfiguration:
        return self._configuration

    @property
    def provider(self) -> DependencyProvider:
        if self._provider is None:
            self._provider = self.build_provider()
        return self._provider

    def __iter__(self):
        yield from self._configuration

    def __contains__(self, key):
        return key in self._configuration

    def register(
        self,
        obj_type: Any,
        sub_type: Any = None,
        lifetime: Lifetime = Lifetime.TRANSIENT,
    ) -> "Container":
        """
        Registers a type in this container.
        """
        self._configuration.register(obj_type, sub_type, lifetime)
        return self

    def resolve(self, obj_type: Union[Type[T], Any]) -> T:
        """
        Resolves a service by type, obtaining an instance of that type.
        """
        return self.provider.resolve(obj_type)

    def resolve_all(self, obj_type: Union[Type[T], Any]) -> List[T]:
        """
        Resolves all the implementations registered for a type, in registration
        order.
        """
        return self.provider.resolve_all(obj_type)

    def add_transient(
        self, base_type: Any, concrete_type: Optional[Type] = None
    ) -> "Container":
        """
        Registers a type by base type, to be instantiated with transient lifetime.
        If a single type is given, it is registered for itself.

        :param base_type: registered type. If a concrete type is provided, it must
        inherit the base type.
        :param concrete_type: concrete class
        :return: the container itself
        """
        self._configuration.register_transient(base_type, concrete_type)
        return self

    def add_singleton(
        self, base_type: Any, concrete_type: Optional[Type] = None
    ) -> "Container":
        """
        Registers a type by base type, to be instantiated with singleton lifetime.
        If a single type is given, it is registered for itself.

        :param base_type: registered type. If a concrete type is provided, it must
        inherit the base type.
        :param concrete_type: concrete class
        :return: the container itself
        """
        self._configuration.register_singleton(base_type, concrete_type)
        return self

    def build_provider(self) -> DependencyProvider:
        """
        Builds and returns a new provider for the services configured in this
        container. Each provider keeps its own singletons.

        :return: provider that can be used to activate and obtain services.
        """
        return DependencyProvider(self._configuration, strict=self.strict)
