import logging
from inspect import Parameter
from typing import Any, Dict, List, Optional, Tuple, Type, TypeVar, get_origin

from dicontainer.cache import InstanceCache
from dicontainer.common import class_name
from dicontainer.configuration import Binding, DiConfiguration, Implementation
from dicontainer.errors import (
    AmbiguousBinding,
    CannotResolveParameterException,
    CircularDependencyException,
    UnregisteredDependency,
    UnsupportedLifetime,
    UnsupportedUnionTypeException,
)
from dicontainer.generics import GenericBinder
from dicontainer.introspection import is_closed_generic, is_union, unwrap_enumerable
from dicontainer.lifetime import Lifetime

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ResolutionContext:
    __slots__ = ("chain",)

    def __init__(self):
        self.chain = []

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.dispose()

    def dispose(self):
        self.chain.clear()


class DependencyProvider:
    """
    Provides methods to activate instances of configured contracts, resolving
    recursively the constructor dependencies of their implementations.
    """

    __slots__ = ("_configuration", "_cache", "_binder", "introspector", "strict")

    def __init__(
        self,
        configuration: DiConfiguration,
        introspector=None,
        *,
        strict: bool = False,
    ):
        self._configuration = configuration
        self._cache = InstanceCache()
        self.introspector = introspector or configuration.introspector
        self._binder = GenericBinder(self.introspector)
        self.strict = strict

    @property
    def configuration(self) -> DiConfiguration:
        return self._configuration

    @property
    def created_objects(self) -> InstanceCache:
        return self._cache

    def __contains__(self, item):
        item_type, _ = unwrap_enumerable(item)
        binding, _ = self._find_binding(item if item_type is None else item_type)
        return binding is not None

    def resolve(self, contract: Type[T]) -> T:
        """
        Resolves a contract, obtaining an instance of its implementation.

        If the contract is requested as List[X], Iterable[X], Sequence[X] or
        Tuple[X, ...], instances of all the implementations of X are returned,
        in registration order.

        :param contract: desired contract
        :return: an instance satisfying the contract
        """
        size = len(self._cache)

        with ResolutionContext() as context:
            try:
                return self._resolve(contract, context)
            except Exception:
                # objects created for a graph that cannot be completed are dropped
                self._cache.truncate(size)
                raise

    def resolve_all(self, contract: Type[T]) -> List[T]:
        """
        Returns instances of all the implementations registered for a contract,
        in registration order.
        """
        return self.resolve(List[contract])  # type: ignore

    def _find_binding(self, contract) -> Tuple[Optional[Binding], bool]:
        binding = self._configuration.find_binding(contract)

        if binding is not None:
            return binding, False

        if is_closed_generic(contract):
            binding = self._configuration.find_binding(get_origin(contract))

            if binding is not None:
                logger.debug(
                    "Resolving %s using the open generic registration of %s",
                    class_name(contract),
                    class_name(binding.contract),
                )
                return binding, True

        return None, False

    def _resolve(self, contract, context: ResolutionContext):
        item_type, collection = unwrap_enumerable(contract)

        if item_type is not None:
            contract = item_type

        binding, is_open_generic = self._find_binding(contract)

        if binding is None:
            raise UnregisteredDependency(contract)

        if collection is None and self.strict and len(binding) > 1:
            raise AmbiguousBinding(contract, [item.type for item in binding])

        chain = context.chain

        if contract in chain:
            cycle = chain[chain.index(contract) :] + [contract]
            raise CircularDependencyException(chain[-1], contract, cycle)

        chain.append(contract)
        try:
            instances = [
                self._create(implementation, contract, is_open_generic, context)
                for implementation in binding
            ]
        finally:
            chain.pop()

        if collection is not None:
            return collection(instances)

        return instances[0]

    def _create(
        self,
        implementation: Implementation,
        contract,
        is_open_generic: bool,
        context: ResolutionContext,
    ):
        activation_type = (
            self._binder.close_implementation(implementation.type, contract)
            if is_open_generic
            else implementation.type
        )
        lifetime = self._configuration.lifetime_of(implementation.type)

        if lifetime is Lifetime.SINGLETON:
            record = self._cache.get_singleton(activation_type)

            if record is not None:
                logger.debug("Reusing singleton %s", class_name(activation_type))
                return record.instance
        elif lifetime is not Lifetime.TRANSIENT:
            raise UnsupportedLifetime(lifetime)

        args, kwargs = self._resolve_dependencies(
            implementation.type, contract, context
        )
        instance = self.introspector.instantiate(activation_type, args, kwargs)

        logger.debug(
            "Activated %s for %s (%s)",
            class_name(activation_type),
            class_name(contract),
            lifetime.name,
        )

        self._cache.add(
            activation_type,
            contract,
            instance if lifetime is Lifetime.SINGLETON else None,
        )
        return instance

    def _resolve_dependencies(
        self, concrete_type, contract, context: ResolutionContext
    ) -> Tuple[List[Any], Dict[str, Any]]:
        args: List[Any] = []
        kwargs: Dict[str, Any] = {}

        for dependency in self.introspector.get_dependencies(concrete_type):
            param_type = dependency.annotation

            if param_type is Parameter.empty:
                if dependency.has_default:
                    continue
                raise CannotResolveParameterException(dependency.name, concrete_type)

            if is_union(param_type):
                if dependency.has_default:
                    continue
                # NB: Union and Optional types resolution is not implemented
                raise UnsupportedUnionTypeException(dependency.name, concrete_type)

            param_type = self._binder.close(contract, param_type)

            if dependency.has_default and param_type not in self:
                continue

            value = self._resolve(param_type, context)

            if dependency.positional_only:
                args.append(value)
            else:
                kwargs[dependency.name] = value

        return args, kwargs
