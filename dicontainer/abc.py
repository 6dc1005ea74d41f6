"""
This module defines base types for dependency injection.
"""

from typing import Any, Dict, List, Protocol, Sequence, Type, TypeVar, Union

from dicontainer.dependency import Dependency
from dicontainer.lifetime import Lifetime

T = TypeVar("T")


class ContainerProtocol(Protocol):
    """
    Generic interface of DI Container that can register and resolve services,
    and tell if a type is configured.
    """

    def register(
        self,
        obj_type: Union[Type, Any],
        sub_type: Any = None,
        lifetime: Lifetime = Lifetime.TRANSIENT,
    ):
        """Registers a type in the container, with the given lifetime."""

    def resolve(self, obj_type: Union[Type[T], Any]) -> T:  # type: ignore
        """Activates an instance of the given type."""

    def __contains__(self, item) -> bool:  # type: ignore
        """
        Returns a value indicating whether a given type is configured in this container.
        """


class TypeIntrospector(Protocol):
    """
    Capability used by the container to inspect and activate types: it reads
    constructor dependencies, checks registrations, closes open generic types and
    creates instances.
    """

    def get_dependencies(self, concrete_type: Any) -> List[Dependency]:
        """
        Returns the dependencies declared by the constructor of the given type,
        in declaration order. A type without its own constructor has none.
        """

    def is_concrete(self, obj_type: Any) -> bool:
        """Returns a value indicating whether the given type can be instantiated."""

    def is_assignable(self, contract: Any, obj_type: Any) -> bool:
        """
        Returns a value indicating whether instances of the given type satisfy
        the given contract.
        """

    def make_generic_type(self, generic_type: Any, type_args: Sequence[Any]) -> Any:
        """Returns the closed type obtained binding an open generic type."""

    def instantiate(
        self, obj_type: Any, args: Sequence[Any], kwargs: Dict[str, Any]
    ) -> Any:
        """Creates an instance of the given type, with the given arguments."""
