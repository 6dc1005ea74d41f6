from typing import Any, TypeVar, get_args, get_origin

from dicontainer.errors import GenericParameterMismatch
from dicontainer.introspection import get_free_parameters, get_type_origin


class GenericBinder:
    """
    Binds the type variables used by open generic implementations to the type
    arguments of a requested contract, matching type variables by name against
    the parameters of the contract's generic definition.

    For example, when Repository[Order] is requested and the implementation is
    SqlRepository(Repository[T]), T is bound to Order, both for the constructor
    parameters of SqlRepository and for the activated type SqlRepository[Order].
    """

    __slots__ = ("introspector",)

    def __init__(self, introspector):
        self.introspector = introspector

    def bind_parameter(self, contract, type_parameter: TypeVar) -> Any:
        """
        Returns the concrete type to use for a type variable, reading the type
        argument at the same position in the requested contract.

        :param contract: requested contract, like Repository[Order]
        :param type_parameter: type variable declared by the implementation
        :return: concrete type
        """
        definition = get_type_origin(contract)
        names = [
            getattr(item, "__name__", None)
            for item in getattr(definition, "__parameters__", ())
        ]

        try:
            index = names.index(type_parameter.__name__)
        except ValueError:
            raise GenericParameterMismatch(type_parameter, contract) from None

        type_args = get_args(contract)

        if index < len(type_args):
            return type_args[index]

        # the contract was requested without type arguments
        constraints = getattr(type_parameter, "__constraints__", ())
        if constraints:
            return constraints[0]

        bound = getattr(type_parameter, "__bound__", None)
        if bound is not None:
            return bound

        raise GenericParameterMismatch(type_parameter, contract)

    def close(self, contract, annotation) -> Any:
        """
        Returns the given annotation with its type variables bound, using the
        requested contract. Annotations without type variables are returned as-is.
        """
        if isinstance(annotation, TypeVar):
            return self.bind_parameter(contract, annotation)

        if get_origin(annotation) is None:
            return annotation

        parameters = get_free_parameters(annotation)

        if not parameters:
            return annotation

        return self.introspector.make_generic_type(
            annotation, [self.bind_parameter(contract, item) for item in parameters]
        )

    def close_implementation(self, implementation, contract) -> Any:
        """
        Returns the implementation type to activate for a requested closed
        contract, like SqlRepository[Order] for Repository[Order].
        """
        parameters = get_free_parameters(implementation)

        if not parameters:
            return implementation

        return self.introspector.make_generic_type(
            implementation,
            [self.bind_parameter(contract, item) for item in parameters],
        )
