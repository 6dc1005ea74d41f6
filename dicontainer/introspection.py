import collections.abc
import sys
import types
from inspect import Parameter, Signature, isabstract, isclass
from typing import (
    Any,
    Dict,
    Generic,
    Iterator,
    List,
    Optional,
    Protocol,
    Sequence,
    Tuple,
    Type,
    TypeVar,
    Union,
    get_args,
    get_origin,
    get_type_hints,
)

from dicontainer.common import get_obj_globals, get_obj_locals
from dicontainer.dependency import Dependency

_ENUMERABLE_ORIGINS = {
    list,
    collections.abc.Iterable,
    collections.abc.Sequence,
    collections.abc.Collection,
}

_UNION_TYPES = tuple(
    item for item in (Union, getattr(types, "UnionType", None)) if item is not None
)

_VARIADIC_KINDS = (Parameter.VAR_POSITIONAL, Parameter.VAR_KEYWORD)


def get_type_origin(obj_type):
    """
    Returns the unbound generic definition of a subscripted generic type,
    or the type itself.
    """
    return get_origin(obj_type) or obj_type


def get_free_parameters(obj_type) -> Tuple[Any, ...]:
    """Returns the type variables not yet bound in the given type."""
    if isinstance(obj_type, TypeVar):
        return (obj_type,)
    return tuple(getattr(obj_type, "__parameters__", None) or ())


def is_closed_generic(obj_type) -> bool:
    return get_origin(obj_type) is not None and bool(get_args(obj_type))


def is_union(annotation) -> bool:
    return get_origin(annotation) in _UNION_TYPES


def unwrap_enumerable(obj_type) -> Tuple[Optional[Any], Optional[Type]]:
    """
    Returns the item type and the collection class to build, for types that
    request all implementations of a contract, like List[T], Iterable[T],
    Sequence[T] or Tuple[T, ...]. Returns (None, None) for any other type.
    """
    origin = get_origin(obj_type)
    args = get_args(obj_type)

    if origin in _ENUMERABLE_ORIGINS and len(args) == 1:
        return args[0], list

    if origin is tuple and len(args) == 2 and args[1] is Ellipsis:
        return args[0], tuple

    return None, None


def _substitute(annotation, substitutions: Dict[Any, Any]):
    if isinstance(annotation, TypeVar):
        return substitutions.get(annotation, annotation)

    parameters = get_free_parameters(annotation)
    if parameters and get_origin(annotation) is not None:
        return annotation[tuple(substitutions.get(item, item) for item in parameters)]
    return annotation


def get_generic_bases(obj_type) -> Iterator[Tuple[Any, Tuple[Any, ...]]]:
    """
    Yields the generic definition and the type arguments of the given type and
    of each of its bases, replacing the type variables bound along the way.
    For example, for SqlRepository[Order] declared as SqlRepository(Repository[T]),
    it yields (SqlRepository, (Order,)) then (Repository, (Order,)).
    """
    cls = get_type_origin(obj_type)
    return _walk_bases(cls, get_args(obj_type) or get_free_parameters(cls))


def _walk_bases(cls, args: Tuple[Any, ...]):
    yield cls, args

    substitutions = dict(zip(get_free_parameters(cls), args))

    for base in cls.__dict__.get("__orig_bases__", cls.__bases__):
        origin = get_origin(base)

        if origin is None:
            if isclass(base) and base is not object:
                yield from _walk_bases(base, get_free_parameters(base))
            continue

        if origin is Generic or origin is Protocol or not isclass(origin):
            continue

        yield from _walk_bases(
            origin, tuple(_substitute(item, substitutions) for item in get_args(base))
        )


def _satisfies(arg, expected, open_parameters) -> bool:
    if arg == expected:
        return True

    if not isinstance(arg, TypeVar) or arg not in open_parameters:
        return False

    if arg.__constraints__:
        return expected in arg.__constraints__

    bound = arg.__bound__
    if bound is not None and isclass(bound) and isclass(expected):
        return issubclass(expected, bound)
    return True


def _get_type_hints(init, globalns, localns) -> Dict[str, Any]:
    if sys.version_info < (3, 11):
        # older interpreters wrap annotations of parameters defaulting to None
        # in Optional, when reading them from the function itself
        init = types.SimpleNamespace(
            __annotations__=getattr(init, "__annotations__", None) or {}
        )
    return get_type_hints(init, globalns, localns)


class ReflectionIntrospector:
    """
    Inspects types using their constructor signature and type hints.
    """

    __slots__ = ()

    def get_dependencies(self, concrete_type) -> List[Dependency]:
        concrete_type = get_type_origin(concrete_type)
        init = concrete_type.__init__

        if init is object.__init__:
            return []

        sig = Signature.from_callable(init)
        annotations = _get_type_hints(
            init,
            get_obj_globals(concrete_type)
            or vars(sys.modules[concrete_type.__module__]),
            get_obj_locals(concrete_type),
        )

        # the first parameter is the instance being initialized
        params = list(sig.parameters.values())[1:]

        return [
            Dependency(
                param.name,
                annotations.get(param.name, Parameter.empty),
                param.kind,
                param.default,
            )
            for param in params
            if param.kind not in _VARIADIC_KINDS
        ]

    def is_concrete(self, obj_type) -> bool:
        cls = get_type_origin(obj_type)
        return (
            isclass(cls)
            and not isabstract(cls)
            and not getattr(cls, "_is_protocol", False)
        )

    def is_assignable(self, contract, obj_type) -> bool:
        contract_class = get_type_origin(contract)
        cls = get_type_origin(obj_type)

        if not isclass(contract_class) or not isclass(cls):
            return False
        try:
            if not issubclass(cls, contract_class):
                return False
        except TypeError:
            # protocols that are not runtime checkable support only nominal checks
            if contract_class not in cls.__mro__:
                return False

        if is_closed_generic(contract):
            return self._matches_closed_contract(contract, obj_type)

        # an open generic definition is satisfied only by open implementations
        if get_free_parameters(contract):
            return bool(get_free_parameters(obj_type))
        return True

    def _matches_closed_contract(self, contract, obj_type) -> bool:
        contract_class = get_origin(contract)
        contract_args = get_args(contract)
        open_parameters = get_free_parameters(obj_type)
        candidates = [
            args
            for origin, args in get_generic_bases(obj_type)
            if origin is contract_class
        ]

        if not candidates:
            # structural match of a runtime checkable protocol
            return bool(getattr(contract_class, "_is_protocol", False))

        return any(
            len(args) == len(contract_args)
            and all(
                _satisfies(arg, expected, open_parameters)
                for arg, expected in zip(args, contract_args)
            )
            for args in candidates
        )

    def make_generic_type(self, generic_type, type_args: Sequence[Any]):
        args = tuple(type_args)
        return generic_type[args[0] if len(args) == 1 else args]

    def instantiate(self, obj_type, args: Sequence[Any], kwargs: Dict[str, Any]):
        return obj_type(*args, **kwargs)
