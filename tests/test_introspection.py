from inspect import Parameter
from typing import (
    Collection,
    Dict,
    Iterable,
    List,
    Optional,
    Sequence,
    Tuple,
    Union,
)

import pytest

from dicontainer import ReflectionIntrospector
from dicontainer.common import class_name
from dicontainer.introspection import (
    get_free_parameters,
    get_generic_bases,
    get_type_origin,
    is_closed_generic,
    is_union,
    unwrap_enumerable,
)
from tests.examples import (
    BoundStore,
    ConstrainedStore,
    Customer,
    CustomerRepository,
    EnglishGreeter,
    FooDBContext,
    Greeter,
    ICatsRepository,
    IClock,
    InMemoryCatsRepository,
    ItemHolder,
    IRepository,
    IValidator,
    KeywordOnly,
    Order,
    PositionalOnly,
    Repository,
    ServiceSettings,
    SystemClock,
    T,
    WithDefaults,
    WithNoneDefault,
    WithVariadic,
)


@pytest.fixture
def introspector():
    return ReflectionIntrospector()


def test_get_dependencies(introspector):
    dependencies = introspector.get_dependencies(FooDBContext)

    assert [(item.name, item.annotation) for item in dependencies] == [
        ("settings", ServiceSettings)
    ]
    assert dependencies[0].has_default is False


def test_get_dependencies_without_init(introspector):
    assert introspector.get_dependencies(SystemClock) == []


def test_get_dependencies_of_init_without_parameters(introspector):
    assert introspector.get_dependencies(InMemoryCatsRepository) == []


def test_get_dependencies_kinds(introspector):
    (clock,) = introspector.get_dependencies(KeywordOnly)
    assert clock.kind is Parameter.KEYWORD_ONLY

    clock, settings = introspector.get_dependencies(PositionalOnly)
    assert clock.positional_only is True
    assert settings.positional_only is False


def test_get_dependencies_ignores_variadic_parameters(introspector):
    assert [item.name for item in introspector.get_dependencies(WithVariadic)] == [
        "clock"
    ]


def test_get_dependencies_defaults(introspector):
    settings, retries, clock = introspector.get_dependencies(WithDefaults)

    assert settings.has_default is False
    assert retries.has_default is True
    assert retries.default == 3
    assert clock.annotation is IClock


def test_get_dependencies_of_generic_alias(introspector):
    (validator,) = introspector.get_dependencies(Repository[Order])

    assert validator.annotation == IValidator[T]


def test_get_dependencies_of_none_default(introspector):
    (clock,) = introspector.get_dependencies(WithNoneDefault)

    assert clock.annotation is IClock
    assert clock.default is None


@pytest.mark.parametrize(
    "value,expected_result",
    [
        (SystemClock, True),
        (Repository, True),
        (Repository[Order], True),
        (EnglishGreeter, True),
        (IClock, False),
        (IRepository, False),
        (Greeter, False),
        (SystemClock(), False),
        ("SystemClock", False),
    ],
)
def test_is_concrete(introspector, value, expected_result):
    assert introspector.is_concrete(value) is expected_result


@pytest.mark.parametrize(
    "contract,value,expected_result",
    [
        (IClock, SystemClock, True),
        (SystemClock, SystemClock, True),
        (ICatsRepository, SystemClock, False),
        (IRepository, Repository, True),
        (IRepository[Order], Repository[Order], True),
        (IRepository[Order], Repository, True),
        (IRepository[Customer], CustomerRepository, True),
        (IRepository[Order], CustomerRepository, False),
        (IRepository, CustomerRepository, False),
        (IRepository, Repository[Order], False),
        (IRepository[Customer], Repository[Order], False),
        (ConstrainedStore[Order], ConstrainedStore, True),
        (BoundStore[Customer], BoundStore, False),
        (Greeter, EnglishGreeter, True),
        (Greeter, SystemClock, False),
        ("IClock", SystemClock, False),
    ],
)
def test_is_assignable(introspector, contract, value, expected_result):
    assert introspector.is_assignable(contract, value) is expected_result


def test_make_generic_type(introspector):
    assert introspector.make_generic_type(Repository, [Order]) == Repository[Order]
    assert introspector.make_generic_type(Dict, [str, Order]) == Dict[str, Order]


def test_get_generic_bases():
    assert list(get_generic_bases(Repository[Order]))[:2] == [
        (Repository, (Order,)),
        (IRepository, (Order,)),
    ]
    assert (IRepository, (Customer,)) in list(get_generic_bases(CustomerRepository))
    assert (IRepository, (T,)) in list(get_generic_bases(ItemHolder))


@pytest.mark.parametrize(
    "value,expected_result",
    [
        (List[IClock], (IClock, list)),
        (Iterable[IClock], (IClock, list)),
        (Sequence[IClock], (IClock, list)),
        (Collection[IClock], (IClock, list)),
        (Tuple[IClock, ...], (IClock, tuple)),
        (Tuple[IClock, Order], (None, None)),
        (Dict[str, IClock], (None, None)),
        (IRepository[Order], (None, None)),
        (IClock, (None, None)),
    ],
)
def test_unwrap_enumerable(value, expected_result):
    assert unwrap_enumerable(value) == expected_result


def test_type_helpers():
    assert get_type_origin(IRepository[Order]) is IRepository
    assert get_type_origin(IClock) is IClock
    assert is_closed_generic(IRepository[Order]) is True
    assert is_closed_generic(IRepository) is False
    assert get_free_parameters(IRepository) == (T,)
    assert get_free_parameters(T) == (T,)
    assert get_free_parameters(IRepository[Order]) == ()
    assert get_free_parameters(IClock) == ()
    assert is_union(Optional[IClock]) is True
    assert is_union(Union[IClock, Order]) is True
    assert is_union(List[IClock]) is False


@pytest.mark.parametrize(
    "value,expected_result",
    [
        (IClock, "IClock"),
        (IRepository[Order], "IRepository[Order]"),
        (List[IRepository[Order]], "list[IRepository[Order]]"),
        (Tuple[IClock, ...], "tuple[IClock, ...]"),
        (T, "T"),
        ("IClock", "IClock"),
    ],
)
def test_class_name(value, expected_result):
    assert class_name(value) == expected_result
