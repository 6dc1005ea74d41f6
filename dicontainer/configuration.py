import logging
from typing import Any, Dict, Iterator, List, Optional, Tuple

from dicontainer.common import class_name
from dicontainer.errors import (
    InvalidRegistration,
    UnregisteredDependency,
    UnsupportedLifetime,
)
from dicontainer.introspection import ReflectionIntrospector
from dicontainer.lifetime import Lifetime

logger = logging.getLogger(__name__)


class Implementation:
    __slots__ = ("type", "lifetime")

    def __init__(self, _type, lifetime: Lifetime):
        self.type = _type
        self.lifetime = lifetime

    def __repr__(self):
        return f"<{self.lifetime.name.title()} {class_name(self.type)}>"


class Binding:
    """
    Association between a contract and its implementations, in registration
    order.
    """

    __slots__ = ("contract", "implementations")

    def __init__(
        self, contract, implementations: Optional[List[Implementation]] = None
    ):
        self.contract = contract
        self.implementations = implementations or []

    def __repr__(self):
        return f"<Binding {class_name(self.contract)} {self.implementations!r}>"

    def __len__(self):
        return len(self.implementations)

    def __iter__(self) -> Iterator[Implementation]:
        yield from self.implementations

    def get(self, implementation_type) -> Optional[Implementation]:
        for item in self.implementations:
            if item.type == implementation_type:
                return item
        return None


class DiConfiguration:
    """
    Configuration of contracts and the implementations that satisfy them.
    """

    __slots__ = ("_bindings", "introspector")

    def __init__(self, introspector=None):
        self._bindings: Dict[Any, Binding] = {}
        self.introspector = introspector or ReflectionIntrospector()

    def __iter__(self) -> Iterator[Tuple[Any, Binding]]:
        yield from self._bindings.items()

    def __contains__(self, key):
        return key in self._bindings

    def __len__(self):
        return len(self._bindings)

    def register_transient(
        self, contract: Any, implementation: Any = None
    ) -> "DiConfiguration":
        """
        Registers an implementation for a contract, to be instantiated every time
        it is resolved. If a single type is given, it is registered for itself.

        :param contract: registered contract
        :param implementation: concrete class, it must be assignable to the contract
        :return: the configuration itself
        """
        return self.register(contract, implementation, Lifetime.TRANSIENT)

    def register_singleton(
        self, contract: Any, implementation: Any = None
    ) -> "DiConfiguration":
        """
        Registers an implementation for a contract, to be instantiated once and
        reused for the whole life of the provider. If a single type is given, it
        is registered for itself.

        :param contract: registered contract
        :param implementation: concrete class, it must be assignable to the contract
        :return: the configuration itself
        """
        return self.register(contract, implementation, Lifetime.SINGLETON)

    def register(
        self,
        contract: Any,
        implementation: Any = None,
        lifetime: Lifetime = Lifetime.TRANSIENT,
    ) -> "DiConfiguration":
        """
        Registers an implementation for a contract, with the given lifetime.
        Registering the same implementation twice for a contract has no effect;
        registering different implementations for the same contract keeps all of
        them, in order.

        :param contract: registered contract
        :param implementation: concrete class, it must be assignable to the contract
        :param lifetime: lifetime of the instances
        :return: the configuration itself
        """
        if implementation is None:
            implementation = contract

        if not isinstance(lifetime, Lifetime):
            raise UnsupportedLifetime(lifetime)

        self._validate(contract, implementation)

        binding = self._bindings.get(contract)

        if binding is None:
            self._bindings[contract] = Binding(
                contract, [Implementation(implementation, lifetime)]
            )
            logger.debug(
                "Registered %s for %s (%s)",
                class_name(implementation),
                class_name(contract),
                lifetime.name,
            )
            return self

        if binding.get(implementation) is not None:
            logger.debug(
                "%s is already registered for %s",
                class_name(implementation),
                class_name(contract),
            )
            return self

        binding.implementations.append(Implementation(implementation, lifetime))
        logger.debug(
            "Registered %s for %s (%s), %d implementations",
            class_name(implementation),
            class_name(contract),
            lifetime.name,
            len(binding),
        )
        return self

    def _validate(self, contract, implementation) -> None:
        if not self.introspector.is_concrete(implementation):
            raise InvalidRegistration(
                contract,
                implementation,
                "the implementation must be a concrete class, "
                "not abstract or a protocol",
            )

        if not self.introspector.is_assignable(contract, implementation):
            raise InvalidRegistration(
                contract,
                implementation,
                "the implementation is not assignable to the contract",
            )

    def find_binding(self, contract) -> Optional[Binding]:
        return self._bindings.get(contract)

    def lifetime_of(self, implementation_type) -> Lifetime:
        """
        Returns the lifetime of a registered implementation. If the same
        implementation is registered for more contracts, the first registration
        wins.
        """
        for binding in self._bindings.values():
            item = binding.get(implementation_type)
            if item is not None:
                return item.lifetime

        raise UnregisteredDependency(implementation_type)

    def build_provider(self, *, strict: bool = False):
        """
        Builds and returns a provider that can be used to activate and obtain
        services configured here.

        :param strict: if True, resolving a single instance of a contract bound to
        more implementations is an error
        :return: dependency provider
        """
        from dicontainer.provider import DependencyProvider

        return DependencyProvider(self, strict=strict)
