"""
This example illustrates how to register more implementations of the same
contract, and an open generic implementation serving every closed version of a
generic contract.
"""
from abc import ABC, abstractmethod
from typing import Generic, List, TypeVar

from dicontainer import Container

T = TypeVar("T")


class Order:
    pass


class Handler(ABC):
    @abstractmethod
    def handle(self, message: str) -> str:
        ...


class Upper(Handler):
    def handle(self, message: str) -> str:
        return message.upper()


class Reverse(Handler):
    def handle(self, message: str) -> str:
        return message[::-1]


class Repository(Generic[T], ABC):
    @abstractmethod
    def all(self) -> List[T]:
        ...


class MemoryRepository(Repository[T]):
    def __init__(self):
        self.items: List[T] = []

    def all(self) -> List[T]:
        return self.items


container = Container()

container.add_transient(Handler, Upper)
container.add_transient(Handler, Reverse)

# the first registration wins, when a single instance is requested
assert isinstance(container.resolve(Handler), Upper)

handlers = container.resolve(List[Handler])

assert [handler.handle("cat") for handler in handlers] == ["CAT", "tac"]


container.add_singleton(Repository, MemoryRepository)

orders = container.resolve(Repository[Order])

assert isinstance(orders, MemoryRepository)
assert orders.__orig_class__ == MemoryRepository[Order]
assert orders is container.resolve(Repository[Order])
