"""
This example illustrates how to register a concrete type by base type, with
singleton lifetime, and its activation by base type.

This pattern helps writing code that is decoupled (e.g. business layer logic separated
from exact implementations of data access logic).
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass

from dicontainer import Container


@dataclass
class Cat:
    id: str
    name: str


class CatsRepository(ABC):
    @abstractmethod
    def get_cat(self, cat_id: str) -> Cat:
        """Gets information of a cat by ID."""


class InMemoryCatsRepository(CatsRepository):
    def __init__(self):
        self._cats = {"1": Cat("1", "Celine")}

    def get_cat(self, cat_id: str) -> Cat:
        return self._cats[cat_id]


class GetCatHandler:
    def __init__(self, repository: CatsRepository):
        self.repository = repository


container = Container()

container.add_singleton(CatsRepository, InMemoryCatsRepository)
container.add_transient(GetCatHandler)

handler_1 = container.resolve(GetCatHandler)
handler_2 = container.resolve(GetCatHandler)

assert isinstance(handler_1.repository, InMemoryCatsRepository)
assert handler_1 is not handler_2
assert handler_1.repository is handler_2.repository
assert handler_1.repository.get_cat("1").name == "Celine"
