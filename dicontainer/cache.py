from typing import Iterator, List, Optional

from dicontainer.common import class_name


class CreatedObject:
    __slots__ = ("implementation_type", "contract_type", "instance")

    def __init__(self, implementation_type, contract_type, instance=None):
        self.implementation_type = implementation_type
        self.contract_type = contract_type
        self.instance = instance

    @property
    def is_singleton(self) -> bool:
        return self.instance is not None

    def __repr__(self):
        return (
            f"<CreatedObject {class_name(self.implementation_type)} "
            f"for {class_name(self.contract_type)}>"
        )


class InstanceCache:
    """
    Ledger of the objects created by a provider. Every activation is recorded;
    the instance is kept only for singletons, to be reused.
    """

    __slots__ = ("_records",)

    def __init__(self):
        self._records: List[CreatedObject] = []

    def __len__(self):
        return len(self._records)

    def __iter__(self) -> Iterator[CreatedObject]:
        yield from self._records

    def add(self, implementation_type, contract_type, instance=None) -> None:
        self._records.append(
            CreatedObject(implementation_type, contract_type, instance)
        )

    def get_singleton(self, implementation_type) -> Optional[CreatedObject]:
        for record in self._records:
            if (
                record.is_singleton
                and record.implementation_type == implementation_type
            ):
                return record
        return None

    def truncate(self, size: int) -> None:
        del self._records[size:]
