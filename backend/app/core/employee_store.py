"""Ordered employee record store.

Records are kept most-recent-first; that order is what list queries see
before any sort is applied. The store holds no locks of its own, callers
that mutate it from several threads serialize access themselves.
"""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod
from collections.abc import Iterable

from app.models.employee import Employee


def generate_employee_id() -> str:
    return uuid.uuid4().hex


class EmployeeStore(ABC):
    @abstractmethod
    def insert_front(self, record: Employee) -> None: ...

    @abstractmethod
    def replace(self, employee_id: str, record: Employee) -> bool: ...

    @abstractmethod
    def remove_by_id(self, employee_id: str) -> bool: ...

    @abstractmethod
    def find_by_id(self, employee_id: str) -> Employee | None: ...

    @abstractmethod
    def all(self) -> list[Employee]:
        """Return a snapshot of every record in store order."""

    @abstractmethod
    def load(self, records: Iterable[Employee]) -> None:
        """Replace the whole contents, keeping the given order."""

    @abstractmethod
    def __len__(self) -> int: ...

    def clear(self) -> None:
        self.load([])


class InMemoryEmployeeStore(EmployeeStore):
    def __init__(self, records: Iterable[Employee] | None = None) -> None:
        self._records: list[Employee] = list(records or [])

    def _index_of(self, employee_id: str) -> int:
        for index, record in enumerate(self._records):
            if record.id == employee_id:
                return index
        return -1

    def insert_front(self, record: Employee) -> None:
        self._records.insert(0, record)

    def replace(self, employee_id: str, record: Employee) -> bool:
        index = self._index_of(employee_id)
        if index == -1:
            return False
        self._records[index] = record
        return True

    def remove_by_id(self, employee_id: str) -> bool:
        index = self._index_of(employee_id)
        if index == -1:
            return False
        del self._records[index]
        return True

    def find_by_id(self, employee_id: str) -> Employee | None:
        index = self._index_of(employee_id)
        return self._records[index] if index != -1 else None

    def all(self) -> list[Employee]:
        return list(self._records)

    def load(self, records: Iterable[Employee]) -> None:
        self._records = list(records)

    def __len__(self) -> int:
        return len(self._records)
