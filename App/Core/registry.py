# Core/registry.py
"""Thread-safe, in-memory registry of unique names.

The registry is the only shared mutable state of the service. Every read and
write goes through a single lock, so the check-and-insert performed by
``insert_if_absent`` is atomic with respect to every other operation.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Protocol, Union, runtime_checkable
from threading import Lock


@dataclass(frozen=True)
class NameRecord:
    """A registered name. Its identity is ``name`` alone."""
    name: str


def record_key(record: NameRecord) -> str:
    """Return the identity key the registry stores ``record`` under."""
    return record.name


@dataclass(frozen=True)
class Created:
    name: str


@dataclass(frozen=True)
class AlreadyExists:
    name: str


InsertOutcome = Union[Created, AlreadyExists]


@runtime_checkable
class NameRegistry(Protocol):
    def snapshot(self) -> List[NameRecord]: ...
    def insert_if_absent(self, name: str) -> InsertOutcome: ...


class InMemoryNameRegistry(NameRegistry):
    """
    Lock-guarded name registry shared by the FastAPI worker threads.
    Contents live for the lifetime of the process and are lost on restart.
    """
    def __init__(
        self,
        initial: Optional[Iterable[str]] = None,
        key: Callable[[NameRecord], str] = record_key,
    ):
        self._key = key
        self._records: Dict[str, NameRecord] = {}
        self._lock = Lock()
        for name in initial or []:
            self.insert_if_absent(name)

    def snapshot(self) -> List[NameRecord]:
        """Return a copy of all records, in insertion order."""
        with self._lock:
            return list(self._records.values())

    def insert_if_absent(self, name: str) -> InsertOutcome:
        """Register ``name`` unless a record with the same key is stored.

        Returns ``Created`` for a new name, otherwise ``AlreadyExists``
        carrying the stored record's name.
        """
        record = NameRecord(name=name)
        key = self._key(record)
        with self._lock:
            existing = self._records.get(key)
            if existing is not None:
                return AlreadyExists(existing.name)
            self._records[key] = record
        return Created(record.name)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        key = self._key(NameRecord(name=name))
        with self._lock:
            return key in self._records

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
