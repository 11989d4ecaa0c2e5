from contextlib import contextmanager
from dataclasses import replace
from typing import Generic, Iterator, TypeVar

from app.core.errors import NotFoundError
from app.registry.ids import IdentityGenerator
from app.registry.locks import RWLock

T = TypeVar("T")


class ReadView(Generic[T]):
    """Access to a store's records while its lock is held by the caller."""

    def __init__(self, kind: str, records: dict[str, T]):
        self.kind = kind
        self._records = records

    def find(self, entity_id: str) -> T | None:
        return self._records.get(entity_id)

    def get(self, entity_id: str) -> T:
        record = self._records.get(entity_id)
        if record is None:
            raise NotFoundError(self.kind, entity_id)
        return record

    def values(self) -> list[T]:
        return list(self._records.values())


class WriteView(ReadView[T]):
    def put(self, record: T) -> T:
        # only records that already exist may be replaced through a view
        self.get(record.id)
        self._records[record.id] = record
        return record


class EntityStore(Generic[T]):
    """Thread-safe keyed container for one kind of record.

    Records are frozen dataclasses with an ``id`` field, so whatever the
    store hands out is a snapshot and cannot be used to change its state.
    """

    def __init__(self, kind: str, ids: IdentityGenerator | None = None):
        self.kind = kind
        self._records: dict[str, T] = {}
        self._lock = RWLock()
        self._ids = ids or IdentityGenerator(kind)

    @contextmanager
    def reading(self) -> Iterator[ReadView[T]]:
        with self._lock.read():
            yield ReadView(self.kind, self._records)

    @contextmanager
    def writing(self) -> Iterator[WriteView[T]]:
        with self._lock.write():
            yield WriteView(self.kind, self._records)

    def create(self, record: T) -> T:
        with self._lock.write():
            stored = replace(record, id=self._ids.next_id())
            self._records[stored.id] = stored
            return stored

    def get(self, entity_id: str) -> T:
        with self.reading() as view:
            return view.get(entity_id)

    def list(self) -> list[T]:
        with self.reading() as view:
            return view.values()

    def count(self) -> int:
        with self._lock.read():
            return len(self._records)

    def update(self, entity_id: str, record: T) -> T:
        with self.writing() as view:
            # the id in the path wins over anything the caller put in the record
            return view.put(replace(record, id=entity_id))

    def delete(self, entity_id: str) -> None:
        with self._lock.write():
            if entity_id not in self._records:
                raise NotFoundError(self.kind, entity_id)
            del self._records[entity_id]
