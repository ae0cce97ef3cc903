"""
Identity counters and entity stores.

``IdCounter`` mints identifiers for one collection and ``EntityStore``
keeps that collection's records, both on top of the process-wide
storage backend.  Records are stored as JSON produced by their pydantic
model, keyed by ``record.id``.  The store applies no policy: size caps
and referential checks belong to the callers.
"""

import threading
from typing import Generic, List, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel, ValidationError

from wisewords_api.app.core.errors import StorageFault
from wisewords_api.app.core.storage import StorageBackend, get_backend
from wisewords_api.app.schemas.contributor import Contributor
from wisewords_api.app.schemas.quote import Quote


RecordT = TypeVar("RecordT", bound=BaseModel)

CONTRIBUTOR_COUNTER = "contributor_id"
QUOTE_COUNTER = "quote_id"
CONTRIBUTOR_REGION = "contributors"
QUOTE_REGION = "quotes"

# Held around every read-modify-write sequence of the services.
store_lock = threading.RLock()


def encode_record(record: BaseModel) -> bytes:
    """Serialized form of a record as written to storage."""
    return record.model_dump_json().encode("utf-8")


class IdCounter:
    """Monotonic identifier generator for one collection."""

    def __init__(self, backend: StorageBackend, name: str) -> None:
        self.backend = backend
        self.name = name

    def current(self) -> int:
        return self.backend.read_counter(self.name)

    def peek(self) -> int:
        """Identifier the next ``next_id`` call will return."""
        return self.current() + 1

    def next_id(self) -> int:
        value = self.backend.increment_counter(self.name)
        if value <= 0:
            raise StorageFault(f"cannot increment id counter {self.name}")
        return value


class EntityStore(Generic[RecordT]):
    """Durable mapping from identifier to record."""

    def __init__(self, backend: StorageBackend, region: str, record_type: Type[RecordT]) -> None:
        self.backend = backend
        self.region = region
        self.record_type = record_type

    def _decode(self, payload: bytes) -> RecordT:
        try:
            return self.record_type.model_validate_json(payload)
        except ValidationError as exc:
            raise StorageFault(f"corrupt record in region {self.region}") from exc

    def insert(self, record: RecordT) -> None:
        self.backend.put(self.region, record.id, encode_record(record))

    def get(self, record_id: int) -> Optional[RecordT]:
        payload = self.backend.get(self.region, record_id)
        if payload is None:
            return None
        return self._decode(payload)

    def scan(self) -> List[Tuple[int, RecordT]]:
        return [(key, self._decode(payload)) for key, payload in self.backend.items(self.region)]

    def remove(self, record_id: int) -> Optional[RecordT]:
        payload = self.backend.pop(self.region, record_id)
        if payload is None:
            return None
        return self._decode(payload)

    def count(self) -> int:
        return self.backend.count(self.region)


def contributor_counter() -> IdCounter:
    return IdCounter(get_backend(), CONTRIBUTOR_COUNTER)


def quote_counter() -> IdCounter:
    return IdCounter(get_backend(), QUOTE_COUNTER)


def contributor_store() -> EntityStore[Contributor]:
    return EntityStore(get_backend(), CONTRIBUTOR_REGION, Contributor)


def quote_store() -> EntityStore[Quote]:
    return EntityStore(get_backend(), QUOTE_REGION, Quote)
