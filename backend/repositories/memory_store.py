"""
In-memory implementation of StoreProtocol.
Keeps records in insertion order and hands out sequential string ids ("1", "2", ...).
Nothing survives a process restart.
"""

import logging
import threading
from typing import Any, Generic, Mapping, Union

from pydantic import BaseModel

from .base import RecordNotFound, RecordT

logger = logging.getLogger(__name__)


class MemoryStore(Generic[RecordT]):
    """Ordered list of records of one type plus the next-id counter."""

    def __init__(self, record_type: type[RecordT], resource: str):
        self.record_type = record_type
        self.resource = resource
        self._records: list[RecordT] = []
        self._next_id = 1
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._records)

    def get(self, record_id: str) -> RecordT:
        """Return the record whose id equals record_id exactly, or raise RecordNotFound."""
        with self._lock:
            for record in self._records:
                if record.id == record_id:
                    return record
        logger.debug("%s lookup miss: %r", self.resource, record_id)
        raise RecordNotFound(self.resource, record_id)

    def create(self, fields: Union[BaseModel, Mapping[str, Any]]) -> RecordT:
        """Store a new record built from fields as given and return it.

        Fields are not re-validated here: empty strings, negative numbers and
        values duplicated across records are all kept verbatim.
        """
        if isinstance(fields, BaseModel):
            data = fields.model_dump()
        else:
            data = dict(fields)
        data.pop("id", None)
        with self._lock:
            record = self.record_type(id=str(self._next_id), **data)
            self._next_id += 1
            self._records.append(record)
        logger.info("Created %s %s", self.resource, record.id)
        return record

    # Keep last: shadows the builtin list inside the class body.
    def list(self) -> list[RecordT]:
        """All records in creation order, as a new list."""
        with self._lock:
            return self._records.copy()
