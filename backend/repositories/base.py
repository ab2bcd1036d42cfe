"""Abstract record store interface and the lookup error it raises."""

from typing import Any, Mapping, Protocol, TypeVar, Union, runtime_checkable

from pydantic import BaseModel

from schemas.records import Record

RecordT = TypeVar("RecordT", bound=Record)


class RecordNotFound(LookupError):
    """Raised by a store when no record has the requested id."""

    def __init__(self, resource: str, record_id: str):
        self.resource = resource
        self.record_id = record_id
        super().__init__(f"{resource} '{record_id}' not found")


@runtime_checkable
class StoreProtocol(Protocol[RecordT]):
    """What routes rely on: ordered listing, lookup by id, create with a fresh id."""

    resource: str

    def get(self, record_id: str) -> RecordT:
        ...

    def create(self, fields: Union[BaseModel, Mapping[str, Any]]) -> RecordT:
        ...

    def list(self) -> list[RecordT]:
        ...
