"""Stored record models. Records are immutable once a store creates them."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, StrictInt


class Record(BaseModel):
    """Base for stored records: a store-assigned string id plus resource fields."""

    model_config = ConfigDict(frozen=True)

    id: str


class Item(Record):
    name: str
    description: Optional[str] = None


class User(Record):
    name: str
    email: str
    age: Optional[StrictInt] = None
