"""Request body models for Catalog API."""

from typing import Optional

from pydantic import BaseModel, Field, StrictInt


class ItemCreate(BaseModel):
    name: str = Field(min_length=2)
    description: Optional[str] = None


class UserCreate(BaseModel):
    name: str
    email: str
    age: Optional[StrictInt] = None
