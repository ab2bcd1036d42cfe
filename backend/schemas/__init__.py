"""Pydantic schemas for API requests and stored records."""

from .records import Item, Record, User
from .requests import ItemCreate, UserCreate

__all__ = [
    "Item",
    "ItemCreate",
    "Record",
    "User",
    "UserCreate",
]
