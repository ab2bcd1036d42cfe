"""Persistence layer: abstract interface and implementations."""

from .base import RecordNotFound, StoreProtocol
from .memory_store import MemoryStore

__all__ = ["MemoryStore", "RecordNotFound", "StoreProtocol"]
