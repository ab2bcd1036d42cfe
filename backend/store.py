"""
Catalog record stores.
One in-memory store per resource, created together when the app starts:
  items -> MemoryStore[Item]
  users -> MemoryStore[User]
State lives for the process lifetime only.
"""

import logging
from dataclasses import dataclass, field

from repositories import MemoryStore
from schemas.records import Item, User

logger = logging.getLogger(__name__)


def _item_store() -> MemoryStore[Item]:
    return MemoryStore(Item, "Item")


def _user_store() -> MemoryStore[User]:
    return MemoryStore(User, "User")


@dataclass
class Stores:
    items: MemoryStore[Item] = field(default_factory=_item_store)
    users: MemoryStore[User] = field(default_factory=_user_store)


def create_stores() -> Stores:
    """Fresh, empty stores for every resource (ids start at "1")."""
    stores = Stores()
    logger.info("Initialised record stores: items, users")
    return stores
