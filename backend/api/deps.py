"""FastAPI dependencies and require-helpers for routes."""

from typing import Annotated

from fastapi import Depends, HTTPException, Request

from repositories import RecordNotFound, StoreProtocol
from schemas.records import Item, User
from store import Stores


def get_stores(request: Request) -> Stores:
    """Return the stores attached to the running app. Use in Depends()."""
    return request.app.state.stores


def get_item_store(stores: Annotated[Stores, Depends(get_stores)]) -> StoreProtocol[Item]:
    return stores.items


def get_user_store(stores: Annotated[Stores, Depends(get_stores)]) -> StoreProtocol[User]:
    return stores.users


def require_item(
    item_id: str,
    items: Annotated[StoreProtocol[Item], Depends(get_item_store)],
) -> Item:
    """Load item by id or raise 404. Use as Depends(require_item) with item_id in path."""
    try:
        return items.get(item_id)
    except RecordNotFound:
        raise HTTPException(404, "Item not found")


def require_user(
    user_id: str,
    users: Annotated[StoreProtocol[User], Depends(get_user_store)],
) -> User:
    """Load user by id or raise 404."""
    try:
        return users.get(user_id)
    except RecordNotFound:
        raise HTTPException(404, "User not found")
