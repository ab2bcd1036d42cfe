"""Item list, get, create."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from api.deps import get_item_store, require_item
from repositories import StoreProtocol
from schemas.records import Item
from schemas.requests import ItemCreate

router = APIRouter(prefix="/items", tags=["items"])


@router.get("", response_model=list[Item], response_model_exclude_none=True)
def list_items(items: Annotated[StoreProtocol[Item], Depends(get_item_store)]):
    return items.list()


@router.get("/{item_id}", response_model=Item, response_model_exclude_none=True)
def get_item(item: Annotated[Item, Depends(require_item)]):
    return item


@router.post(
    "",
    response_model=Item,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
def create_item(
    data: ItemCreate,
    items: Annotated[StoreProtocol[Item], Depends(get_item_store)],
):
    return items.create(data)
