"""User list, get, create."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from api.deps import get_user_store, require_user
from repositories import StoreProtocol
from schemas.records import User
from schemas.requests import UserCreate

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[User], response_model_exclude_none=True)
def list_users(users: Annotated[StoreProtocol[User], Depends(get_user_store)]):
    return users.list()


@router.get("/{user_id}", response_model=User, response_model_exclude_none=True)
def get_user(user: Annotated[User, Depends(require_user)]):
    return user


@router.post(
    "",
    response_model=User,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
def create_user(
    data: UserCreate,
    users: Annotated[StoreProtocol[User], Depends(get_user_store)],
):
    return users.create(data)
