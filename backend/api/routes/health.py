from datetime import datetime, timezone
from typing import Annotated

from fastapi import APIRouter, Depends, Request

from api.deps import get_stores
from store import Stores

router = APIRouter(tags=["health"])


@router.get("/health")
def health(request: Request, stores: Annotated[Stores, Depends(get_stores)]):
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": request.app.version,
        "records": {"items": len(stores.items), "users": len(stores.users)},
    }
