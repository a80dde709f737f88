"""User API: registry sync and the caller's own record."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.v1.dependencies import get_current_user
from app.application.dtos.user import UserResult
from app.schemas.user import SyncStatusResponse, UserResponse

router = APIRouter()


@router.get("/sync", response_model=SyncStatusResponse)
async def sync_user(
    _: Annotated[UserResult, Depends(get_current_user)],
):
    """Upsert the caller into the user registry (done by the auth dependency)."""
    return SyncStatusResponse()


@router.get("/me", response_model=UserResponse)
async def get_me(
    current_user: Annotated[UserResult, Depends(get_current_user)],
):
    """Return the caller's registry record as stored after this request's sync."""
    return UserResponse.model_validate(current_user)
