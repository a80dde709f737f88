"""User API schemas."""

from pydantic import BaseModel, ConfigDict, Field


class UserResponse(BaseModel):
    """Local user record (id is the identity provider's subject id)."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str | None = None


class SyncStatusResponse(BaseModel):
    """Response for GET /users/sync (the sync itself runs in the auth dependency)."""

    status: str = Field(default="synced")
