"""Request/response schemas for admin user management."""

from pydantic import BaseModel, Field

from gamestore.models.enums import Role
from gamestore.schemas.auth import UserOut


class RoleUpdate(BaseModel):
    role: Role


class UserResponse(BaseModel):
    success: bool = True
    message: str | None = None
    data: UserOut


class UsersListResponse(BaseModel):
    """Response for GET /users (admin only)."""

    success: bool = True
    count: int = Field(..., ge=0)
    data: list[UserOut]
