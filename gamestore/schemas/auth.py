"""Request/response schemas for auth endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from gamestore.core.security import (
    NAME_MAX_LEN,
    NAME_MIN_LEN,
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
)
from gamestore.models.enums import Role


class RegisterRequest(BaseModel):
    """New account details."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=NAME_MIN_LEN, max_length=NAME_MAX_LEN)
    email: EmailStr
    password: str = Field(..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN)


class LoginRequest(BaseModel):
    """Credentials for login."""

    model_config = ConfigDict(str_strip_whitespace=True)

    email: EmailStr
    password: str = Field(..., min_length=1, max_length=PASSWORD_MAX_LEN)


class ProfileUpdateRequest(BaseModel):
    """Partial profile update; omitted fields keep their value."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str | None = Field(default=None, min_length=NAME_MIN_LEN, max_length=NAME_MAX_LEN)
    email: EmailStr | None = None
    password: str | None = Field(
        default=None, min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN
    )
    avatar: str | None = Field(default=None, max_length=1024)


class UserOut(BaseModel):
    """User as returned by the API (never includes the password hash)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    role: Role
    avatar: str | None = None
    created_at: datetime | None = None


class AuthData(UserOut):
    """User plus a freshly issued bearer token."""

    token: str


class AuthResponse(BaseModel):
    """Response for register, login and profile update."""

    success: bool = True
    message: str
    data: AuthData


class ProfileResponse(BaseModel):
    """Response for GET /auth/profile."""

    success: bool = True
    data: UserOut
