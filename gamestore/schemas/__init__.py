"""Pydantic request/response schemas."""

from gamestore.schemas.auth import (
    AuthData,
    AuthResponse,
    LoginRequest,
    ProfileResponse,
    ProfileUpdateRequest,
    RegisterRequest,
    UserOut,
)
from gamestore.schemas.common import MessageResponse, UserSummary
from gamestore.schemas.games import GameCreate, GameListResponse, GameOut, GameResponse, GameUpdate
from gamestore.schemas.health import HealthResponse
from gamestore.schemas.orders import (
    OrderCreate,
    OrderItemIn,
    OrderListResponse,
    OrderOut,
    OrderResponse,
    OrderStatusUpdate,
)
from gamestore.schemas.upload import (
    MediaTestResponse,
    MultiUploadResponse,
    UploadedImageOut,
    UploadResponse,
)
from gamestore.schemas.users import RoleUpdate, UserResponse, UsersListResponse

__all__ = [
    "AuthData",
    "AuthResponse",
    "GameCreate",
    "GameListResponse",
    "GameOut",
    "GameResponse",
    "GameUpdate",
    "HealthResponse",
    "LoginRequest",
    "MediaTestResponse",
    "MessageResponse",
    "MultiUploadResponse",
    "OrderCreate",
    "OrderItemIn",
    "OrderListResponse",
    "OrderOut",
    "OrderResponse",
    "OrderStatusUpdate",
    "ProfileResponse",
    "ProfileUpdateRequest",
    "RegisterRequest",
    "RoleUpdate",
    "UploadedImageOut",
    "UploadResponse",
    "UserOut",
    "UserResponse",
    "UserSummary",
    "UsersListResponse",
]
