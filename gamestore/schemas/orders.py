"""Request/response schemas for orders."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from gamestore.models.enums import OrderStatus, PaymentMethod
from gamestore.schemas.common import UserSummary

MAX_ITEMS_PER_ORDER = 50


class OrderItemIn(BaseModel):
    """One unit of a game to purchase."""

    game_id: int


class OrderCreate(BaseModel):
    """Order placement body. Prices are taken from the catalog, not the client."""

    games: list[OrderItemIn] = Field(default_factory=list)
    payment_method: PaymentMethod = PaymentMethod.COD


class OrderStatusUpdate(BaseModel):
    """Admin status change."""

    status: OrderStatus


class OrderItemOut(BaseModel):
    """Snapshot of a purchased game."""

    model_config = ConfigDict(from_attributes=True)

    game_id: int | None = None
    title: str
    price: float
    image: str | None = None


class OrderOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user: UserSummary
    items: list[OrderItemOut]
    total: float
    status: OrderStatus
    payment_method: PaymentMethod
    created_at: datetime | None = None
    updated_at: datetime | None = None


class OrderResponse(BaseModel):
    success: bool = True
    message: str | None = None
    data: OrderOut


class OrderListResponse(BaseModel):
    success: bool = True
    count: int = Field(..., ge=0)
    data: list[OrderOut]
