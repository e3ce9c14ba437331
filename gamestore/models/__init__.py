"""SQLAlchemy ORM models."""

from gamestore.models.base import Base
from gamestore.models.enums import Genre, OrderStatus, PaymentMethod, Role
from gamestore.models.game import Game
from gamestore.models.order import Order, OrderItem
from gamestore.models.user import User

__all__ = [
    "Base",
    "Game",
    "Genre",
    "Order",
    "OrderItem",
    "OrderStatus",
    "PaymentMethod",
    "Role",
    "User",
]
