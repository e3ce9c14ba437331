"""ORM model for catalog entries."""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import relationship

from gamestore.models.base import Base, TimestampMixin

DEFAULT_GAME_IMAGE = "https://via.placeholder.com/300x400?text=Game+Cover"
DEFAULT_STOCK = 999


class Game(TimestampMixin, Base):
    """
    Catalog entry. stock is only changed by admin edits and by order
    placement/cancellation (see gamestore.services.orders).
    """

    __tablename__ = "games"
    __table_args__ = (
        CheckConstraint("stock >= 0", name="ck_games_stock_non_negative"),
        CheckConstraint("price >= 0 AND price <= 10000", name="ck_games_price_range"),
        CheckConstraint("rating >= 0 AND rating <= 5", name="ck_games_rating_range"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(100), nullable=False, index=True)
    description = Column(Text, nullable=False)
    price = Column(Float, nullable=False)
    genre = Column(String(32), nullable=False, index=True)
    image = Column(String(1024), nullable=False, default=DEFAULT_GAME_IMAGE)
    download_url = Column(String(1024), nullable=False, default="")
    platform = Column(String(100), nullable=True)
    stock = Column(Integer, nullable=False, default=DEFAULT_STOCK)
    rating = Column(Float, nullable=False, default=0)
    created_by = Column(
        Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True
    )

    creator = relationship("User", lazy="joined")
