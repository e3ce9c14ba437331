"""ORM models for orders and their snapshot line items."""

from sqlalchemy import CheckConstraint, Column, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from gamestore.models.base import Base, TimestampMixin


class Order(TimestampMixin, Base):
    """
    A purchase by one user. Line items copy title/price/image at order time,
    so later catalog edits or deletions do not change past orders.
    """

    __tablename__ = "orders"
    __table_args__ = (CheckConstraint("total >= 0", name="ck_orders_total_non_negative"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    total = Column(Float, nullable=False)
    status = Column(String(32), nullable=False, default="Pending", index=True)
    payment_method = Column(String(32), nullable=False, default="COD")

    user = relationship("User", lazy="joined")
    items = relationship(
        "OrderItem",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItem.id",
        lazy="selectin",
    )


class OrderItem(Base):
    """One purchased unit of a game (snapshot)."""

    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(
        Integer, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True
    )
    game_id = Column(Integer, ForeignKey("games.id", ondelete="SET NULL"), nullable=True)
    title = Column(String(100), nullable=False)
    price = Column(Float, nullable=False)
    image = Column(String(1024), nullable=True)

    order = relationship("Order", back_populates="items")
