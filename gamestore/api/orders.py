"""Orders: placement and history for buyers, listing and status changes for admins."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from gamestore.api.auth import get_current_user, require_admin
from gamestore.api.ids import parse_id
from gamestore.core.database import get_db
from gamestore.models import Order, Role, User
from gamestore.schemas.common import MessageResponse
from gamestore.schemas.orders import (
    MAX_ITEMS_PER_ORDER,
    OrderCreate,
    OrderListResponse,
    OrderOut,
    OrderResponse,
    OrderStatusUpdate,
)
from gamestore.services.orders import OrderError, cancel_order, change_status, place_order

router = APIRouter()

ORDER_NOT_FOUND = "Order not found"


def _get_order_or_404(db: Session, raw_id: str) -> Order:
    order = db.get(Order, parse_id(raw_id, ORDER_NOT_FOUND))
    if order is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ORDER_NOT_FOUND)
    return order


def _ensure_owner_or_admin(order: Order, user: User, action: str) -> None:
    if order.user_id != user.id and user.role != Role.ADMIN.value:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Not authorized to {action} this order",
        )


def _list_response(orders: list[Order]) -> OrderListResponse:
    data = [OrderOut.model_validate(o) for o in orders]
    return OrderListResponse(count=len(data), data=data)


@router.post("", response_model=OrderResponse, status_code=status.HTTP_201_CREATED)
def create_order(
    body: OrderCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> OrderResponse:
    """
    Place an order for one unit of each listed game.

    Stock is checked and decremented atomically with the order insert: if any
    game is missing (404) or out of stock (400), nothing is written.
    """
    if not body.games:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No games in order")
    if len(body.games) > MAX_ITEMS_PER_ORDER:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"At most {MAX_ITEMS_PER_ORDER} games are allowed per order.",
        )
    try:
        order = place_order(
            db,
            user_id=current_user.id,
            game_ids=[item.game_id for item in body.games],
            payment_method=body.payment_method,
        )
    except OrderError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e
    return OrderResponse(message="Order placed successfully", data=OrderOut.model_validate(order))


@router.get("/myorders", response_model=OrderListResponse)
def my_orders(
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> OrderListResponse:
    """The caller's orders, newest first."""
    orders = (
        db.query(Order)
        .filter(Order.user_id == current_user.id)
        .order_by(Order.created_at.desc(), Order.id.desc())
        .all()
    )
    return _list_response(orders)


@router.get("/admin/all", response_model=OrderListResponse)
def all_orders(
    _admin: Annotated[User, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> OrderListResponse:
    """Every order, newest first (admin only)."""
    orders = db.query(Order).order_by(Order.created_at.desc(), Order.id.desc()).all()
    return _list_response(orders)


@router.get("/{order_id}", response_model=OrderResponse)
def get_order(
    order_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> OrderResponse:
    order = _get_order_or_404(db, order_id)
    _ensure_owner_or_admin(order, current_user, "view")
    return OrderResponse(data=OrderOut.model_validate(order))


@router.put("/{order_id}/status", response_model=OrderResponse)
def update_order_status(
    order_id: str,
    body: OrderStatusUpdate,
    _admin: Annotated[User, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> OrderResponse:
    """
    Move an order along Pending -> Paid -> Delivered, or Pending -> Cancelled.

    Illegal transitions are 400. Cancelling here restores stock, the same as
    the buyer-facing DELETE.
    """
    order = _get_order_or_404(db, order_id)
    try:
        order = change_status(db, order, body.status)
    except OrderError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e
    return OrderResponse(
        message="Order status updated successfully",
        data=OrderOut.model_validate(order),
    )


@router.delete("/{order_id}", response_model=MessageResponse)
def delete_order(
    order_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    """Cancel a Pending order (owner or admin) and put its games back in stock."""
    order = _get_order_or_404(db, order_id)
    _ensure_owner_or_admin(order, current_user, "cancel")
    try:
        cancel_order(db, order)
    except OrderError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e
    return MessageResponse(message="Order cancelled successfully")
