"""Order placement and status transitions with their stock side effects.

Stock changes are single conditional UPDATE statements executed in the same
transaction as the order write, so an order and the stock it consumed are
committed (or rolled back) together. The "has stock" check is the WHERE
clause of the decrement itself, which closes the race between two buyers of
the last unit.
"""

import logging

from sqlalchemy import update
from sqlalchemy.orm import Session

from gamestore.models import Game, Order, OrderItem, OrderStatus, PaymentMethod

logger = logging.getLogger(__name__)

# Legal status changes. Delivered and Cancelled are terminal.
ALLOWED_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.PENDING: frozenset(
        {OrderStatus.PAID, OrderStatus.DELIVERED, OrderStatus.CANCELLED}
    ),
    OrderStatus.PAID: frozenset({OrderStatus.DELIVERED}),
    OrderStatus.DELIVERED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}


class OrderError(Exception):
    """Raised when an order operation is rejected; status_code maps to the HTTP response."""

    def __init__(self, message: str, status_code: int = 400) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


def can_transition(current: OrderStatus, new: OrderStatus) -> bool:
    """True if an order in `current` may move to `new`."""
    return new in ALLOWED_TRANSITIONS.get(current, frozenset())


def _take_one_unit(db: Session, game_id: int) -> Game:
    """Decrement stock by one if any is left; return the refreshed game or raise OrderError."""
    result = db.execute(
        update(Game)
        .where(Game.id == game_id, Game.stock >= 1)
        .values(stock=Game.stock - 1)
        .execution_options(synchronize_session=False)
    )
    if result.rowcount != 1:
        game = db.get(Game, game_id)
        if game is None:
            raise OrderError(f'Game "{game_id}" not found', 404)
        raise OrderError(f'"{game.title}" is out of stock', 400)
    return db.get(Game, game_id, populate_existing=True)


def _restore_units(db: Session, order: Order) -> None:
    """Give back one unit per line item; items whose game was deleted are skipped."""
    for item in order.items:
        if item.game_id is None:
            continue
        db.execute(
            update(Game)
            .where(Game.id == item.game_id)
            .values(stock=Game.stock + 1)
            .execution_options(synchronize_session=False)
        )


def place_order(
    db: Session,
    user_id: int,
    game_ids: list[int],
    payment_method: PaymentMethod = PaymentMethod.COD,
) -> Order:
    """
    Create a Pending order for one unit of each listed game (repeat an id to buy several).

    Line items snapshot the game's current title, price and image; total is
    the sum of snapshot prices. Raises OrderError (404 unknown game, 400 out
    of stock or empty order) after rolling back every decrement already made.
    """
    if not game_ids:
        raise OrderError("No games in order", 400)

    try:
        items: list[OrderItem] = []
        for game_id in game_ids:
            game = _take_one_unit(db, game_id)
            items.append(
                OrderItem(
                    game_id=game.id,
                    title=game.title,
                    price=game.price,
                    image=game.image,
                )
            )
        order = Order(
            user_id=user_id,
            total=round(sum(item.price for item in items), 2),
            status=OrderStatus.PENDING.value,
            payment_method=PaymentMethod(payment_method).value,
            items=items,
        )
        db.add(order)
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(order)
    logger.info(
        "Order placed: order_id=%s user_id=%s items=%s total=%s",
        order.id,
        user_id,
        len(items),
        order.total,
    )
    return order


def change_status(db: Session, order: Order, new_status: OrderStatus) -> Order:
    """
    Move an order to `new_status` if the transition table allows it.

    Entering Cancelled restores stock in the same transaction. The status
    write is conditional on the status we read, so a concurrent change
    yields 409 instead of a second stock restore.
    """
    current = OrderStatus(order.status)
    new_status = OrderStatus(new_status)
    if not can_transition(current, new_status):
        raise OrderError(
            f"Cannot change order status from {current.value} to {new_status.value}", 400
        )

    try:
        result = db.execute(
            update(Order)
            .where(Order.id == order.id, Order.status == current.value)
            .values(status=new_status.value)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount != 1:
            raise OrderError("Order was modified concurrently; retry", 409)
        if new_status is OrderStatus.CANCELLED:
            _restore_units(db, order)
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(order)
    logger.info(
        "Order status changed: order_id=%s %s -> %s",
        order.id,
        current.value,
        new_status.value,
    )
    return order


def cancel_order(db: Session, order: Order) -> Order:
    """Cancel a Pending order and restore its stock; any other status is rejected."""
    if order.status != OrderStatus.PENDING.value:
        raise OrderError(f"Cannot cancel order with status: {order.status}", 400)
    return change_status(db, order, OrderStatus.CANCELLED)
