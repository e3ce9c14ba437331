"""Admin user management: list, inspect, change role, delete."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from gamestore.api.auth import require_admin
from gamestore.api.ids import parse_id
from gamestore.core.database import get_db
from gamestore.models import Order, Role, User
from gamestore.schemas.auth import UserOut
from gamestore.schemas.common import MessageResponse
from gamestore.schemas.users import RoleUpdate, UserResponse, UsersListResponse

logger = logging.getLogger(__name__)
router = APIRouter()

USER_NOT_FOUND = "User not found"


def _get_user_or_404(db: Session, raw_id: str) -> User:
    user = db.get(User, parse_id(raw_id, USER_NOT_FOUND))
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)
    return user


@router.get("", response_model=UsersListResponse)
def list_users(
    _admin: Annotated[User, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> UsersListResponse:
    """List all users (admin only)."""
    users = db.query(User).order_by(User.id).all()
    return UsersListResponse(
        count=len(users), data=[UserOut.model_validate(u) for u in users]
    )


@router.get("/{user_id}", response_model=UserResponse)
def get_user(
    user_id: str,
    _admin: Annotated[User, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> UserResponse:
    return UserResponse(data=UserOut.model_validate(_get_user_or_404(db, user_id)))


@router.put("/{user_id}/role", response_model=UserResponse)
def update_user_role(
    user_id: str,
    body: RoleUpdate,
    admin: Annotated[User, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> UserResponse:
    """Grant or revoke admin. Admins cannot demote themselves."""
    user = _get_user_or_404(db, user_id)
    if user.id == admin.id and body.role != Role.ADMIN:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="You cannot remove your own admin role",
        )
    user.role = body.role.value
    db.commit()
    db.refresh(user)
    logger.info("Role changed: user_id=%s role=%s by user_id=%s", user.id, user.role, admin.id)
    return UserResponse(message="User role updated successfully", data=UserOut.model_validate(user))


@router.delete("/{user_id}", response_model=MessageResponse)
def delete_user(
    user_id: str,
    admin: Annotated[User, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    """Delete an account that has no orders. Games it created keep existing without a creator."""
    user = _get_user_or_404(db, user_id)
    if user.id == admin.id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="You cannot delete your own account",
        )
    if db.query(Order.id).filter(Order.user_id == user.id).first() is not None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Cannot delete a user who has orders",
        )
    db.delete(user)
    db.commit()
    logger.info("User deleted: user_id=%s by user_id=%s", user_id, admin.id)
    return MessageResponse(message="User deleted successfully")
