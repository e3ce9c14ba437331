"""Account registration, login, profile, and the auth dependencies (get_current_user, require_admin)."""

import logging
from typing import Annotated

import jwt
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from gamestore.core.database import get_db
from gamestore.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)
from gamestore.models import Role, User
from gamestore.schemas.auth import (
    AuthData,
    AuthResponse,
    LoginRequest,
    ProfileResponse,
    ProfileUpdateRequest,
    RegisterRequest,
    UserOut,
)

logger = logging.getLogger(__name__)
router = APIRouter()
security = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def _auth_data(user: User) -> AuthData:
    return AuthData(
        **UserOut.model_validate(user).model_dump(),
        token=create_access_token(sub=user.id),
    )


def _email_taken(db: Session, email: str, exclude_user_id: int | None = None) -> bool:
    query = db.query(User).filter(User.email == email)
    if exclude_user_id is not None:
        query = query.filter(User.id != exclude_user_id)
    return query.first() is not None


def _email_conflict() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail="User with this email already exists",
    )


def _commit_user(db: Session) -> None:
    """Commit; a concurrent unique-email violation becomes the same 400 as the pre-check."""
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise _email_conflict()


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
) -> User:
    """Dependency: require a valid Bearer JWT and return the current user. Raises 401 otherwise."""
    if credentials is None:
        raise _unauthorized("Not authorized, no token provided")
    try:
        payload = decode_access_token(credentials.credentials)
    except jwt.PyJWTError as e:
        logger.warning("Rejected bearer token: %s", type(e).__name__)
        raise _unauthorized("Not authorized, token failed")
    try:
        user_id = int(payload.get("sub"))
    except (TypeError, ValueError):
        raise _unauthorized("Not authorized, token failed")
    user = db.get(User, user_id)
    if user is None:
        raise _unauthorized("Not authorized, user not found")
    return user


def require_admin(
    current_user: Annotated[User, Depends(get_current_user)],
) -> User:
    """Dependency: require authenticated user with role 'admin'. Raises 403 for non-admin."""
    if current_user.role != Role.ADMIN.value:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Access denied. Admin privileges required.",
        )
    return current_user


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    body: RegisterRequest,
    db: Annotated[Session, Depends(get_db)],
) -> AuthResponse:
    """Create a `user` account and return it with a bearer token."""
    email = body.email.lower()
    if _email_taken(db, email):
        raise _email_conflict()
    user = User(
        name=body.name,
        email=email,
        password_hash=hash_password(body.password),
        role=Role.USER.value,
    )
    db.add(user)
    _commit_user(db)
    db.refresh(user)
    logger.info("User registered: user_id=%s", user.id)
    return AuthResponse(message="Registration successful", data=_auth_data(user))


@router.post("/login", response_model=AuthResponse)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
) -> AuthResponse:
    """
    Authenticate with email and password; returns the user and a JWT.
    Include the token in the Authorization header as: Bearer <token>
    """
    user = db.query(User).filter(User.email == body.email.lower()).first()
    if user is None or not verify_password(body.password, user.password_hash):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
        )
    return AuthResponse(message="Login successful", data=_auth_data(user))


@router.get("/profile", response_model=ProfileResponse)
def get_profile(
    current_user: Annotated[User, Depends(get_current_user)],
) -> ProfileResponse:
    return ProfileResponse(data=UserOut.model_validate(current_user))


@router.put("/profile", response_model=AuthResponse)
def update_profile(
    body: ProfileUpdateRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> AuthResponse:
    """Update name, email, password or avatar; omitted fields are kept. Returns a fresh token."""
    if body.email is not None:
        email = body.email.lower()
        if email != current_user.email and _email_taken(db, email, current_user.id):
            raise _email_conflict()
        current_user.email = email
    if body.name is not None:
        current_user.name = body.name
    if body.password is not None:
        current_user.password_hash = hash_password(body.password)
    if body.avatar is not None:
        current_user.avatar = body.avatar or None
    _commit_user(db)
    db.refresh(current_user)
    return AuthResponse(message="Profile updated successfully", data=_auth_data(current_user))
