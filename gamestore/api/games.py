"""Game catalog: public listing, lookup and search; admin create/update/delete."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import or_
from sqlalchemy.orm import Session

from gamestore.api.auth import require_admin
from gamestore.api.ids import parse_id
from gamestore.core.database import get_db
from gamestore.models import Game, Genre, User
from gamestore.models.game import DEFAULT_GAME_IMAGE, DEFAULT_STOCK
from gamestore.schemas.common import MessageResponse
from gamestore.schemas.games import (
    GameCreate,
    GameListResponse,
    GameOut,
    GameResponse,
    GameUpdate,
)

logger = logging.getLogger(__name__)
router = APIRouter()

GAME_NOT_FOUND = "Game not found"


def _get_game_or_404(db: Session, raw_id: str) -> Game:
    game = db.get(Game, parse_id(raw_id, GAME_NOT_FOUND))
    if game is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=GAME_NOT_FOUND)
    return game


def _list_response(games: list[Game]) -> GameListResponse:
    data = [GameOut.model_validate(g) for g in games]
    return GameListResponse(count=len(data), data=data)


@router.get("", response_model=GameListResponse)
def list_games(
    db: Annotated[Session, Depends(get_db)],
    genre: Annotated[Genre | None, Query(description="Only games of this genre")] = None,
) -> GameListResponse:
    """All games, newest first."""
    query = db.query(Game)
    if genre is not None:
        query = query.filter(Game.genre == genre.value)
    return _list_response(query.order_by(Game.created_at.desc(), Game.id.desc()).all())


@router.get("/search/{keyword}", response_model=GameListResponse)
def search_games(
    keyword: str,
    db: Annotated[Session, Depends(get_db)],
) -> GameListResponse:
    """Games whose title or description contains `keyword` (case-insensitive, literal match)."""
    games = (
        db.query(Game)
        .filter(
            or_(
                Game.title.icontains(keyword, autoescape=True),
                Game.description.icontains(keyword, autoescape=True),
            )
        )
        .order_by(Game.created_at.desc(), Game.id.desc())
        .all()
    )
    return _list_response(games)


@router.get("/{game_id}", response_model=GameResponse)
def get_game(
    game_id: str,
    db: Annotated[Session, Depends(get_db)],
) -> GameResponse:
    return GameResponse(data=GameOut.model_validate(_get_game_or_404(db, game_id)))


@router.post("", response_model=GameResponse, status_code=status.HTTP_201_CREATED)
def create_game(
    body: GameCreate,
    admin: Annotated[User, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> GameResponse:
    """Add a game to the catalog; the calling admin is recorded as its creator."""
    game = Game(
        title=body.title,
        description=body.description,
        price=body.price,
        genre=body.genre.value,
        image=body.image or DEFAULT_GAME_IMAGE,
        download_url=body.download_url or "",
        platform=body.platform,
        stock=DEFAULT_STOCK if body.stock is None else body.stock,
        rating=0 if body.rating is None else body.rating,
        created_by=admin.id,
    )
    db.add(game)
    db.commit()
    db.refresh(game)
    logger.info("Game created: game_id=%s by user_id=%s", game.id, admin.id)
    return GameResponse(message="Game created successfully", data=GameOut.model_validate(game))


@router.put("/{game_id}", response_model=GameResponse)
def update_game(
    game_id: str,
    body: GameUpdate,
    _admin: Annotated[User, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> GameResponse:
    """Apply the fields present in the body; validation matches create."""
    game = _get_game_or_404(db, game_id)
    changes = body.model_dump(exclude_unset=True)
    for field in ("title", "description", "price", "genre"):
        if field in changes and changes[field] is None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"{field} cannot be empty",
            )
    if "genre" in changes:
        changes["genre"] = changes["genre"].value
    if "image" in changes:
        changes["image"] = changes["image"] or DEFAULT_GAME_IMAGE
    if "download_url" in changes:
        changes["download_url"] = changes["download_url"] or ""
    if changes.get("stock", 0) is None:
        changes.pop("stock")
    if changes.get("rating", 0) is None:
        changes.pop("rating")
    for field, value in changes.items():
        setattr(game, field, value)
    db.commit()
    db.refresh(game)
    return GameResponse(message="Game updated successfully", data=GameOut.model_validate(game))


@router.delete("/{game_id}", response_model=MessageResponse)
def delete_game(
    game_id: str,
    admin: Annotated[User, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    """Remove a game. Order line items keep their snapshot and lose the reference."""
    game = _get_game_or_404(db, game_id)
    db.delete(game)
    db.commit()
    logger.info("Game deleted: game_id=%s by user_id=%s", game_id, admin.id)
    return MessageResponse(message="Game deleted successfully")
