"""Request/response schemas for the game catalog."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from gamestore.models.enums import Genre
from gamestore.schemas.common import UserSummary

TITLE_MAX_LEN = 100
DESCRIPTION_MAX_LEN = 2000
PRICE_MAX = 10000


class GameCreate(BaseModel):
    """Fields accepted when an admin adds a game."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., min_length=1, max_length=TITLE_MAX_LEN)
    description: str = Field(..., min_length=1, max_length=DESCRIPTION_MAX_LEN)
    price: float = Field(..., ge=0, le=PRICE_MAX)
    genre: Genre
    image: str | None = Field(default=None, max_length=1024)
    download_url: str | None = Field(default=None, max_length=1024)
    platform: str | None = Field(default=None, max_length=100)
    stock: int | None = Field(default=None, ge=0)
    rating: float | None = Field(default=None, ge=0, le=5)


class GameUpdate(BaseModel):
    """Partial update; only fields present in the body are applied."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str | None = Field(default=None, min_length=1, max_length=TITLE_MAX_LEN)
    description: str | None = Field(default=None, min_length=1, max_length=DESCRIPTION_MAX_LEN)
    price: float | None = Field(default=None, ge=0, le=PRICE_MAX)
    genre: Genre | None = None
    image: str | None = Field(default=None, max_length=1024)
    download_url: str | None = Field(default=None, max_length=1024)
    platform: str | None = Field(default=None, max_length=100)
    stock: int | None = Field(default=None, ge=0)
    rating: float | None = Field(default=None, ge=0, le=5)


class GameOut(BaseModel):
    """Catalog entry with its creator."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str
    price: float
    genre: Genre
    image: str
    download_url: str
    platform: str | None = None
    stock: int
    rating: float
    creator: UserSummary | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class GameResponse(BaseModel):
    success: bool = True
    message: str | None = None
    data: GameOut


class GameListResponse(BaseModel):
    success: bool = True
    count: int = Field(..., ge=0)
    data: list[GameOut]
