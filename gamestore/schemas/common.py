"""Shared pieces of the JSON envelope: {success, message, data}."""

from pydantic import BaseModel, ConfigDict, Field


class UserSummary(BaseModel):
    """Public identity of a user embedded in games and orders."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str


class MessageResponse(BaseModel):
    """Envelope without payload (deletes, cancellations)."""

    success: bool = Field(default=True)
    message: str
