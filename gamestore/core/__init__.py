"""Core app configuration, database and security."""

from gamestore.core.config import get_settings, settings
from gamestore.core.database import get_db

__all__ = ["get_settings", "settings", "get_db"]
