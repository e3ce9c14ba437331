"""Path id parsing: a malformed id is reported as not found, like a missing row."""

from fastapi import HTTPException, status


def parse_id(raw: str, not_found_detail: str) -> int:
    """Return raw as a positive int or raise 404 with not_found_detail."""
    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=not_found_detail)
    if value < 1:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=not_found_detail)
    return value
