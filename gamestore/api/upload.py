"""Image upload endpoints: validate multipart images and pass them through to the media host."""

import logging
from typing import Annotated, Any
from urllib.parse import unquote

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status

from gamestore.api.auth import get_current_user, require_admin
from gamestore.core.config import Settings, get_settings
from gamestore.models import User
from gamestore.schemas.common import MessageResponse
from gamestore.schemas.upload import (
    MediaTestResponse,
    MediaUsageOut,
    MultiUploadResponse,
    UploadedImageOut,
    UploadResponse,
)
from gamestore.services.media import (
    GAME_IMAGE_TRANSFORMATION,
    PROFILE_IMAGE_TRANSFORMATION,
    MediaNotConfiguredError,
    MediaServiceError,
    UploadedImage,
    delete_image,
    get_usage,
    optimized_url,
    upload_image,
)

logger = logging.getLogger(__name__)
router = APIRouter()

MAX_GAME_IMAGE_BYTES = 10 * 1024 * 1024  # 10 MB
MAX_PROFILE_IMAGE_BYTES = 5 * 1024 * 1024  # 5 MB
MAX_FILES_PER_REQUEST = 5


def _media_http_error(e: MediaNotConfiguredError | MediaServiceError) -> HTTPException:
    if isinstance(e, MediaNotConfiguredError):
        return HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=e.message)
    return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message)


async def _read_image(file: UploadFile, max_bytes: int) -> bytes:
    """Return the file content after checking it is a non-empty image within max_bytes."""
    if not (file.content_type or "").lower().startswith("image/"):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Not an image! Please upload an image file.",
        )
    content = await file.read(max_bytes + 1)
    if not content:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No file uploaded")
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"File size must not exceed {max_bytes // (1024 * 1024)} MB.",
        )
    return content


async def _store(
    file: UploadFile,
    max_bytes: int,
    folder: str,
    transformation: list[dict[str, Any]],
    settings: Settings,
) -> UploadedImage:
    content = await _read_image(file, max_bytes)
    try:
        return await upload_image(
            content,
            file.filename or "",
            folder,
            transformation,
            settings,
        )
    except (MediaNotConfiguredError, MediaServiceError) as e:
        logger.error("Image upload failed: %s", e.message)
        raise _media_http_error(e) from e


def _image_out(image: UploadedImage, settings: Settings) -> UploadedImageOut:
    return UploadedImageOut(
        url=image.url,
        public_id=image.public_id,
        original_name=image.original_name,
        size=image.size,
        format=image.format,
        optimized_url=optimized_url(image.public_id, settings),
    )


@router.post("/game-image", response_model=UploadResponse)
async def upload_game_image(
    _admin: Annotated[User, Depends(require_admin)],
    settings: Annotated[Settings, Depends(get_settings)],
    image: Annotated[UploadFile | None, File()] = None,
) -> UploadResponse:
    """Upload a cover image (field `image`, up to 10 MB); store the returned url on the game."""
    if image is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No file uploaded")
    stored = await _store(
        image,
        MAX_GAME_IMAGE_BYTES,
        settings.CLOUDINARY_GAME_FOLDER,
        GAME_IMAGE_TRANSFORMATION,
        settings,
    )
    return UploadResponse(message="Image uploaded successfully", data=_image_out(stored, settings))


@router.post("/profile-image", response_model=UploadResponse)
async def upload_profile_image(
    _user: Annotated[User, Depends(get_current_user)],
    settings: Annotated[Settings, Depends(get_settings)],
    image: Annotated[UploadFile | None, File()] = None,
) -> UploadResponse:
    """Upload an avatar (field `image`, up to 5 MB, cropped square around the face)."""
    if image is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No file uploaded")
    stored = await _store(
        image,
        MAX_PROFILE_IMAGE_BYTES,
        settings.CLOUDINARY_PROFILE_FOLDER,
        PROFILE_IMAGE_TRANSFORMATION,
        settings,
    )
    return UploadResponse(
        message="Profile image uploaded successfully", data=_image_out(stored, settings)
    )


@router.post("/multiple", response_model=MultiUploadResponse)
async def upload_multiple_images(
    _admin: Annotated[User, Depends(require_admin)],
    settings: Annotated[Settings, Depends(get_settings)],
    images: Annotated[list[UploadFile] | None, File()] = None,
) -> MultiUploadResponse:
    """Upload up to 5 game images (field `images`); all are validated before any is sent."""
    if not images:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No files uploaded")
    if len(images) > MAX_FILES_PER_REQUEST:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"At most {MAX_FILES_PER_REQUEST} files per request.",
        )
    contents = [await _read_image(f, MAX_GAME_IMAGE_BYTES) for f in images]
    stored: list[UploadedImageOut] = []
    for file, content in zip(images, contents):
        try:
            image = await upload_image(
                content,
                file.filename or "",
                settings.CLOUDINARY_GAME_FOLDER,
                GAME_IMAGE_TRANSFORMATION,
                settings,
            )
        except (MediaNotConfiguredError, MediaServiceError) as e:
            logger.error(
                "Multiple upload failed after %s of %s files: %s",
                len(stored),
                len(images),
                e.message,
            )
            raise _media_http_error(e) from e
        stored.append(_image_out(image, settings))
    return MultiUploadResponse(
        message=f"{len(stored)} images uploaded successfully", data=stored
    )


@router.get("/test", response_model=MediaTestResponse)
async def test_media_connection(
    settings: Annotated[Settings, Depends(get_settings)],
) -> MediaTestResponse:
    """Check credentials against the media host and report plan and usage."""
    try:
        usage = await get_usage(settings)
    except (MediaNotConfiguredError, MediaServiceError) as e:
        raise _media_http_error(e) from e
    return MediaTestResponse(
        message="Media host connection successful",
        data=MediaUsageOut(
            cloud_name=settings.CLOUDINARY_CLOUD_NAME or "",
            plan=usage.plan,
            storage=f"{usage.storage_bytes / 1024 / 1024:.2f} MB",
            bandwidth=f"{usage.bandwidth_bytes / 1024 / 1024:.2f} MB",
        ),
    )


@router.delete("/{public_id:path}", response_model=MessageResponse)
async def delete_uploaded_image(
    public_id: str,
    _admin: Annotated[User, Depends(require_admin)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> MessageResponse:
    """Delete an image by public id; ids contain folders, so both '/' and '%2F' are accepted."""
    try:
        deleted = await delete_image(unquote(public_id), settings)
    except (MediaNotConfiguredError, MediaServiceError) as e:
        raise _media_http_error(e) from e
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Image not found")
    return MessageResponse(message="Image deleted successfully")
