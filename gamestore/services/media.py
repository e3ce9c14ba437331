"""Image storage on Cloudinary: uploads, deletion, delivery URLs and account usage via the cloudinary SDK."""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import cloudinary
import cloudinary.api
import cloudinary.exceptions
import cloudinary.uploader
from fastapi.concurrency import run_in_threadpool

if TYPE_CHECKING:
    from gamestore.core.config import Settings

logger = logging.getLogger(__name__)

ALLOWED_FORMATS = ["jpg", "jpeg", "png", "gif", "webp"]

# Incoming transformations applied by the host at upload time.
GAME_IMAGE_TRANSFORMATION: list[dict[str, Any]] = [
    {"width": 800, "height": 1000, "crop": "limit"},
    {"quality": "auto"},
    {"fetch_format": "auto"},
]
PROFILE_IMAGE_TRANSFORMATION: list[dict[str, Any]] = [
    {"width": 500, "height": 500, "crop": "fill", "gravity": "face"},
    {"quality": "auto"},
    {"fetch_format": "auto"},
]

# HTTP status the SDK's admin API errors stand for.
_SDK_ERROR_STATUS: dict[type[Exception], int] = {
    cloudinary.exceptions.BadRequest: 400,
    cloudinary.exceptions.AuthorizationRequired: 401,
    cloudinary.exceptions.NotAllowed: 403,
    cloudinary.exceptions.NotFound: 404,
    cloudinary.exceptions.AlreadyExists: 409,
    cloudinary.exceptions.RateLimited: 420,
    cloudinary.exceptions.GeneralError: 500,
}


class MediaNotConfiguredError(Exception):
    """Raised when a media operation is invoked but Cloudinary credentials are missing."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class MediaServiceError(Exception):
    """Raised when Cloudinary is unreachable or returns an error."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


@dataclass(frozen=True)
class UploadedImage:
    url: str
    public_id: str
    original_name: str
    size: int
    format: str | None


@dataclass(frozen=True)
class MediaUsage:
    plan: str | None
    storage_bytes: int
    bandwidth_bytes: int


def is_media_configured(settings: Settings) -> bool:
    if not settings.CLOUDINARY_CLOUD_NAME or not settings.CLOUDINARY_CLOUD_NAME.strip():
        return False
    if not settings.CLOUDINARY_API_KEY or not settings.CLOUDINARY_API_KEY.strip():
        return False
    if settings.CLOUDINARY_API_SECRET is None:
        return False
    secret = settings.CLOUDINARY_API_SECRET.get_secret_value()
    return bool(secret and secret.strip())


def _sdk_options(settings: Settings) -> dict[str, Any]:
    """
    Per-call SDK options built from Settings (credentials, API host, timeout), so
    nothing depends on the SDK's process-wide config. Raises
    MediaNotConfiguredError when a credential is missing.
    """
    if not is_media_configured(settings):
        raise MediaNotConfiguredError(
            "Media storage is not configured; set CLOUDINARY_CLOUD_NAME, "
            "CLOUDINARY_API_KEY, CLOUDINARY_API_SECRET."
        )
    return {
        "cloud_name": settings.CLOUDINARY_CLOUD_NAME.strip(),
        "api_key": settings.CLOUDINARY_API_KEY.strip(),
        "api_secret": settings.CLOUDINARY_API_SECRET.get_secret_value().strip(),
        "upload_prefix": settings.CLOUDINARY_UPLOAD_PREFIX,
        "timeout": settings.CLOUDINARY_REQUEST_TIMEOUT_SEC,
    }


def _service_error(e: cloudinary.exceptions.Error) -> MediaServiceError:
    status_code = _SDK_ERROR_STATUS.get(type(e))
    if status_code == 401:
        return MediaServiceError("Media host rejected the credentials.", 401)
    return MediaServiceError(f"Media host error: {e!s}", status_code)


async def upload_image(
    content: bytes,
    filename: str,
    folder: str,
    transformation: list[dict[str, Any]],
    settings: Settings,
) -> UploadedImage:
    """Upload one image into `folder`; returns its delivery URL and public id."""
    options = _sdk_options(settings)
    try:
        result = await run_in_threadpool(
            cloudinary.uploader.upload,
            io.BytesIO(content),
            filename=filename or "upload",
            folder=folder,
            allowed_formats=ALLOWED_FORMATS,
            transformation=transformation,
            resource_type="image",
            **options,
        )
    except cloudinary.exceptions.Error as e:
        raise _service_error(e) from e

    public_id = result.get("public_id")
    url = result.get("secure_url") or result.get("url")
    if not public_id or not url:
        raise MediaServiceError("Media host response missing url or public_id.")
    logger.info("Image uploaded: public_id=%s bytes=%s", public_id, result.get("bytes"))
    return UploadedImage(
        url=url,
        public_id=public_id,
        original_name=filename or result.get("original_filename", ""),
        size=int(result.get("bytes") or len(content)),
        format=result.get("format"),
    )


async def delete_image(public_id: str, settings: Settings) -> bool:
    """Destroy an image by public id. True when deleted, False when the host does not know it."""
    options = _sdk_options(settings)
    try:
        result = await run_in_threadpool(
            cloudinary.uploader.destroy, public_id, invalidate=True, **options
        )
    except cloudinary.exceptions.Error as e:
        raise _service_error(e) from e

    outcome = result.get("result")
    logger.info("Image delete: public_id=%s result=%s", public_id, outcome)
    return outcome == "ok"


async def get_usage(settings: Settings) -> MediaUsage:
    """Fetch plan and storage/bandwidth usage; doubles as a connectivity check."""
    options = _sdk_options(settings)
    try:
        result = await run_in_threadpool(cloudinary.api.usage, **options)
    except cloudinary.exceptions.Error as e:
        raise _service_error(e) from e

    return MediaUsage(
        plan=result.get("plan"),
        storage_bytes=int((result.get("storage") or {}).get("usage") or 0),
        bandwidth_bytes=int((result.get("bandwidth") or {}).get("usage") or 0),
    )


def optimized_url(public_id: str, settings: Settings, width: int = 800, height: int = 600) -> str:
    """Delivery URL for a stored image, cropped to width x height with automatic quality and format."""
    if not settings.CLOUDINARY_CLOUD_NAME or not settings.CLOUDINARY_CLOUD_NAME.strip():
        raise MediaNotConfiguredError("Media storage is not configured; set CLOUDINARY_CLOUD_NAME.")
    return cloudinary.CloudinaryImage(public_id).build_url(
        cloud_name=settings.CLOUDINARY_CLOUD_NAME.strip(),
        secure=True,
        transformation=[
            {"width": width, "height": height, "crop": "fill"},
            {"quality": "auto"},
            {"fetch_format": "auto"},
        ],
    )
