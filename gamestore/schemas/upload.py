"""Request/response schemas for the image upload endpoints."""

from pydantic import BaseModel, Field


class UploadedImageOut(BaseModel):
    """Image stored on the media host; only url and public_id are kept by clients."""

    url: str = Field(..., description="HTTPS URL served by the media CDN.")
    public_id: str = Field(..., description="Media host id, used for deletion.")
    original_name: str = ""
    size: int = Field(default=0, ge=0, description="Stored size in bytes.")
    format: str | None = None
    optimized_url: str | None = Field(
        default=None, description="Delivery URL cropped to 800x600 with automatic quality and format."
    )


class UploadResponse(BaseModel):
    success: bool = True
    message: str
    data: UploadedImageOut


class MultiUploadResponse(BaseModel):
    success: bool = True
    message: str
    data: list[UploadedImageOut]


class MediaUsageOut(BaseModel):
    cloud_name: str
    plan: str | None = None
    storage: str = Field(..., description="Storage used, e.g. '12.34 MB'.")
    bandwidth: str = Field(..., description="Bandwidth used, e.g. '1.00 MB'.")


class MediaTestResponse(BaseModel):
    success: bool = True
    message: str
    data: MediaUsageOut
