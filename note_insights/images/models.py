"""Pydantic models for the image normalizer endpoint."""

from pydantic import BaseModel, Field


class OptimizeImageRequest(BaseModel):
    """Image to normalize.

    Attributes:
        image: Base64 image data, bare or as a ``data:<mime>;base64,`` URL
    """

    image: str = Field(..., description="Base64 image data or data URL")


class OptimizedImage(BaseModel):
    """Normalized image in the canonical output format.

    Attributes:
        image: Base64 output, with a data URL prefix if the input had one
        width: Output width in pixels
        height: Output height in pixels
        format: Canonical output format name
    """

    image: str
    width: int = Field(..., ge=1)
    height: int = Field(..., ge=1)
    format: str = "webp"


class ErrorDetail(BaseModel):
    """Error details."""

    message: str
    type: str = "server_error"
    code: str | None = None


class ErrorResponse(BaseModel):
    """Error response wrapper."""

    error: ErrorDetail
