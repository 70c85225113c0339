"""Image normalization pipeline.

Every uploaded image goes through the same linear pipeline before it is
stored:

    1. strip an optional ``data:<mime>;base64,`` prefix
    2. base64 decode                  -> DecodeBase64Error
    3. decode the image (any format)  -> DecodeImageError
    4. shrink so neither side exceeds the bound (Lanczos, aspect kept)
    5. re-encode to WebP              -> EncodeImageError
    6. base64 encode, re-attaching a ``data:image/webp;base64,`` prefix
       if the input had one

Images already within the bound are never resized, so running the
pipeline on its own output leaves the dimensions unchanged. No stage
retries.

The pipeline is CPU-bound. ``normalize_in_worker`` runs it on the shared
image worker pool so the event loop keeps serving other requests.
"""

import asyncio
import base64
import binascii
import io
import re

from PIL import Image, ImageOps

from note_insights.dependencies import (
    DecodeBase64Error,
    DecodeImageError,
    EncodeImageError,
    get_image_executor,
)
from note_insights.images.models import OptimizedImage

OUTPUT_FORMAT = "WEBP"
OUTPUT_MIME = "image/webp"
DEFAULT_MAX_DIMENSION = 1920
DEFAULT_QUALITY = 85

DATA_URL_PATTERN = re.compile(r"^data:([^,]*?);base64,", re.IGNORECASE)


# =============================================================================
# Pipeline Stages
# =============================================================================


def split_data_url(payload: str) -> tuple[str | None, str]:
    """Separate a data URL prefix from the base64 payload.

    Args:
        payload: Bare base64 or ``data:<mime>;base64,<data>``

    Returns:
        Tuple of (input mime type or None if there was no prefix, base64 data)

    Examples:
        >>> split_data_url("data:image/png;base64,iVBORw0")
        ('image/png', 'iVBORw0')
        >>> split_data_url("iVBORw0")
        (None, 'iVBORw0')
    """
    payload = payload.lstrip()
    match = DATA_URL_PATTERN.match(payload)
    if not match:
        return None, payload
    return match.group(1), payload[match.end() :]


def decode_base64(data: str) -> bytes:
    """Decode base64 text, ignoring embedded whitespace.

    Raises:
        DecodeBase64Error: If the text is not valid base64
    """
    try:
        return base64.b64decode("".join(data.split()), validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodeBase64Error(str(e)) from e


def load_image(raw: bytes) -> Image.Image:
    """Decode image bytes of any format Pillow can sniff.

    EXIF orientation is applied so the bound is checked against the
    image as displayed.

    Raises:
        DecodeImageError: If the bytes are not a readable image
    """
    try:
        image = Image.open(io.BytesIO(raw))
        image.load()
        return ImageOps.exif_transpose(image)
    except Exception as e:
        raise DecodeImageError(str(e)) from e


def fit_within(image: Image.Image, max_dimension: int) -> Image.Image:
    """Shrink an image so neither side exceeds ``max_dimension``.

    Aspect ratio is preserved. Images already within the bound are
    returned as is.
    """
    if image.width <= max_dimension and image.height <= max_dimension:
        return image
    resized = image.copy()
    resized.thumbnail((max_dimension, max_dimension), Image.Resampling.LANCZOS)
    return resized


def encode_image(image: Image.Image, quality: int) -> bytes:
    """Encode an image to the canonical output format.

    Images carrying any transparency are written as RGBA so alpha
    survives; everything else is written as RGB.

    Raises:
        EncodeImageError: If the image cannot be converted or written
    """
    try:
        mode = "RGBA" if image.has_transparency_data else "RGB"
        if image.mode != mode:
            image = image.convert(mode)
        buffer = io.BytesIO()
        image.save(buffer, format=OUTPUT_FORMAT, quality=quality)
        return buffer.getvalue()
    except Exception as e:
        raise EncodeImageError(str(e)) from e


# =============================================================================
# Main Operation
# =============================================================================


def normalize(
    payload: str,
    max_dimension: int = DEFAULT_MAX_DIMENSION,
    quality: int = DEFAULT_QUALITY,
) -> OptimizedImage:
    """Decode, bound and re-encode an image.

    Args:
        payload: Base64 image data, bare or as a data URL
        max_dimension: Largest allowed width or height in pixels
        quality: WebP quality from 1 to 100

    Returns:
        OptimizedImage with base64 WebP data and its dimensions

    Raises:
        DecodeBase64Error: Payload is not base64
        DecodeImageError: Decoded bytes are not an image
        EncodeImageError: Output could not be encoded
    """
    mime, data = split_data_url(payload)

    image = fit_within(load_image(decode_base64(data)), max_dimension)
    encoded = base64.b64encode(encode_image(image, quality)).decode("ascii")

    if mime is not None:
        encoded = f"data:{OUTPUT_MIME};base64,{encoded}"

    return OptimizedImage(
        image=encoded,
        width=image.width,
        height=image.height,
        format=OUTPUT_FORMAT.lower(),
    )


async def normalize_in_worker(
    payload: str,
    max_dimension: int = DEFAULT_MAX_DIMENSION,
    quality: int = DEFAULT_QUALITY,
) -> OptimizedImage:
    """Run ``normalize`` on the image worker pool and await its result."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(
        get_image_executor(), normalize, payload, max_dimension, quality
    )
