"""FastAPI router for the image normalizer endpoint."""

import time

from fastapi import APIRouter, Depends, HTTPException

from note_insights.config import get_settings
from note_insights.dependencies import ImageNormalizeError, get_trace_id, logger
from note_insights.images.models import (
    ErrorDetail,
    ErrorResponse,
    OptimizedImage,
    OptimizeImageRequest,
)
from note_insights.images.tools import normalize_in_worker

router = APIRouter(prefix="/v1/images", tags=["images"])


@router.post(
    "/optimize",
    response_model=OptimizedImage,
    responses={422: {"model": ErrorResponse}},
)
async def optimize_image(
    request: OptimizeImageRequest,
    trace_id: str = Depends(get_trace_id),
) -> OptimizedImage:
    """Resize and re-encode an image to the canonical output format.

    The work runs on the image worker pool; this handler only awaits it.

    Args:
        request: Base64 image, optionally as a data URL
        trace_id: Request trace id for logging

    Returns:
        Normalized image with its dimensions

    Raises:
        HTTPException: 422 naming the failed stage if the image cannot be
            decoded or encoded
    """
    settings = get_settings()
    started = time.perf_counter()

    try:
        result = await normalize_in_worker(
            request.image,
            max_dimension=settings.image_max_dimension,
            quality=settings.image_quality,
        )
    except ImageNormalizeError as e:
        logger.warning(
            "image_optimize_failed",
            extra={"trace_id": trace_id, "code": e.code, "error": str(e)},
        )
        raise HTTPException(
            status_code=422,
            detail=ErrorResponse(
                error=ErrorDetail(message=str(e), type="invalid_request_error", code=e.code)
            ).model_dump(),
        ) from e

    logger.info(
        "image_optimized",
        extra={
            "trace_id": trace_id,
            "width": result.width,
            "height": result.height,
            "input_chars": len(request.image),
            "output_chars": len(result.image),
            "elapsed_ms": round((time.perf_counter() - started) * 1000, 1),
        },
    )
    return result
