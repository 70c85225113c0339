"""Shared dependencies: structured logger, image worker pool and errors."""

import json
import logging
import uuid
from concurrent.futures import ThreadPoolExecutor
from functools import lru_cache
from typing import Any

from fastapi import Request

from note_insights.config import get_settings

# Attributes every LogRecord carries; anything else came in through ``extra=``.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None)).keys()
) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        data: dict[str, Any] = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "message": record.getMessage(),
            "module": record.module,
        }
        data.update(
            {key: value for key, value in vars(record).items() if key not in _RESERVED_ATTRS}
        )
        if record.exc_info:
            data["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(data, default=str)


def setup_logging() -> logging.Logger:
    """Configure and return the application logger."""
    settings = get_settings()
    logger = logging.getLogger("note_insights")
    logger.setLevel(getattr(logging, settings.log_level.upper()))
    logger.handlers.clear()
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)
    return logger


logger = setup_logging()


class ImageNormalizeError(Exception):
    """Base exception for the image normalization pipeline.

    Attributes:
        stage: Human-readable name of the stage that failed
        code: Machine-readable error code sent to the caller
    """

    stage = "Image normalize"
    code = "image_normalize_failed"

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"{self.stage} failed: {detail}")


class DecodeBase64Error(ImageNormalizeError):
    """Raised when the payload is not valid base64."""

    stage = "Base64 decode"
    code = "decode_base64_failed"


class DecodeImageError(ImageNormalizeError):
    """Raised when the decoded bytes are not a readable image."""

    stage = "Image load"
    code = "decode_image_failed"


class EncodeImageError(ImageNormalizeError):
    """Raised when the canonical output format cannot be written."""

    stage = "Image encode"
    code = "encode_image_failed"


@lru_cache
def get_image_executor() -> ThreadPoolExecutor:
    """Get the shared worker pool that runs image normalization."""
    return ThreadPoolExecutor(
        max_workers=get_settings().image_workers,
        thread_name_prefix="image-normalizer",
    )


def shutdown_image_executor() -> None:
    """Shut down the image worker pool if it was ever started."""
    if get_image_executor.cache_info().currsize:
        get_image_executor().shutdown(wait=True)
        get_image_executor.cache_clear()


def get_trace_id(request: Request) -> str:
    """FastAPI dependency returning the caller's trace id, or a fresh one."""
    return request.headers.get("X-Trace-Id", str(uuid.uuid4()))
