"""FastAPI router for tag listing."""

from fastapi import APIRouter, Depends

from note_insights.dependencies import get_trace_id, logger
from note_insights.tags.models import TagListRequest, TagListResponse
from note_insights.tags.tools import search_tags

router = APIRouter(prefix="/v1", tags=["tags"])


@router.post("/tags", response_model=TagListResponse)
def list_tags(
    request: TagListRequest,
    trace_id: str = Depends(get_trace_id),
) -> TagListResponse:
    """List distinct tags across the notes, optionally filtered by a fragment."""
    tags = search_tags(request.notes, request.query)
    logger.info(
        "tags_listed",
        extra={"trace_id": trace_id, "notes": len(request.notes), "tags": len(tags)},
    )
    return TagListResponse(tags=tags, total=len(tags))
