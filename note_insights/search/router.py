"""FastAPI router for note search."""

from fastapi import APIRouter, Depends

from note_insights.dependencies import get_trace_id, logger
from note_insights.search.models import SearchRequest
from note_insights.search.tools import search

router = APIRouter(prefix="/v1/notes", tags=["search"])


@router.post("/search", response_model=list[str])
def search_notes(
    request: SearchRequest,
    trace_id: str = Depends(get_trace_id),
) -> list[str]:
    """Filter the note collection by a text/tag query.

    Args:
        request: Notes and query
        trace_id: Request trace id for logging

    Returns:
        Ids of matching notes in their original order
    """
    ids = search(request.notes, request.query)
    logger.info(
        "notes_searched",
        extra={
            "trace_id": trace_id,
            "notes": len(request.notes),
            "terms": len(request.query.split()),
            "matches": len(ids),
        },
    )
    return ids
