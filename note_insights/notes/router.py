"""FastAPI router for note text parsing."""

from fastapi import APIRouter, Depends

from note_insights.dependencies import get_trace_id, logger
from note_insights.notes.models import ParsedNote, ParseNoteRequest
from note_insights.notes.tools import parse_note_text

router = APIRouter(prefix="/v1/notes", tags=["notes"])


@router.post("/parse", response_model=ParsedNote)
def parse_note(
    request: ParseNoteRequest,
    trace_id: str = Depends(get_trace_id),
) -> ParsedNote:
    """Split raw note text into title, content and tags."""
    parsed = parse_note_text(request.text)
    logger.info("note_parsed", extra={"trace_id": trace_id, "tags": len(parsed.tags)})
    return parsed
