"""FastAPI router for the activity calculation endpoint."""

from fastapi import APIRouter, Depends

from note_insights.analytics.models import CalculationResult
from note_insights.analytics.tools import aggregate
from note_insights.dependencies import get_trace_id, logger
from note_insights.notes.models import Note

router = APIRouter(prefix="/v1", tags=["analytics"])


@router.post("/activity/calculate", response_model=CalculationResult)
def calculate_activity(
    notes: list[Note],
    trace_id: str = Depends(get_trace_id),
) -> CalculationResult:
    """Compute completion statistics and the activity heatmap series.

    Args:
        notes: The caller's full note collection
        trace_id: Request trace id for logging

    Returns:
        Stats and activity data, serialized with camelCase field names
    """
    result = aggregate(notes)
    logger.info(
        "activity_calculated",
        extra={
            "trace_id": trace_id,
            "notes": result.stats.total_notes,
            "reminders": result.stats.total_reminders,
            "active_days": len(result.activity_data),
        },
    )
    return result
