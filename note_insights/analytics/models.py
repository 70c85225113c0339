"""Pydantic models for activity analytics results.

These models are sent back to the UI layer, which reads them with
camelCase field names (``totalNotes``, ``activityData``...). Models
serialize by alias and accept either spelling on construction.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model exposing camelCase field names on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Stats(CamelModel):
    """Completion statistics for a note collection.

    Attributes:
        total_notes: Number of notes in the collection
        total_reminders: Number of reminders across all notes
        completed_reminders: Number of reminders marked completed
        completion_rate: Completed share of reminders as a percentage
        tags_used: Number of distinct tag strings (case-sensitive)
    """

    total_notes: int = Field(default=0, ge=0, description="Notes in collection")
    total_reminders: int = Field(default=0, ge=0, description="Reminders in collection")
    completed_reminders: int = Field(default=0, ge=0, description="Completed reminders")
    completion_rate: float = Field(
        default=0.0, ge=0.0, le=100.0, description="Completion percentage"
    )
    tags_used: int = Field(default=0, ge=0, description="Distinct tags count")


class ActivityDatum(CamelModel):
    """Completed reminders for a single calendar day.

    Attributes:
        date: Day in YYYY-MM-DD format
        count: Completed reminders attributed to this day
        level: Heatmap intensity bucket from 0 to 4
    """

    date: str = Field(..., description="Date in YYYY-MM-DD format")
    count: int = Field(..., ge=1, description="Completed reminders")
    level: int = Field(default=0, ge=0, le=4, description="Heatmap intensity")


class CalculationResult(CamelModel):
    """Statistics plus the day-by-day activity series, oldest day first."""

    stats: Stats = Field(default_factory=Stats)
    activity_data: list[ActivityDatum] = Field(default_factory=list)
