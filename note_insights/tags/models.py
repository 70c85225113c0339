"""Pydantic models for tag listing."""

from pydantic import BaseModel, Field

from note_insights.notes.models import Note


class TagInfo(BaseModel):
    """Tag with usage count.

    Represents a distinct tag found in the note collection along with
    the notes that carry it.

    Attributes:
        name: Tag text exactly as written on the notes
        count: Number of notes using this tag
        notes: Ids of the notes that have this tag, in input order
    """

    name: str = Field(..., description="Tag text")
    count: int = Field(default=0, ge=0)
    notes: list[str] = Field(default_factory=list)


class TagListRequest(BaseModel):
    """Note collection plus an optional tag filter."""

    notes: list[Note] = Field(default_factory=list)
    query: str = Field(default="", description="Tag fragment, with or without #")


class TagListResponse(BaseModel):
    """Matching tags, most used first."""

    tags: list[TagInfo] = Field(default_factory=list)
    total: int = Field(default=0, ge=0)
