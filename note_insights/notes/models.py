"""Pydantic models for notes and reminders.

Notes are owned by the calling UI layer and sent in full with every
request. The field names here are part of the wire contract with that
layer and stay snake_case.
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator


def split_tags(value: Any) -> Any:
    """Accept tags either as a list or as a comma-separated string.

    Examples:
        >>> split_tags("work, home,,ideas")
        ['work', 'home', 'ideas']
        >>> split_tags(["a", "b"])
        ['a', 'b']
    """
    if isinstance(value, str):
        return [t.strip() for t in value.split(",") if t.strip()]
    return value


class Reminder(BaseModel):
    """A reminder attached to a note.

    Attributes:
        completed: Whether the reminder has been checked off
        updated_at: Last modification timestamp, as sent by the client
        reminder_time: When the reminder is due, as sent by the client
    """

    completed: bool = False
    updated_at: str | None = None
    reminder_time: str | None = None


class Note(BaseModel):
    """A single note from the caller's collection.

    Attributes:
        id: Opaque unique identifier
        title: Note title
        content: Note body (may be absent)
        tags: Tags in the order the note lists them (may be absent)
        reminders: Reminders attached to the note (may be absent)
    """

    id: str = Field(..., description="Opaque note identifier")
    title: str = Field(default="", description="Note title")
    content: str | None = Field(default=None, description="Note body")
    tags: list[str] | None = Field(default=None, description="Note tags")
    reminders: list[Reminder] | None = Field(default=None, description="Note reminders")

    @field_validator("tags", mode="before")
    @classmethod
    def normalize_tags(cls, v: Any) -> Any:
        """Split comma-separated tag strings into a list."""
        return split_tags(v)


class ParseNoteRequest(BaseModel):
    """Raw note text to be split into title, content and tags."""

    text: str = ""


class NoteFrontmatter(BaseModel):
    """YAML frontmatter fields understood by the note parser.

    Example frontmatter:
        ---
        title: Weekly review
        tags:
          - work
          - planning
        ---
    """

    title: str | None = None
    tags: list[str] = Field(default_factory=list)

    @field_validator("tags", mode="before")
    @classmethod
    def normalize_tags(cls, v: Any) -> Any:
        """Split comma-separated tag strings and drop a null value."""
        if v is None:
            return []
        v = split_tags(v)
        if isinstance(v, list):
            return [str(t) for t in v]
        return v


class ParsedNote(BaseModel):
    """Note text split into its parts.

    Attributes:
        title: Frontmatter title, first H1 heading or first line
        content: Body with the frontmatter removed
        tags: Frontmatter tags followed by inline #hashtags, de-duplicated
    """

    title: str = ""
    content: str = ""
    tags: list[str] = Field(default_factory=list)
