"""Note models and note text parsing."""

from note_insights.notes.tools import parse_note_text

__all__ = ["parse_note_text"]
