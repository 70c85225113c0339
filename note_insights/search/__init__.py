"""Free-text and tag search over notes."""

from note_insights.search.tools import search

__all__ = ["search"]
