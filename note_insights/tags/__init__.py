"""Distinct tag listing."""

from note_insights.tags.tools import collect_tags, search_tags

__all__ = ["collect_tags", "search_tags"]
