"""Pydantic models for note search.

This module defines the request payload for the search endpoint and the
parsed form of a search query.
"""

from pydantic import BaseModel, Field

from note_insights.notes.models import Note


class SearchRequest(BaseModel):
    """Note collection plus the query to filter it by.

    Attributes:
        notes: The caller's full note collection
        query: Free-text query; ``#`` terms match tags
    """

    notes: list[Note] = Field(default_factory=list, description="Notes to search")
    query: str = Field(default="", description="Search query")


class SearchTerm(BaseModel):
    """One whitespace-separated term of a search query.

    Attributes:
        text: Lower-cased term, without the ``#`` for tag terms
        is_tag: True if the term was written as ``#tag``
    """

    text: str
    is_tag: bool = False
