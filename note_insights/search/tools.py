"""Note search.

Filters a note collection by a free-text query. The query is split on
whitespace into terms and a note matches only if it satisfies every
term:

    alice        -> "alice" appears in the title or content
    #work        -> some tag contains "work"
    alice #work  -> both of the above

Matching is case-insensitive substring matching throughout. Results keep
the input order; there is no ranking.
"""

from collections.abc import Iterable

from note_insights.notes.models import Note
from note_insights.search.models import SearchTerm

TAG_PREFIX = "#"


def parse_query(query: str) -> list[SearchTerm]:
    """Split a query into lower-cased search terms.

    Args:
        query: Raw query string

    Returns:
        Terms in query order; empty for a blank query

    Examples:
        >>> [(t.text, t.is_tag) for t in parse_query("Alice  #Work")]
        [('alice', False), ('work', True)]
        >>> parse_query("   ")
        []
    """
    terms = []
    for word in query.lower().split():
        if word.startswith(TAG_PREFIX):
            terms.append(SearchTerm(text=word[len(TAG_PREFIX) :], is_tag=True))
        else:
            terms.append(SearchTerm(text=word))
    return terms


def matches_term(note: Note, term: SearchTerm) -> bool:
    """Check a single note against a single search term.

    A tag term needs at least one tag containing it. A bare ``#`` therefore
    matches any note that has tags at all. A text term needs to appear in
    the title or the content.
    """
    if term.is_tag:
        return any(term.text in tag.lower() for tag in note.tags or [])
    return term.text in note.title.lower() or term.text in (note.content or "").lower()


def matches_query(note: Note, terms: list[SearchTerm]) -> bool:
    """Check whether a note satisfies every term (AND semantics)."""
    return all(matches_term(note, term) for term in terms)


def search(notes: Iterable[Note], query: str) -> list[str]:
    """Return ids of notes matching the query, in input order.

    Args:
        notes: The caller's note collection
        query: Free-text query; blank returns every note

    Returns:
        List of matching note ids
    """
    terms = parse_query(query)
    return [note.id for note in notes if matches_query(note, terms)]
