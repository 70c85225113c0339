"""Tag listing over a note collection.

Tags are compared exactly as written (case-sensitive), the same way the
activity statistics count ``tagsUsed``. Filtering by a query fragment is
case-insensitive.
"""

from collections.abc import Iterable

from note_insights.notes.models import Note
from note_insights.tags.models import TagInfo


def collect_tags(notes: Iterable[Note]) -> list[TagInfo]:
    """Gather every distinct tag with the notes that use it.

    A note listing the same tag twice is counted once for it.

    Args:
        notes: The caller's note collection

    Returns:
        Tags sorted by usage count (descending), then name
    """
    tag_to_notes: dict[str, list[str]] = {}
    for note in notes:
        for tag in dict.fromkeys(note.tags or []):
            tag_to_notes.setdefault(tag, []).append(note.id)

    tags = [TagInfo(name=tag, count=len(ids), notes=ids) for tag, ids in tag_to_notes.items()]
    tags.sort(key=lambda t: (-t.count, t.name))
    return tags


def search_tags(notes: Iterable[Note], query: str) -> list[TagInfo]:
    """List tags whose text contains the query fragment.

    Args:
        notes: The caller's note collection
        query: Fragment to look for; a leading ``#`` is ignored

    Returns:
        Matching tags in the same order as collect_tags

    Examples:
        >>> notes = [Note(id="1", tags=["Work", "home"])]
        >>> [t.name for t in search_tags(notes, "#wo")]
        ['Work']
    """
    fragment = query.strip().lower().removeprefix("#")
    return [tag for tag in collect_tags(notes) if fragment in tag.name.lower()]
