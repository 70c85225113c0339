"""Note text parsing.

Turns a raw markdown note (optionally carrying YAML frontmatter) into
the title, content and tags that make up a Note payload. Tags come from
the frontmatter ``tags`` field and from inline hashtags in the body.

Example:
    >>> parse_note_text("---\\ntags: [work]\\n---\\n# Plan\\nShip it #release").tags
    ['work', 'release']
"""

import re

import frontmatter

from note_insights.dependencies import logger
from note_insights.notes.models import NoteFrontmatter, ParsedNote

# A hashtag runs until whitespace or the start of another tag/reminder marker
HASHTAG_PATTERN = re.compile(r"#([^\s#@]+)")


def extract_hashtags(content: str) -> list[str]:
    """Extract inline hashtags from note content.

    Args:
        content: Note body

    Returns:
        Tag texts without the ``#`` prefix, in first-seen order

    Examples:
        >>> extract_hashtags("Ship #release for #work and #work again")
        ['release', 'work']
        >>> extract_hashtags("# Heading only")
        []
    """
    return list(dict.fromkeys(HASHTAG_PATTERN.findall(content)))


def extract_title(body: str) -> str:
    """Extract a note title from its body.

    Prefers the first H1 heading (``# Title``) and falls back to the
    first non-empty line.

    Examples:
        >>> extract_title("intro\\n# My Note\\nContent")
        'My Note'
        >>> extract_title("\\n  Shopping list\\n- milk")
        'Shopping list'
    """
    first_line = ""
    for line in body.split("\n"):
        line = line.strip()
        if line.startswith("# "):
            return line[2:].strip()
        if line and not first_line:
            first_line = line
    return first_line


def split_frontmatter(text: str) -> tuple[NoteFrontmatter | None, str]:
    """Separate YAML frontmatter from the markdown body.

    Malformed frontmatter is treated as part of the body.

    Args:
        text: Raw note text

    Returns:
        Tuple of (parsed frontmatter or None, body)
    """
    try:
        post = frontmatter.loads(text)
        fm = NoteFrontmatter(**post.metadata) if post.metadata else None
        return fm, post.content
    except Exception as e:
        logger.debug("frontmatter_parse_failed", extra={"error": str(e)})
        return None, text


def parse_note_text(text: str) -> ParsedNote:
    """Parse raw note text into title, content and tags.

    Args:
        text: Raw note text (may or may not have frontmatter)

    Returns:
        ParsedNote ready to be combined with an id into a Note
    """
    fm, body = split_frontmatter(text)

    tags = list(fm.tags) if fm else []
    tags.extend(extract_hashtags(body))
    title = fm.title if fm and fm.title else extract_title(body)

    return ParsedNote(title=title, content=body, tags=list(dict.fromkeys(tags)))
