"""Context expansion around a verse reference."""

from __future__ import annotations

import logging

from canonref.config import Settings
from canonref.references.parser import parse_reference

logger = logging.getLogger(__name__)


def expand_range(text: str, margin: int | None = None) -> str:
    """Widen a verse reference by ``margin`` verses on each side.

    Chapter-only references ("Genesis 1", "Genesis 1-3") are returned
    unchanged. The start is clamped at verse 1; the end is not clamped to
    the chapter's real length, so callers fetching text must tolerate
    verses past the end of a chapter.

    Args:
        text: Reference like "John 3:16" or "Genesis 1:30-2:3"
        margin: Verses of context on each side (default from
            CANONREF_CONTEXT_VERSES, else 5)

    Returns:
        Reference string like "John 3:11-21" or "Genesis 1:25-2:8"

    Raises:
        ValueError: If margin is negative
        MalformedReferenceError, UnknownBookError: If text does not parse
    """
    if margin is None:
        margin = Settings.from_env().context_verses
    if margin < 0:
        raise ValueError(f"Context margin must be non-negative, got {margin}")

    ref = parse_reference(text)
    if ref.verse is None:
        return text

    start = max(1, ref.verse - margin)
    end = (ref.end_verse if ref.end_verse is not None else ref.verse) + margin
    end_chapter = ref.end_chapter if ref.end_chapter is not None else ref.chapter

    end_prefix = "" if end_chapter == ref.chapter else f"{end_chapter}:"
    expanded = f"{ref.book} {ref.chapter}:{start}-{end_prefix}{end}"
    logger.debug(f"Expanded {text!r} by {margin} -> {expanded!r}")
    return expanded
