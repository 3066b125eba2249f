"""Encoders from StructuredReference to external string formats.

Formats:
- Deep link: the desktop app's navigation syntax, "Ge1.1-2.3"
- API path: the Bible content API's passage syntax, "Genesis+1:1-2:3"
- Human: normalized display form, "Genesis 1:1-2:3"

decode_deep_link_ref() reverses the deep-link form, so for any accepted
input ``to_human_readable(decode_deep_link_ref(to_deep_link_ref(ref)))``
equals ``to_human_readable(ref)``.
"""

from __future__ import annotations

import logging

from canonref.config import Settings
from canonref.references.books import book_from_abbreviation, deep_link_abbreviation
from canonref.references.models import ReferenceFormats, StructuredReference
from canonref.references.parser import (
    build_reference,
    parse_deep_link_slots,
    parse_reference,
)

logger = logging.getLogger(__name__)


def to_deep_link_ref(ref: StructuredReference) -> str:
    """Encode as a deep-link reference, e.g. "Ge1.1-1.3" or "Ge1-3"."""
    result = f"{deep_link_abbreviation(ref.book)}{ref.chapter}"

    if ref.verse is not None:
        result += f".{ref.verse}"

    if ref.end_chapter is not None:
        result += f"-{ref.end_chapter}"
        if ref.end_verse is not None:
            result += f".{ref.end_verse}"

    return result


def _end_bound(ref: StructuredReference) -> str:
    # Same-chapter ranges use the short "-5" form
    if ref.end_chapter is None:
        return ""
    if ref.end_verse is None:
        return f"-{ref.end_chapter}"
    if ref.end_chapter != ref.chapter:
        return f"-{ref.end_chapter}:{ref.end_verse}"
    return f"-{ref.end_verse}"


def to_api_path_ref(ref: StructuredReference) -> str:
    """Encode for the content API, e.g. "Song+of+Solomon+1:1-5"."""
    result = f"{ref.book.replace(' ', '+')}+{ref.chapter}"
    if ref.verse is not None:
        result += f":{ref.verse}"
    return result + _end_bound(ref)


def to_human_readable(ref: StructuredReference) -> str:
    """Render the normalized display form, e.g. "1 John 3:16"."""
    result = f"{ref.book} {ref.chapter}"
    if ref.verse is not None:
        result += f":{ref.verse}"
    return result + _end_bound(ref)


def decode_deep_link_ref(text: str) -> StructuredReference:
    """Parse a deep-link reference back into a StructuredReference.

    Args:
        text: Deep-link form like "Ge1.1", "1Jn3.16", "Ge1.1-2.3", "Ge1-3"

    Raises:
        MalformedReferenceError: If the text does not match the grammar
        UnknownAbbreviationError: If the book abbreviation is not registered
    """
    slots = parse_deep_link_slots(text)
    book = book_from_abbreviation(slots.book)
    ref = build_reference(book, slots, text.strip())
    logger.debug(f"Decoded deep link {text!r} -> {ref.to_dict()}")
    return ref


def deep_link_url(
    ref: StructuredReference, scheme: str | None = None
) -> str:
    """Build the app URL that opens a passage, e.g. "logos4:///Bible/Ge1.1".

    Only the string is built; opening it is left to the caller.
    """
    if scheme is None:
        scheme = Settings.from_env().deep_link_scheme
    return f"{scheme}///Bible/{to_deep_link_ref(ref)}"


def reference_formats(ref: StructuredReference | str) -> ReferenceFormats:
    """Render a reference (or a reference string) in every format."""
    if isinstance(ref, str):
        ref = parse_reference(ref)
    return ReferenceFormats(
        deep_link=to_deep_link_ref(ref),
        api_path=to_api_path_ref(ref),
        human=to_human_readable(ref),
    )
