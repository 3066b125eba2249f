"""Scripture reference resolution, parsing and encoding."""

from canonref.references.errors import (
    ScriptureRefError,
    MalformedReferenceError,
    UnknownBookError,
    UnknownAbbreviationError,
)
from canonref.references.models import StructuredReference, ReferenceFormats
from canonref.references.books import (
    CANONICAL_BOOKS,
    SINGLE_CHAPTER_BOOKS,
    lookup_book,
    resolve_book_name,
)
from canonref.references.parser import parse_reference
from canonref.references.encoders import (
    to_deep_link_ref,
    to_api_path_ref,
    to_human_readable,
    decode_deep_link_ref,
    deep_link_url,
    reference_formats,
)
from canonref.references.context import expand_range

__all__ = [
    "ScriptureRefError",
    "MalformedReferenceError",
    "UnknownBookError",
    "UnknownAbbreviationError",
    "StructuredReference",
    "ReferenceFormats",
    "CANONICAL_BOOKS",
    "SINGLE_CHAPTER_BOOKS",
    "lookup_book",
    "resolve_book_name",
    "parse_reference",
    "to_deep_link_ref",
    "to_api_path_ref",
    "to_human_readable",
    "decode_deep_link_ref",
    "deep_link_url",
    "reference_formats",
    "expand_range",
]
