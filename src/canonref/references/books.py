"""Book name canonicalization.

Every accepted spelling of a book resolves to one canonical full name
(e.g. "Genesis", "1 Corinthians", "Song of Solomon").

Three sources feed the lookup, registered in this order (later wins on a
clash):
1. The 66 canonical names
2. Common study abbreviations ("Gen", "Psa", "1Cor")
3. The desktop app's deep-link abbreviations ("Ge", "1Jn"), reversed

Matching is exact and case-insensitive after trimming. The only spacing
leeway is after a leading book numeral, so "1 Cor" finds "1Cor" and "1john"
finds "1 John"; "G e n" is not Genesis. There is no fuzzy or prefix matching:
an unrecognised token is an error, never a guess.
"""

from __future__ import annotations

import logging
import re
from types import MappingProxyType
from typing import Mapping

from canonref.references.errors import UnknownAbbreviationError, UnknownBookError

logger = logging.getLogger(__name__)


# ============================================================================
# Canonical names -> deep-link abbreviations (66 books, canonical order)
# ============================================================================

BOOK_TO_DEEP_LINK: Mapping[str, str] = MappingProxyType(
    {
        # Law
        "Genesis": "Ge",
        "Exodus": "Ex",
        "Leviticus": "Le",
        "Numbers": "Nu",
        "Deuteronomy": "Dt",
        # History
        "Joshua": "Jos",
        "Judges": "Jdg",
        "Ruth": "Ru",
        "1 Samuel": "1Sa",
        "2 Samuel": "2Sa",
        "1 Kings": "1Ki",
        "2 Kings": "2Ki",
        "1 Chronicles": "1Ch",
        "2 Chronicles": "2Ch",
        "Ezra": "Ezr",
        "Nehemiah": "Ne",
        "Esther": "Es",
        # Wisdom
        "Job": "Job",
        "Psalms": "Ps",
        "Proverbs": "Pr",
        "Ecclesiastes": "Ec",
        "Song of Solomon": "So",
        # Prophets
        "Isaiah": "Is",
        "Jeremiah": "Je",
        "Lamentations": "La",
        "Ezekiel": "Eze",
        "Daniel": "Da",
        "Hosea": "Ho",
        "Joel": "Joe",
        "Amos": "Am",
        "Obadiah": "Ob",
        "Jonah": "Jon",
        "Micah": "Mic",
        "Nahum": "Na",
        "Habakkuk": "Hab",
        "Zephaniah": "Zep",
        "Haggai": "Hag",
        "Zechariah": "Zec",
        "Malachi": "Mal",
        # Gospels and Acts
        "Matthew": "Mt",
        "Mark": "Mk",
        "Luke": "Lk",
        "John": "Jn",
        "Acts": "Ac",
        # Epistles
        "Romans": "Ro",
        "1 Corinthians": "1Co",
        "2 Corinthians": "2Co",
        "Galatians": "Ga",
        "Ephesians": "Eph",
        "Philippians": "Php",
        "Colossians": "Col",
        "1 Thessalonians": "1Th",
        "2 Thessalonians": "2Th",
        "1 Timothy": "1Ti",
        "2 Timothy": "2Ti",
        "Titus": "Tt",
        "Philemon": "Phm",
        "Hebrews": "Heb",
        "James": "Jas",
        "1 Peter": "1Pe",
        "2 Peter": "2Pe",
        "1 John": "1Jn",
        "2 John": "2Jn",
        "3 John": "3Jn",
        "Jude": "Jud",
        "Revelation": "Re",
    }
)

CANONICAL_BOOKS: tuple[str, ...] = tuple(BOOK_TO_DEEP_LINK)

DEEP_LINK_TO_BOOK: Mapping[str, str] = MappingProxyType(
    {abbr: book for book, abbr in BOOK_TO_DEEP_LINK.items()}
)

# Common abbreviations not already covered by the deep-link set
BOOK_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "Gen": "Genesis",
        "Exod": "Exodus",
        "Lev": "Leviticus",
        "Num": "Numbers",
        "Deut": "Deuteronomy",
        "Josh": "Joshua",
        "Judg": "Judges",
        "1Sam": "1 Samuel",
        "2Sam": "2 Samuel",
        "1Kgs": "1 Kings",
        "2Kgs": "2 Kings",
        "1Chr": "1 Chronicles",
        "2Chr": "2 Chronicles",
        "Neh": "Nehemiah",
        "Esth": "Esther",
        "Psa": "Psalms",
        "Psalm": "Psalms",
        "Prov": "Proverbs",
        "Eccl": "Ecclesiastes",
        "Song": "Song of Solomon",
        "Isa": "Isaiah",
        "Jer": "Jeremiah",
        "Lam": "Lamentations",
        "Ezek": "Ezekiel",
        "Dan": "Daniel",
        "Hos": "Hosea",
        "Amo": "Amos",
        "Obad": "Obadiah",
        "Mic": "Micah",
        "Nah": "Nahum",
        "Hab": "Habakkuk",
        "Zeph": "Zephaniah",
        "Hag": "Haggai",
        "Zech": "Zechariah",
        "Mal": "Malachi",
        "Matt": "Matthew",
        "Mrk": "Mark",
        "Luk": "Luke",
        "Joh": "John",
        "Rom": "Romans",
        "1Cor": "1 Corinthians",
        "2Cor": "2 Corinthians",
        "Gal": "Galatians",
        "Phil": "Philippians",
        "1Thess": "1 Thessalonians",
        "2Thess": "2 Thessalonians",
        "1Tim": "1 Timothy",
        "2Tim": "2 Timothy",
        "Tit": "Titus",
        "Phlm": "Philemon",
        "Jas": "James",
        "1Pet": "1 Peter",
        "2Pet": "2 Peter",
        "Rev": "Revelation",
    }
)

# "Jude 4" means chapter 1, verse 4
SINGLE_CHAPTER_BOOKS: frozenset[str] = frozenset(
    {"Obadiah", "Philemon", "2 John", "3 John", "Jude"}
)


def _build_name_lookup() -> Mapping[str, str]:
    lookup: dict[str, str] = {}
    for book in CANONICAL_BOOKS:
        lookup[book.lower()] = book
    for alias, book in BOOK_ALIASES.items():
        lookup[alias.lower()] = book
    for abbr, book in DEEP_LINK_TO_BOOK.items():
        lookup[abbr.lower()] = book
    return MappingProxyType(lookup)


NAME_LOOKUP: Mapping[str, str] = _build_name_lookup()

# Leading book numeral, with or without a following space ("1 cor", "1john")
NUMERAL_PREFIX = re.compile(r"^([123])\s*(?=[a-z])")


def lookup_book(name: str) -> str | None:
    """Return the canonical book name for ``name``, or None if unknown."""
    key = name.strip().lower()
    book = NAME_LOOKUP.get(key)
    if book is None and NUMERAL_PREFIX.match(key):
        # "1 cor" -> "1cor", "1john" -> "1 john"
        book = NAME_LOOKUP.get(NUMERAL_PREFIX.sub(r"\1", key)) or NAME_LOOKUP.get(
            NUMERAL_PREFIX.sub(r"\1 ", key)
        )
    return book


def resolve_book_name(name: str) -> str:
    """Resolve any accepted spelling of a book to its canonical name.

    Args:
        name: Full name, common abbreviation or deep-link abbreviation
            (e.g. "Genesis", "gen", "Ge", "1 Cor", "1Jn")

    Returns:
        Canonical book name (e.g. "Genesis", "1 Corinthians")

    Raises:
        UnknownBookError: If the name has no resolution
    """
    book = lookup_book(name)
    if book is None:
        raise UnknownBookError(f'Unknown book: "{name.strip()}"', token=name.strip())
    logger.debug(f"Resolved book {name!r} -> {book}")
    return book


def deep_link_abbreviation(book: str) -> str:
    """Return the deep-link abbreviation for a canonical book name."""
    try:
        return BOOK_TO_DEEP_LINK[book]
    except KeyError:
        raise UnknownBookError(
            f'No deep-link abbreviation for: "{book}"', token=book
        ) from None


def book_from_abbreviation(abbr: str) -> str:
    """Reverse a deep-link abbreviation (case-sensitive, as the app emits it)."""
    try:
        return DEEP_LINK_TO_BOOK[abbr]
    except KeyError:
        raise UnknownAbbreviationError(
            f'Unknown deep-link abbreviation: "{abbr}"', token=abbr
        ) from None


def is_single_chapter(book: str) -> bool:
    return book in SINGLE_CHAPTER_BOOKS
