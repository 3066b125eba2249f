"""Reference grammar parser.

Converts human-typed references into StructuredReference values.

Grammar:
    reference := book SPACE chapter [":" verse] [range]
    range     := [SPACE] DASH [SPACE] number [":" number]
    book      := [digit [SPACE]] word (SPACE word)* ["."]

Four numeric slots are read positionally: first chapter, first verse, then
after the dash either an end verse (same chapter) or an end chapter with its
own verse. Once a dash is seen:
- no colon before the dash: both numbers are chapters ("Genesis 1-3")
- colon before the dash: the number after it is a verse in the same chapter
  ("Genesis 1:1-5") unless it is followed by ":n" ("Genesis 1:1-2:3")

Single-chapter books (Obadiah, Philemon, 2 John, 3 John, Jude) read a lone
number as a verse with the chapter fixed at 1 ("Jude 4" -> Jude 1:4).

The same slot rules back the deep-link decoder, whose grammar is
``[digit]letters chapter["." verse]["-" chapter["." verse]]``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from canonref.references.books import is_single_chapter, resolve_book_name
from canonref.references.errors import MalformedReferenceError
from canonref.references.models import StructuredReference

logger = logging.getLogger(__name__)

NUMBER = "number"
WORD = "word"
COLON = "colon"
DASH = "dash"
DOT = "dot"
SPACE = "space"

DASH_CHARS = frozenset("-–—")  # hyphen, en-dash, em-dash


@dataclass(frozen=True)
class Token:
    kind: str
    text: str
    start: int
    end: int


def tokenize(text: str) -> list[Token]:
    """Split a reference string into tokens.

    Raises:
        MalformedReferenceError: On any character outside the grammar
    """
    tokens: list[Token] = []
    i = 0
    n = len(text)

    while i < n:
        ch = text[i]
        j = i + 1
        if ch.isascii() and ch.isdigit():
            while j < n and text[j].isascii() and text[j].isdigit():
                j += 1
            kind = NUMBER
        elif ch.isascii() and ch.isalpha():
            while j < n and text[j].isascii() and text[j].isalpha():
                j += 1
            kind = WORD
        elif ch.isspace():
            while j < n and text[j].isspace():
                j += 1
            kind = SPACE
        elif ch == ":":
            kind = COLON
        elif ch in DASH_CHARS:
            kind = DASH
        elif ch == ".":
            kind = DOT
        else:
            raise MalformedReferenceError(
                f'Cannot parse reference: "{text}" (unexpected "{ch}")', token=ch
            )
        tokens.append(Token(kind, text[i:j], i, j))
        i = j

    return tokens


@dataclass(frozen=True)
class Slots:
    """Raw positional numbers pulled out of a reference."""

    book: str
    first: int
    second: int | None = None
    third: int | None = None
    fourth: int | None = None


class _TokenStream:
    """Cursor over a token list with accept/expect helpers."""

    def __init__(self, text: str):
        self.text = text
        self.tokens = tokenize(text)
        self.pos = 0

    def peek(self, offset: int = 0) -> Token | None:
        index = self.pos + offset
        if index < len(self.tokens):
            return self.tokens[index]
        return None

    def accept(self, kind: str) -> Token | None:
        token = self.peek()
        if token is not None and token.kind == kind:
            self.pos += 1
            return token
        return None

    def expect(self, kind: str) -> Token:
        token = self.accept(kind)
        if token is None:
            self.fail()
        return token

    def number(self) -> int:
        return int(self.expect(NUMBER).text)

    def finish(self) -> None:
        if self.pos != len(self.tokens):
            self.fail()

    def fail(self) -> None:
        token = self.peek()
        found = token.text if token is not None else ""
        raise MalformedReferenceError(
            f'Cannot parse reference: "{self.text}"', token=found or self.text
        )


class _ReferenceParser(_TokenStream):
    """Recursive-descent parser for human references."""

    def parse(self) -> Slots:
        book = self.book_token()
        self.expect(SPACE)

        first = self.number()
        second = self.number() if self.accept(COLON) else None
        third, fourth = self.range_end()

        self.finish()
        return Slots(book, first, second, third, fourth)

    def book_token(self) -> str:
        start_token = self.peek()
        if start_token is None:
            self.fail()

        # Leading numeral of "1 John", "2Tim"
        if start_token.kind == NUMBER and len(start_token.text) == 1:
            self.pos += 1
            self.accept(SPACE)

        last = self.expect(WORD)
        while self._at(SPACE, WORD):
            self.pos += 1
            last = self.expect(WORD)

        self.accept(DOT)
        return self.text[start_token.start : last.end]

    def range_end(self) -> tuple[int | None, int | None]:
        mark = self.pos
        self.accept(SPACE)
        if not self.accept(DASH):
            self.pos = mark
            return None, None

        self.accept(SPACE)
        third = self.number()
        fourth = self.number() if self.accept(COLON) else None
        return third, fourth

    def _at(self, *kinds: str) -> bool:
        for offset, kind in enumerate(kinds):
            token = self.peek(offset)
            if token is None or token.kind != kind:
                return False
        return True


class _DeepLinkParser(_TokenStream):
    """Parser for the desktop app's compact form, e.g. "1Jn3.16-4.2"."""

    def parse(self) -> Slots:
        start_token = self.peek()
        if start_token is None:
            self.fail()

        if (
            start_token.kind == NUMBER
            and len(start_token.text) == 1
            and self._word_follows()
        ):
            self.pos += 1
        word = self.expect(WORD)
        abbr = self.text[start_token.start : word.end]

        first = self.number()
        second = self.number() if self.accept(DOT) else None
        third = fourth = None
        if self.accept(DASH):
            third = self.number()
            fourth = self.number() if self.accept(DOT) else None

        self.finish()
        return Slots(abbr, first, second, third, fourth)

    def _word_follows(self) -> bool:
        token = self.peek(1)
        return token is not None and token.kind == WORD


def parse_slots(text: str) -> Slots:
    """Parse a human reference into raw slots without resolving the book."""
    return _ReferenceParser(text.strip()).parse()


def parse_deep_link_slots(text: str) -> Slots:
    """Parse a deep-link reference into raw slots without resolving the book."""
    stream = _DeepLinkParser(text.strip())
    if any(t.kind == SPACE for t in stream.tokens):
        stream.fail()
    return stream.parse()


def build_reference(book: str, slots: Slots, source: str) -> StructuredReference:
    """Apply the slot disambiguation rules to a resolved book.

    Args:
        book: Canonical book name
        slots: Numbers read from the input
        source: Original input, quoted in error messages

    Raises:
        MalformedReferenceError: If the slots do not form a valid reference
    """
    first, second, third, fourth = slots.first, slots.second, slots.third, slots.fourth

    def malformed(detail: str) -> MalformedReferenceError:
        return MalformedReferenceError(
            f'Cannot parse reference: "{source}" ({detail})', token=source
        )

    if is_single_chapter(book):
        if second is None:
            # "Jude 4", "Jude 4-6": every number is a verse
            if fourth is not None:
                raise malformed(f"{book} has only one chapter")
            if third is None:
                return StructuredReference(book, 1, first)
            return StructuredReference(book, 1, first, 1, third)

        # "Jude 1:4", "Jude 1:4-6", "Jude 1:4-1:6"
        if first != 1 or (fourth is not None and third != 1):
            raise malformed(f"{book} has only one chapter")
        if third is None:
            return StructuredReference(book, 1, second)
        return StructuredReference(book, 1, second, 1, third if fourth is None else fourth)

    if second is None:
        if third is None:
            return StructuredReference(book, first)
        if fourth is not None:
            raise malformed("a chapter range cannot end on a verse")
        return StructuredReference(book, first, end_chapter=third)

    if third is None:
        return StructuredReference(book, first, second)
    if fourth is None:
        return StructuredReference(book, first, second, first, third)
    return StructuredReference(book, first, second, third, fourth)


def parse_reference(text: str) -> StructuredReference:
    """Parse a human-readable scripture reference.

    Args:
        text: Reference like "Genesis 1:1-5", "1 Cor 13:4", "Jude 4",
            "Ps 119:105–112", "Genesis 1-3"

    Returns:
        StructuredReference with a canonical book name

    Raises:
        MalformedReferenceError: If the text does not match the grammar
        UnknownBookError: If the book token does not resolve

    Examples:
        >>> parse_reference("Genesis 1:1")
        StructuredReference(book='Genesis', chapter=1, verse=1, end_chapter=None, end_verse=None)

        >>> parse_reference("Jude 4")
        StructuredReference(book='Jude', chapter=1, verse=4, end_chapter=None, end_verse=None)
    """
    slots = parse_slots(text)
    book = resolve_book_name(slots.book)
    ref = build_reference(book, slots, text.strip())
    logger.debug(f"Parsed {text!r} -> {ref.to_dict()}")
    return ref
