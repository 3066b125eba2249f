"""Structured reference types shared by the parser and encoders."""

from __future__ import annotations

from dataclasses import dataclass

from canonref.references.errors import MalformedReferenceError


@dataclass(frozen=True)
class StructuredReference:
    """A parsed scripture reference.

    Shapes produced by the parser:
    - "Genesis 1"        -> chapter only
    - "Genesis 1-3"      -> chapter range (end_chapter, no verses)
    - "Genesis 1:1"      -> single verse
    - "Genesis 1:1-5"    -> verse range, end_chapter == chapter
    - "Genesis 1:1-2:3"  -> cross-chapter verse range
    """

    book: str
    chapter: int
    verse: int | None = None
    end_chapter: int | None = None
    end_verse: int | None = None

    def __post_init__(self) -> None:
        for label, value in (
            ("chapter", self.chapter),
            ("verse", self.verse),
            ("end chapter", self.end_chapter),
            ("end verse", self.end_verse),
        ):
            if value is not None and value < 1:
                raise MalformedReferenceError(
                    f"Invalid {label} number: {value}. Numbering starts at 1.",
                    token=str(value),
                )

        if self.end_verse is not None and self.end_chapter is None:
            raise MalformedReferenceError(
                "An end verse requires an end chapter.", token=str(self.end_verse)
            )
        if self.end_verse is not None and self.verse is None:
            raise MalformedReferenceError(
                "An end verse requires a starting verse.", token=str(self.end_verse)
            )
        if (
            self.verse is not None
            and self.end_chapter is not None
            and self.end_verse is None
        ):
            raise MalformedReferenceError(
                "A verse range must end on a verse.", token=str(self.end_chapter)
            )

        if self.end_chapter is not None:
            start = (self.chapter, self.verse or 0)
            end = (self.end_chapter, self.end_verse or 0)
            if end < start:
                raise MalformedReferenceError(
                    f"Reversed range in {self.book}: end "
                    f"{':'.join(str(n) for n in end if n)} precedes start "
                    f"{':'.join(str(n) for n in start if n)}.",
                    token=str(self.end_verse or self.end_chapter),
                )

    @property
    def is_chapter_only(self) -> bool:
        """True for "Genesis 1" and "Genesis 1-3" style references."""
        return self.verse is None

    @property
    def is_range(self) -> bool:
        return self.end_chapter is not None

    def to_dict(self) -> dict:
        """Return the reference as a dict, leaving out absent fields."""
        data: dict = {"book": self.book, "chapter": self.chapter}
        if self.verse is not None:
            data["verse"] = self.verse
        if self.end_chapter is not None:
            data["end_chapter"] = self.end_chapter
        if self.end_verse is not None:
            data["end_verse"] = self.end_verse
        return data

    def __str__(self) -> str:
        from canonref.references.encoders import to_human_readable

        return to_human_readable(self)


@dataclass(frozen=True)
class ReferenceFormats:
    """One reference rendered for every downstream consumer."""

    deep_link: str  # e.g. "Ge1.1"
    api_path: str  # e.g. "Genesis+1:1"
    human: str  # e.g. "Genesis 1:1"
