"""Unit tests for book name resolution.

Tests cover:
- Canonical names, study abbreviations and deep-link abbreviations
- Case variants and surrounding whitespace
- Internal spacing in numbered books ("1 Cor")
- Unknown names (no fuzzy or prefix matching)
"""

from __future__ import annotations

import pytest

from canonref.references.books import (
    BOOK_ALIASES,
    BOOK_TO_DEEP_LINK,
    CANONICAL_BOOKS,
    DEEP_LINK_TO_BOOK,
    SINGLE_CHAPTER_BOOKS,
    book_from_abbreviation,
    deep_link_abbreviation,
    is_single_chapter,
    lookup_book,
    resolve_book_name,
)
from canonref.references.errors import UnknownAbbreviationError, UnknownBookError


class TestBookTables:
    """Tests for the fixed lookup tables."""

    def test_sixty_six_books(self):
        """The canon has 66 distinct books."""
        assert len(CANONICAL_BOOKS) == 66
        assert len(set(CANONICAL_BOOKS)) == 66

    def test_canonical_order(self):
        """Books are listed in conventional order."""
        assert CANONICAL_BOOKS[0] == "Genesis"
        assert CANONICAL_BOOKS[38] == "Malachi"
        assert CANONICAL_BOOKS[39] == "Matthew"
        assert CANONICAL_BOOKS[-1] == "Revelation"

    def test_deep_link_abbreviations_are_unique(self):
        """Every book has its own deep-link abbreviation."""
        assert len(DEEP_LINK_TO_BOOK) == len(BOOK_TO_DEEP_LINK)

    def test_aliases_point_at_canonical_books(self):
        """Every alias targets one of the 66 canonical names."""
        assert set(BOOK_ALIASES.values()) <= set(CANONICAL_BOOKS)

    def test_tables_are_read_only(self):
        """Lookup tables cannot be mutated at runtime."""
        with pytest.raises(TypeError):
            BOOK_TO_DEEP_LINK["Genesis"] = "Gn"  # type: ignore[index]

    def test_single_chapter_books(self):
        """The five single-chapter books are flagged."""
        assert SINGLE_CHAPTER_BOOKS == {
            "Obadiah",
            "Philemon",
            "2 John",
            "3 John",
            "Jude",
        }
        assert is_single_chapter("Jude")
        assert not is_single_chapter("1 John")


class TestResolveBookName:
    """Tests for resolve_book_name()."""

    @pytest.mark.parametrize("book", CANONICAL_BOOKS)
    def test_canonical_names_and_case_variants(self, book):
        """Canonical names resolve to themselves in any case."""
        assert resolve_book_name(book) == book
        assert resolve_book_name(book.lower()) == book
        assert resolve_book_name(book.upper()) == book
        assert resolve_book_name(book.swapcase()) == book

    @pytest.mark.parametrize("alias,book", sorted(BOOK_ALIASES.items()))
    def test_study_abbreviations(self, alias, book):
        """Common abbreviations resolve in any case."""
        assert resolve_book_name(alias) == book
        assert resolve_book_name(alias.lower()) == book
        assert resolve_book_name(alias.upper()) == book

    @pytest.mark.parametrize("abbr,book", sorted(DEEP_LINK_TO_BOOK.items()))
    def test_deep_link_abbreviations(self, abbr, book):
        """Deep-link abbreviations resolve in any case."""
        assert resolve_book_name(abbr) == book
        assert resolve_book_name(abbr.lower()) == book
        assert resolve_book_name(abbr.upper()) == book

    def test_examples(self):
        """Spot checks across the three sources."""
        assert resolve_book_name("Gen") == "Genesis"
        assert resolve_book_name("Psa") == "Psalms"
        assert resolve_book_name("Psalm") == "Psalms"
        assert resolve_book_name("1Cor") == "1 Corinthians"
        assert resolve_book_name("Ge") == "Genesis"
        assert resolve_book_name("1Jn") == "1 John"
        assert resolve_book_name("Jud") == "Jude"
        assert resolve_book_name("Judg") == "Judges"

    def test_whitespace_is_trimmed(self):
        """Leading and trailing whitespace is ignored."""
        assert resolve_book_name("  Genesis  ") == "Genesis"

    def test_internal_spacing(self):
        """Numbered books accept a space after the numeral."""
        assert resolve_book_name("1 Cor") == "1 Corinthians"
        assert resolve_book_name("2 tim") == "2 Timothy"
        assert resolve_book_name("1john") == "1 John"

    @pytest.mark.parametrize("name", ["G e n", "Jo b", "Song ofSolomon", "Gene sis"])
    def test_spacing_inside_a_name_is_not_ignored(self, name):
        """Only the space after a leading numeral is optional."""
        with pytest.raises(UnknownBookError):
            resolve_book_name(name)

    def test_extra_space_after_numeral(self):
        assert resolve_book_name("1  Cor") == "1 Corinthians"

    def test_unknown_book_raises(self):
        """Unknown names raise UnknownBookError naming the input."""
        with pytest.raises(UnknownBookError) as exc_info:
            resolve_book_name("Hezekiahs")
        assert "Hezekiahs" in str(exc_info.value)
        assert exc_info.value.token == "Hezekiahs"

    def test_no_prefix_matching(self):
        """A prefix of a book name is not a guess at that book."""
        with pytest.raises(UnknownBookError):
            resolve_book_name("Gene")
        with pytest.raises(UnknownBookError):
            resolve_book_name("Revel")

    def test_unknown_book_is_value_error(self):
        """Resolution errors are ValueErrors."""
        with pytest.raises(ValueError):
            resolve_book_name("")


class TestLookupBook:
    """Tests for lookup_book()."""

    def test_returns_canonical_name(self):
        assert lookup_book("rev") == "Revelation"

    def test_returns_none_when_unknown(self):
        assert lookup_book("Hezekiahs") is None
        assert lookup_book("") is None


class TestAbbreviationHelpers:
    """Tests for deep_link_abbreviation() and book_from_abbreviation()."""

    def test_forward(self):
        assert deep_link_abbreviation("Genesis") == "Ge"
        assert deep_link_abbreviation("Song of Solomon") == "So"
        assert deep_link_abbreviation("1 John") == "1Jn"

    def test_forward_requires_canonical_name(self):
        with pytest.raises(UnknownBookError):
            deep_link_abbreviation("Gen")

    def test_reverse(self):
        assert book_from_abbreviation("Ge") == "Genesis"
        assert book_from_abbreviation("Tt") == "Titus"

    def test_reverse_unknown(self):
        with pytest.raises(UnknownAbbreviationError) as exc_info:
            book_from_abbreviation("Gen")
        assert exc_info.value.token == "Gen"
