"""Unit tests for the Easter computus and movable feasts."""

from __future__ import annotations

from datetime import date

import pytest

from canonref.liturgical.computus import (
    add_days,
    advent_start,
    ash_wednesday,
    easter_date,
    palm_sunday,
    pentecost_sunday,
    sunday_offset,
)


class TestEasterDate:
    """Tests for easter_date() against published tables."""

    @pytest.mark.parametrize(
        "year,expected",
        [
            (1818, date(1818, 3, 22)),
            (1943, date(1943, 4, 25)),
            (2000, date(2000, 4, 23)),
            (2008, date(2008, 3, 23)),
            (2011, date(2011, 4, 24)),
            (2019, date(2019, 4, 21)),
            (2022, date(2022, 4, 17)),
            (2023, date(2023, 4, 9)),
            (2024, date(2024, 3, 31)),
            (2025, date(2025, 4, 20)),
            (2026, date(2026, 4, 5)),
            (2038, date(2038, 4, 25)),
        ],
    )
    def test_known_years(self, year, expected):
        assert easter_date(year) == expected

    @pytest.mark.parametrize("year", range(1900, 2101))
    def test_always_sunday_in_window(self, year):
        """Easter falls on a Sunday between March 22 and April 25."""
        easter = easter_date(year)
        assert easter.weekday() == 6
        assert date(year, 3, 22) <= easter <= date(year, 4, 25)


class TestDateHelpers:
    """Tests for day arithmetic helpers."""

    def test_add_days_returns_new_value(self):
        base = date(2024, 3, 31)
        assert add_days(base, -46) == date(2024, 2, 14)
        assert base == date(2024, 3, 31)

    def test_sunday_offset(self):
        assert sunday_offset(date(2024, 12, 22)) == 0  # Sunday
        assert sunday_offset(date(2024, 12, 25)) == 3  # Wednesday
        assert sunday_offset(date(2024, 12, 28)) == 6  # Saturday


class TestMovableFeasts:
    """Feasts derived from Easter."""

    def test_ash_wednesday(self):
        assert ash_wednesday(2024) == date(2024, 2, 14)
        assert ash_wednesday(2025) == date(2025, 3, 5)
        assert ash_wednesday(2025).weekday() == 2

    def test_palm_sunday(self):
        assert palm_sunday(2024) == date(2024, 3, 24)

    def test_pentecost(self):
        assert pentecost_sunday(2024) == date(2024, 5, 19)
        assert pentecost_sunday(2025) == date(2025, 6, 8)


class TestAdventStart:
    """Tests for advent_start()."""

    @pytest.mark.parametrize(
        "year,expected",
        [
            (2022, date(2022, 11, 27)),  # Christmas on a Sunday
            (2023, date(2023, 12, 3)),  # Christmas on a Monday
            (2024, date(2024, 12, 1)),
            (2025, date(2025, 11, 30)),
            (2026, date(2026, 11, 29)),
        ],
    )
    def test_known_years(self, year, expected):
        assert advent_start(year) == expected

    @pytest.mark.parametrize("year", range(2000, 2040))
    def test_fourth_sunday_before_christmas(self, year):
        start = advent_start(year)
        assert start.weekday() == 6
        assert date(year, 11, 27) <= start <= date(year, 12, 3)
