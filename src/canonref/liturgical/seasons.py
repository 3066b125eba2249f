"""Liturgical season intervals for a civil year.

Every interval is a closed ``[start, end]`` pair of dates, suitable as
inclusive bounds for a date filter. Some adjacent seasons share their
boundary day: Palm Sunday closes Lent and opens Holy Week, Pentecost Sunday
closes Easter and opens Pentecost, and the first Sunday of Advent closes
Ordinary Time.

Known limitation: ``ordinary`` covers only the stretch after Pentecost. The
January-to-Ash-Wednesday stretch is not returned.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from enum import Enum

from canonref.config import SEASON_LABELS
from canonref.liturgical.computus import (
    add_days,
    advent_start,
    ash_wednesday,
    easter_date,
    palm_sunday,
    pentecost_sunday,
)

logger = logging.getLogger(__name__)


class Season(str, Enum):
    advent = "advent"
    christmas = "christmas"
    epiphany = "epiphany"
    lent = "lent"
    holy_week = "holy_week"
    easter = "easter"
    pentecost = "pentecost"
    ordinary = "ordinary"

    @property
    def label(self) -> str:
        return SEASON_LABELS[self.value]


@dataclass(frozen=True)
class SeasonInterval:
    """Inclusive date range of one season in one year."""

    season: Season
    start: date
    end: date

    def contains(self, d: date) -> bool:
        return self.start <= d <= self.end

    @property
    def days(self) -> int:
        """Number of days covered, counting both ends."""
        return (self.end - self.start).days + 1

    def as_iso(self) -> tuple[str, str]:
        """Return (start, end) as ISO strings for SQL-style date bounds."""
        return self.start.isoformat(), self.end.isoformat()


def normalize_season_name(name: str) -> Season | None:
    """Map "Holy Week", "holy-week", "HOLY_WEEK" etc. to a Season."""
    key = "_".join(name.strip().lower().replace("-", " ").split())
    try:
        return Season(key)
    except ValueError:
        return None


def _bounds(year: int, season: Season) -> tuple[date, date]:
    if season is Season.advent:
        return advent_start(year), date(year, 12, 24)
    if season is Season.christmas:
        return date(year, 12, 25), date(year + 1, 1, 5)
    if season is Season.epiphany:
        return date(year, 1, 6), date(year, 2, 2)

    if season is Season.lent:
        return ash_wednesday(year), palm_sunday(year)
    if season is Season.holy_week:
        return palm_sunday(year), add_days(easter_date(year), -1)
    if season is Season.easter:
        return easter_date(year), pentecost_sunday(year)

    pentecost = pentecost_sunday(year)
    if season is Season.pentecost:
        return pentecost, add_days(pentecost, 7)
    # Ordinary Time after Pentecost, up to the next Advent
    return add_days(pentecost, 1), advent_start(year)


def season_interval(year: int, season_name: str | Season) -> SeasonInterval | None:
    """Compute the date interval of a liturgical season.

    Args:
        year: Civil year (Advent and Christmas start in this year)
        season_name: One of advent, christmas, epiphany, lent, holy_week,
            easter, pentecost, ordinary (case-insensitive)

    Returns:
        SeasonInterval, or None if the season name is not recognised
    """
    season = (
        season_name
        if isinstance(season_name, Season)
        else normalize_season_name(season_name)
    )
    if season is None:
        logger.debug(f"Unknown liturgical season: {season_name!r}")
        return None

    start, end = _bounds(year, season)
    return SeasonInterval(season=season, start=start, end=end)


def season_intervals(year: int) -> dict[Season, SeasonInterval]:
    """All seasons for ``year``, in liturgical order."""
    return {season: season_interval(year, season) for season in Season}
