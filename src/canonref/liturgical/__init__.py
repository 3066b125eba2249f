"""Liturgical calendar arithmetic."""

from canonref.liturgical.computus import (
    easter_date,
    ash_wednesday,
    palm_sunday,
    pentecost_sunday,
    advent_start,
)
from canonref.liturgical.seasons import (
    Season,
    SeasonInterval,
    normalize_season_name,
    season_interval,
    season_intervals,
)

__all__ = [
    "easter_date",
    "ash_wednesday",
    "palm_sunday",
    "pentecost_sunday",
    "advent_start",
    "Season",
    "SeasonInterval",
    "normalize_season_name",
    "season_interval",
    "season_intervals",
]
