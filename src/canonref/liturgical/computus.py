"""Easter date and the movable feasts that hang off it.

All arithmetic is whole-day offsets on immutable ``datetime.date`` values;
no time-of-day or timezone ever enters.
"""

from __future__ import annotations

from datetime import date, timedelta


def easter_date(year: int) -> date:
    """
    Anonymous Gregorian algorithm (Meeus/Jones/Butcher) for Easter Sunday.
    """
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = ((h + l - 7 * m + 114) % 31) + 1
    return date(year, month, day)


def add_days(base: date, days: int) -> date:
    return base + timedelta(days=days)


def sunday_offset(d: date) -> int:
    """Days since the most recent Sunday (Sunday=0 ... Saturday=6)."""
    return (d.weekday() + 1) % 7


def ash_wednesday(year: int) -> date:
    return add_days(easter_date(year), -46)


def palm_sunday(year: int) -> date:
    return add_days(easter_date(year), -7)


def pentecost_sunday(year: int) -> date:
    return add_days(easter_date(year), 49)


def advent_start(year: int) -> date:
    """First Sunday of Advent: the fourth Sunday before December 25."""
    christmas = date(year, 12, 25)
    # A Sunday Christmas is not its own Advent Sunday
    offset = sunday_offset(christmas) or 7
    return add_days(christmas, -21 - offset)
