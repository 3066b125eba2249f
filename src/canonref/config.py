"""Configuration settings for canonref."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings."""

    # Context expansion
    context_verses: int = 5

    # Deep links (app URL is "<scheme>///Bible/<ref>")
    deep_link_scheme: str = "logos4:"

    # Logging
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings, overriding defaults from CANONREF_* variables."""
        settings = cls()

        context = os.environ.get("CANONREF_CONTEXT_VERSES")
        if context:
            try:
                settings.context_verses = int(context)
            except ValueError:
                raise ValueError(
                    f"CANONREF_CONTEXT_VERSES must be an integer, got '{context}'"
                ) from None

        scheme = os.environ.get("CANONREF_DEEP_LINK_SCHEME")
        if scheme:
            settings.deep_link_scheme = scheme

        level = os.environ.get("CANONREF_LOG_LEVEL")
        if level:
            settings.log_level = level.upper()

        return settings


# Liturgical season display labels
SEASON_LABELS = {
    "advent": "Advent",
    "christmas": "Christmas",
    "epiphany": "Epiphany",
    "lent": "Lent",
    "holy_week": "Holy Week",
    "easter": "Easter",
    "pentecost": "Pentecost",
    "ordinary": "Ordinary Time",
}
