"""Pydantic models for JSON output."""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field

from canonref.liturgical.seasons import SeasonInterval
from canonref.references.models import StructuredReference
from canonref.references.encoders import reference_formats


class ParsedRefModel(BaseModel):
    """Structured scripture reference."""

    book: str = Field(..., description="Canonical book name")
    chapter: int
    verse: Optional[int] = None
    end_chapter: Optional[int] = None
    end_verse: Optional[int] = None


class FormatsModel(BaseModel):
    """A reference rendered for each consumer."""

    deep_link: str = Field(..., description="Desktop app deep-link form, e.g. Ge1.1")
    api_path: str = Field(..., description="Content API passage, e.g. Genesis+1:1")
    human: str = Field(..., description="Normalized display form")


class ReferenceResponse(BaseModel):
    """Response for the parse command."""

    input: str = Field(..., description="Reference as typed")
    parsed: ParsedRefModel
    formats: FormatsModel

    @classmethod
    def build(cls, text: str, ref: StructuredReference) -> ReferenceResponse:
        formats = reference_formats(ref)
        return cls(
            input=text,
            parsed=ParsedRefModel(**ref.to_dict()),
            formats=FormatsModel(
                deep_link=formats.deep_link,
                api_path=formats.api_path,
                human=formats.human,
            ),
        )


class SeasonIntervalModel(BaseModel):
    """Inclusive date bounds for one liturgical season."""

    season: str
    year: int
    start: date
    end: date
    days: int

    @classmethod
    def build(cls, year: int, interval: SeasonInterval) -> SeasonIntervalModel:
        return cls(
            season=interval.season.value,
            year=year,
            start=interval.start,
            end=interval.end,
            days=interval.days,
        )
