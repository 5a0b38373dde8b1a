"""Candidate document schema: raw resume text plus features derived once at creation."""

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


class ExtractedFeatures(BaseModel):
    """Structured facts derived from raw text by the feature extractor."""

    model_config = ConfigDict(frozen=True)

    skills: Tuple[str, ...] = Field(default_factory=tuple, description="Dictionary skills found, no duplicates")
    experience_bucket: str = Field(..., description="Experience label, e.g. 'Fresher' or 'Senior (7+ years)'")


class Document(BaseModel):
    """A stored candidate resume. Immutable; re-create it to change derived features."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique identifier within a corpus")
    name: str = Field(default="", description="Display name, usually the uploaded file name without extension")
    raw_text: str = Field(..., description="Full decoded document text")
    skills: Tuple[str, ...] = Field(default_factory=tuple, description="Dictionary skills found in raw_text")
    experience_bucket: str = Field(..., description="Experience label derived from raw_text")
    term_frequencies: Tuple[Tuple[str, int], ...] = Field(
        default_factory=tuple,
        description="(term, count) pairs of raw_text in first-seen order",
    )
