"""Ranked search result schema."""

from typing import Tuple

from pydantic import BaseModel, Field


class MatchResult(BaseModel):
    """One scored document from a search, with the evidence behind the score."""

    document_id: str = Field(..., description="Id of the matched Document")
    name: str = Field(default="", description="Display name of the matched Document")
    score: float = Field(..., ge=0.0, le=100.0, description="Final score: cosine score plus skill bonus, capped at 100")
    similarity: float = Field(default=0.0, description="Raw cosine similarity between query and document vectors")
    matched_skills: Tuple[str, ...] = Field(default_factory=tuple, description="Skills shared by query and document")
    skills: Tuple[str, ...] = Field(default_factory=tuple, description="All skills of the document")
    experience_bucket: str = Field(default="", description="Experience label of the document")
