"""Corpus-wide analytics schema."""

from typing import Dict

from pydantic import BaseModel, Field


class AnalyticsSnapshot(BaseModel):
    """Statistics recomputed from the whole corpus on demand."""

    total_documents: int = Field(default=0, description="Number of documents in the corpus")
    skill_frequency: Dict[str, int] = Field(
        default_factory=dict,
        description="Top skills by document count, count descending (insertion order is rank order)",
    )
    experience_distribution: Dict[str, int] = Field(
        default_factory=dict,
        description="Documents per experience bucket; every Senior label folds into 'Senior'",
    )
    avg_skills_per_document: float = Field(default=0.0, description="Skill occurrences / documents; 0.0 when empty")
    unique_skills: int = Field(default=0, description="Number of distinct skills across the corpus")
