"""Corpus-wide analytics: skill frequency and experience distribution. Independent of any query."""

from collections import Counter
from typing import Dict, Sequence

from resume_screener.config import (
    EXPERIENCE_BUCKETS,
    FRESHER_LABEL,
    JUNIOR_LABEL,
    MID_LEVEL_LABEL,
    SENIOR_BUCKET,
    TOP_SKILLS_LIMIT,
)
from resume_screener.schemas.analytics import AnalyticsSnapshot
from resume_screener.schemas.document import Document
from resume_screener.utils.logger import get_logger

logger = get_logger(__name__)


def distribution_bucket(label: str) -> str:
    """Fold a per-document experience label into a corpus bucket; any Senior label becomes 'Senior'."""
    if "Fresher" in label:
        return FRESHER_LABEL
    if "Junior" in label:
        return JUNIOR_LABEL
    if "Mid-level" in label:
        return MID_LEVEL_LABEL
    return SENIOR_BUCKET


def summarize(corpus: Sequence[Document], top_n: int = TOP_SKILLS_LIMIT) -> AnalyticsSnapshot:
    """
    One pass over the corpus. Top skills are ordered by count descending,
    ties in first-seen order. Average is 0.0 for an empty corpus.
    """
    skill_counts: Counter = Counter()
    experience: Dict[str, int] = {bucket: 0 for bucket in EXPERIENCE_BUCKETS}
    total = 0
    for doc in corpus:
        total += 1
        skill_counts.update(doc.skills)
        experience[distribution_bucket(doc.experience_bucket)] += 1

    occurrences = sum(skill_counts.values())
    avg = occurrences / total if total else 0.0
    snapshot = AnalyticsSnapshot(
        total_documents=total,
        skill_frequency=dict(skill_counts.most_common(top_n)),
        experience_distribution=experience,
        avg_skills_per_document=avg,
        unique_skills=len(skill_counts),
    )
    logger.debug("Summarized %s documents, %s distinct skills", total, len(skill_counts))
    return snapshot
