"""Rank corpus documents against a query: TF-IDF cosine similarity plus a skill-overlap bonus."""

from typing import List, Sequence

from resume_screener.config import (
    MAX_MATCH_SCORE,
    MIN_MATCH_SCORE,
    SKILL_BONUS_WEIGHT,
    SKILL_DICTIONARY,
)
from resume_screener.pipeline.feature_extractor import extract_skills
from resume_screener.pipeline.tokenizer import term_frequencies
from resume_screener.ranking.tfidf_vectorizer import build_batch, cosine_similarities
from resume_screener.schemas.document import Document
from resume_screener.schemas.match_result import MatchResult
from resume_screener.utils.helpers import require_text, round_half_up
from resume_screener.utils.logger import get_logger

logger = get_logger(__name__)


def skill_bonus(matched: int, query_skill_count: int, weight: float = SKILL_BONUS_WEIGHT) -> float:
    """Share of query skills the document covers, scaled to weight."""
    return (matched / max(query_skill_count, 1)) * weight


def final_score(similarity: float, bonus: float) -> float:
    """Rounded percentage similarity plus bonus, capped at 100."""
    base = round_half_up(max(similarity, 0.0) * 100)
    return min(MAX_MATCH_SCORE, float(base + bonus))


def rank(
    corpus: Sequence[Document],
    query_text: str,
    skill_dictionary: Sequence[str] = SKILL_DICTIONARY,
    min_score: float = MIN_MATCH_SCORE,
    skill_bonus_weight: float = SKILL_BONUS_WEIGHT,
) -> List[MatchResult]:
    """
    Score every document against query_text and return those above min_score,
    best first. Equal scores keep corpus order. A blank query returns [].

    The query is vectorized together with the corpus, so its own terms count
    towards document frequency. Documents are not modified.
    """
    require_text(query_text, "query_text")
    if not query_text.strip():
        return []
    documents = list(corpus)
    if not documents:
        return []

    counts = [dict(doc.term_frequencies) or term_frequencies(doc.raw_text) for doc in documents]
    counts.append(term_frequencies(query_text))
    batch = build_batch(counts)
    similarities = cosine_similarities(batch.matrix[:-1], batch.matrix[-1])

    query_skills = extract_skills(query_text, skill_dictionary)
    query_skill_set = set(query_skills)

    results: List[MatchResult] = []
    for doc, similarity in zip(documents, similarities):
        matched = tuple(s for s in doc.skills if s in query_skill_set)
        bonus = skill_bonus(len(matched), len(query_skills), skill_bonus_weight)
        score = final_score(float(similarity), bonus)
        if score <= min_score:
            continue
        results.append(
            MatchResult(
                document_id=doc.id,
                name=doc.name,
                score=score,
                similarity=float(similarity),
                matched_skills=matched,
                skills=doc.skills,
                experience_bucket=doc.experience_bucket,
            )
        )
    # list.sort is stable: ties stay in corpus order
    results.sort(key=lambda r: -r.score)
    logger.info("Ranked %s documents; %s above threshold %s", len(documents), len(results), min_score)
    return results
