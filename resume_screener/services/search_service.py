"""Search orchestration for the app layer: pick the query text, rank a corpus snapshot."""

from typing import List, Optional

from resume_screener.ranking.similarity_ranker import rank
from resume_screener.schemas.match_result import MatchResult
from resume_screener.services.corpus import Corpus


def build_query(search_query: Optional[str], job_description: Optional[str]) -> str:
    """Keyword query if given, else the job description; '' when both are blank."""
    if search_query and search_query.strip():
        return search_query
    if job_description and job_description.strip():
        return job_description
    return ""


def search_corpus(
    corpus: Corpus,
    search_query: Optional[str] = None,
    job_description: Optional[str] = None,
) -> List[MatchResult]:
    """Rank the corpus against the chosen query. Does not mutate the corpus."""
    query = build_query(search_query, job_description)
    if not query:
        return []
    return rank(corpus.snapshot(), query, skill_dictionary=corpus.skill_dictionary)
