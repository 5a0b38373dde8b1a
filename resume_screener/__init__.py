"""Resume screener: TF-IDF matching, skill and experience extraction, corpus analytics."""

from resume_screener.analytics.aggregator import summarize
from resume_screener.pipeline.feature_extractor import extract_features
from resume_screener.ranking.similarity_ranker import rank
from resume_screener.schemas import AnalyticsSnapshot, Document, ExtractedFeatures, MatchResult
from resume_screener.services.corpus import Corpus

__all__ = [
    "extract_features",
    "rank",
    "summarize",
    "Corpus",
    "Document",
    "ExtractedFeatures",
    "MatchResult",
    "AnalyticsSnapshot",
]
