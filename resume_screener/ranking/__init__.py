"""Ranking: batch TF-IDF vectorizer and similarity ranker."""

from resume_screener.ranking.similarity_ranker import rank
from resume_screener.ranking.tfidf_vectorizer import TfidfBatch, cosine_similarity, vectorize

__all__ = ["TfidfBatch", "vectorize", "cosine_similarity", "rank"]
