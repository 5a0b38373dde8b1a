"""Document pipeline: text extraction (PDF/DOCX/TXT), tokenization, feature extraction."""

from resume_screener.pipeline.feature_extractor import (
    experience_bucket,
    extract_experience,
    extract_experience_years,
    extract_features,
    extract_skills,
)
from resume_screener.pipeline.text_extractor import extract_text_from_file
from resume_screener.pipeline.tokenizer import term_frequencies, tokenize

__all__ = [
    "tokenize",
    "term_frequencies",
    "extract_skills",
    "extract_experience_years",
    "extract_experience",
    "experience_bucket",
    "extract_features",
    "extract_text_from_file",
]
