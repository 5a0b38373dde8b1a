"""Configuration loaded from environment variables plus fixed matching tables."""

import os
import re
from pathlib import Path

from dotenv import load_dotenv

# Load .env: try package dir then project root
_base = Path(__file__).resolve().parent
for _env_path in (_base / ".env", _base.parent / ".env"):
    if load_dotenv(_env_path):
        break
load_dotenv()  # also allow process env

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

# Scoring
MIN_MATCH_SCORE: float = float(os.getenv("MIN_MATCH_SCORE", "10"))
SKILL_BONUS_WEIGHT: float = float(os.getenv("SKILL_BONUS_WEIGHT", "20"))
MAX_MATCH_SCORE: float = 100.0

# Analytics
TOP_SKILLS_LIMIT: int = int(os.getenv("TOP_SKILLS_LIMIT", "10"))

# Ingestion
INGEST_CONCURRENCY: int = int(os.getenv("INGEST_CONCURRENCY", "4"))  # Max files parsed at once
MAX_DOCUMENT_CHARS: int = int(os.getenv("MAX_DOCUMENT_CHARS", "50000"))
SUPPORTED_EXTENSIONS: tuple = (".pdf", ".docx", ".txt")

# Canonical skills, matched as lowercase substrings. Order is the display order.
SKILL_DICTIONARY: tuple = (
    "python", "java", "javascript", "react", "angular", "vue", "node",
    "django", "flask", "spring", "sql", "mongodb", "postgresql", "mysql",
    "aws", "azure", "gcp", "docker", "kubernetes", "jenkins", "git",
    "html", "css", "typescript", "c++", "c#", "php", "ruby", "go",
    "machine learning", "deep learning", "ai", "data science", "nlp",
    "tensorflow", "pytorch", "scikit-learn", "pandas", "numpy",
    "agile", "scrum", "devops", "ci/cd", "rest api", "graphql",
    "redux", "next.js", "express", "fastapi", "microservices",
)

# Each pattern captures an ASCII year count in group 1
EXPERIENCE_PATTERNS: tuple = (
    re.compile(r"(\d+)\+?\s*years?", re.IGNORECASE | re.ASCII),
    re.compile(r"(\d+)\+?\s*yrs?", re.IGNORECASE | re.ASCII),
    re.compile(r"experience[:\s]*(\d+)", re.IGNORECASE | re.ASCII),
)

# Experience labels; the senior label is parametric on the year count
FRESHER_LABEL = "Fresher"
JUNIOR_LABEL = "Junior (0-2 years)"
MID_LEVEL_LABEL = "Mid-level (3-5 years)"
SENIOR_LABEL_TEMPLATE = "Senior ({years}+ years)"
SENIOR_BUCKET = "Senior"

# Corpus-level distribution buckets, in display order
EXPERIENCE_BUCKETS: tuple = (FRESHER_LABEL, JUNIOR_LABEL, MID_LEVEL_LABEL, SENIOR_BUCKET)
