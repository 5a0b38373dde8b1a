"""
Feature extraction: skills and experience level from raw resume text.

Both extractors are pure functions over fixed tables from config. The tables are
default arguments so callers (and tests) can pass smaller dictionaries.
Skill matching is by lowercase substring, not by token: multi-word skills
("machine learning") and punctuated ones ("ci/cd") match, and so does "java"
inside "javascript".
"""

import re
from typing import Iterable, List, Sequence

from resume_screener.config import (
    EXPERIENCE_PATTERNS,
    FRESHER_LABEL,
    JUNIOR_LABEL,
    MID_LEVEL_LABEL,
    SENIOR_LABEL_TEMPLATE,
    SKILL_DICTIONARY,
)
from resume_screener.schemas.document import ExtractedFeatures
from resume_screener.utils.helpers import require_text
from resume_screener.utils.logger import get_logger

logger = get_logger(__name__)


def extract_skills(text: str, skill_dictionary: Sequence[str] = SKILL_DICTIONARY) -> List[str]:
    """Dictionary entries found as substrings of the lowercased text, in dictionary order."""
    require_text(text)
    lower_text = text.lower()
    found = [skill for skill in skill_dictionary if skill.lower() in lower_text]
    return list(dict.fromkeys(found))


def extract_experience_years(text: str, patterns: Iterable[re.Pattern] = EXPERIENCE_PATTERNS) -> int:
    """Largest year count matched by any pattern; 0 if none match."""
    require_text(text)
    max_years = 0
    for pattern in patterns:
        for match in pattern.finditer(text):
            years = int(match.group(1))
            if years > max_years:
                max_years = years
    return max_years


def experience_bucket(years: int) -> str:
    """Map a year count to its label. Senior labels carry the actual count."""
    if years <= 0:
        return FRESHER_LABEL
    if years <= 2:
        return JUNIOR_LABEL
    if years <= 5:
        return MID_LEVEL_LABEL
    return SENIOR_LABEL_TEMPLATE.format(years=years)


def extract_experience(text: str, patterns: Iterable[re.Pattern] = EXPERIENCE_PATTERNS) -> str:
    """Experience label for raw text; 'Fresher' when no year count is mentioned."""
    return experience_bucket(extract_experience_years(text, patterns))


def extract_features(
    raw_text: str,
    skill_dictionary: Sequence[str] = SKILL_DICTIONARY,
    patterns: Iterable[re.Pattern] = EXPERIENCE_PATTERNS,
) -> ExtractedFeatures:
    """Skills and experience bucket for one document."""
    require_text(raw_text, "raw_text")
    skills = extract_skills(raw_text, skill_dictionary)
    bucket = extract_experience(raw_text, patterns)
    logger.debug("Extracted %s skills, experience=%s", len(skills), bucket)
    return ExtractedFeatures(skills=tuple(skills), experience_bucket=bucket)
