"""Tokenizer: raw text to normalized terms."""

import re
from collections import Counter
from typing import List

from resume_screener.utils.helpers import require_text

# Alphabetic runs of length >= 2 between word boundaries; "python3" and "x" yield nothing
TOKEN_PATTERN = re.compile(r"\b[a-z]{2,}\b", re.ASCII)


def tokenize(text: str) -> List[str]:
    """Lower-case text and return its terms in order of appearance."""
    require_text(text)
    return TOKEN_PATTERN.findall(text.lower())


def term_frequencies(text: str) -> Counter:
    """Term -> count for one document."""
    return Counter(tokenize(text))
