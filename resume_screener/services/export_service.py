"""Export ranked results to CSV."""

import csv
import io
from typing import List

from resume_screener.schemas.match_result import MatchResult

CSV_HEADERS = ["Rank", "Candidate Name", "Match Score", "Experience", "Skills", "Matched Skills"]


def format_score(score: float) -> str:
    """Score as a percentage string: '41%' or '36.67%'."""
    if float(score).is_integer():
        return f"{int(score)}%"
    return f"{score:.2f}".rstrip("0").rstrip(".") + "%"


def export_results_csv(results: List[MatchResult]) -> bytes:
    """Export ranked results to CSV bytes, one row per result in rank order."""
    out = io.StringIO()
    writer = csv.writer(out)
    writer.writerow(CSV_HEADERS)
    for idx, r in enumerate(results, start=1):
        writer.writerow([
            idx,
            r.name or r.document_id,
            format_score(r.score),
            r.experience_bucket,
            "; ".join(r.skills),
            "; ".join(r.matched_skills),
        ])
    return out.getvalue().encode("utf-8")
