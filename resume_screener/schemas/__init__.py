"""Schema exports."""

from .analytics import AnalyticsSnapshot
from .document import Document, ExtractedFeatures
from .match_result import MatchResult

__all__ = ["Document", "ExtractedFeatures", "MatchResult", "AnalyticsSnapshot"]
