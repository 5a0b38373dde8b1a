"""Analytics exports."""

from .aggregator import distribution_bucket, summarize

__all__ = ["summarize", "distribution_bucket"]
