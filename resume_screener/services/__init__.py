"""Service exports."""

from .corpus import Corpus, make_document
from .export_service import export_results_csv
from .ingestion_service import ingest_files
from .search_service import build_query, search_corpus

__all__ = [
    "Corpus",
    "make_document",
    "ingest_files",
    "build_query",
    "search_corpus",
    "export_results_csv",
]
