"""Corpus: the explicit collection of candidate documents passed to ranking and analytics."""

from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from resume_screener.config import EXPERIENCE_PATTERNS, SKILL_DICTIONARY
from resume_screener.pipeline.feature_extractor import extract_features
from resume_screener.pipeline.tokenizer import term_frequencies
from resume_screener.schemas.document import Document
from resume_screener.utils.helpers import new_document_id, require_text
from resume_screener.utils.logger import get_logger

logger = get_logger(__name__)


def make_document(
    raw_text: str,
    document_id: Optional[str] = None,
    name: str = "",
    skill_dictionary: Sequence[str] = SKILL_DICTIONARY,
    patterns=EXPERIENCE_PATTERNS,
) -> Document:
    """Build a Document with skills, experience bucket and term counts derived from raw_text."""
    require_text(raw_text, "raw_text")
    features = extract_features(raw_text, skill_dictionary, patterns)
    doc_id = document_id or new_document_id()
    return Document(
        id=doc_id,
        name=name or doc_id,
        raw_text=raw_text,
        skills=features.skills,
        experience_bucket=features.experience_bucket,
        term_frequencies=tuple(term_frequencies(raw_text).items()),
    )


class Corpus:
    """
    Ordered documents keyed by id. Mutated only by add, remove and clear.
    Callers serialize edits against in-flight searches; ranking and analytics
    read a snapshot() tuple.
    """

    def __init__(
        self,
        skill_dictionary: Sequence[str] = SKILL_DICTIONARY,
        patterns=EXPERIENCE_PATTERNS,
    ) -> None:
        self.skill_dictionary = tuple(skill_dictionary)
        self.patterns = tuple(patterns)
        self._documents: Dict[str, Document] = {}

    def add(self, raw_text: str, document_id: Optional[str] = None, name: str = "") -> Document:
        """Create a Document from raw text and append it. Raises ValueError on a duplicate id."""
        if document_id is not None and document_id in self._documents:
            raise ValueError(f"Document id already in corpus: {document_id}")
        doc = make_document(raw_text, document_id, name, self.skill_dictionary, self.patterns)
        self._documents[doc.id] = doc
        logger.info("Added document %s (%s skills, %s)", doc.name, len(doc.skills), doc.experience_bucket)
        return doc

    def add_many(self, items: Sequence[Tuple[str, str]]) -> List[Document]:
        """Append (name, raw_text) pairs in order."""
        return [self.add(raw_text, name=name) for name, raw_text in items]

    def add_document(self, doc: Document) -> Document:
        """Append an already-built Document."""
        if doc.id in self._documents:
            raise ValueError(f"Document id already in corpus: {doc.id}")
        self._documents[doc.id] = doc
        return doc

    def get(self, document_id: str) -> Document:
        return self._documents[document_id]

    def remove(self, document_id: str) -> Document:
        """Remove and return a document. Raises KeyError if absent."""
        doc = self._documents.pop(document_id)
        logger.info("Removed document %s", doc.name)
        return doc

    def clear(self) -> None:
        count = len(self._documents)
        self._documents = {}
        logger.info("Cleared corpus (%s documents)", count)

    def snapshot(self) -> Tuple[Document, ...]:
        """Documents in insertion order, detached from later edits."""
        return tuple(self._documents.values())

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[Document]:
        return iter(self.snapshot())

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._documents
