"""Extract raw text from uploaded resume files (PDF, DOCX, TXT). In-memory only."""

import re
import unicodedata
from io import BytesIO
from typing import Optional

import pdfplumber
from docx import Document as DocxDocument

from resume_screener.config import MAX_DOCUMENT_CHARS, SUPPORTED_EXTENSIONS
from resume_screener.utils.logger import get_logger

logger = get_logger(__name__)


def _normalize_unicode(text: str) -> str:
    """Normalize unicode (NFC)."""
    if not text:
        return ""
    return unicodedata.normalize("NFC", text)


def clean_resume_text(text: str, max_chars: int = MAX_DOCUMENT_CHARS) -> str:
    """Remove excessive whitespace and normalize unicode for resume content."""
    if not text or not text.strip():
        return ""
    t = _normalize_unicode(text)
    t = re.sub(r"[ \t]+", " ", t)
    t = re.sub(r"\n\s*\n\s*\n", "\n\n", t)
    t = t.strip()
    if len(t) > max_chars:
        t = t[:max_chars]
    return t


def _extract_pdf(bytes_io: BytesIO) -> Optional[str]:
    """Extract text from PDF using pdfplumber; pages joined by blank lines."""
    try:
        with pdfplumber.open(bytes_io) as pdf:
            parts = []
            for page in pdf.pages:
                ptext = page.extract_text()
                if ptext:
                    parts.append(ptext)
            return "\n\n".join(parts) if parts else None
    except Exception as e:
        logger.exception("PDF extraction failed: %s", e)
        return None


def _extract_docx(bytes_io: BytesIO) -> Optional[str]:
    """Extract text from DOCX using python-docx."""
    try:
        doc = DocxDocument(bytes_io)
        parts = [p.text for p in doc.paragraphs if p.text.strip()]
        return "\n\n".join(parts) if parts else None
    except Exception as e:
        logger.exception("DOCX extraction failed: %s", e)
        return None


def _extract_txt(file_bytes: bytes) -> Optional[str]:
    """Decode plain text as UTF-8. Undecodable files are rejected, not repaired."""
    try:
        return file_bytes.decode("utf-8")
    except UnicodeDecodeError as e:
        logger.warning("Text file is not valid UTF-8: %s", e)
        return None


def extract_text_from_file(file_bytes: bytes, filename: str) -> Optional[str]:
    """
    Extract and clean text from an uploaded resume file (PDF, DOCX or TXT).
    File is read from bytes in memory; no disk write.
    Returns cleaned text or None if unsupported type, extraction fails, or no text is found.
    """
    name_lower = (filename or "").lower().strip()
    if not name_lower.endswith(SUPPORTED_EXTENSIONS):
        logger.warning("Unsupported file type: %s", filename)
        return None

    raw: Optional[str]
    if name_lower.endswith(".pdf"):
        raw = _extract_pdf(BytesIO(file_bytes))
    elif name_lower.endswith(".docx"):
        raw = _extract_docx(BytesIO(file_bytes))
    else:
        raw = _extract_txt(file_bytes)

    if not raw or not raw.strip():
        logger.warning("No text extracted from %s", filename)
        return None
    return clean_resume_text(raw)
