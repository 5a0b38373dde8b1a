"""Batch ingestion: decode uploaded files concurrently, then append them to a corpus in input order."""

import asyncio
from typing import List, Optional, Sequence, Tuple

from resume_screener.config import INGEST_CONCURRENCY
from resume_screener.pipeline.text_extractor import extract_text_from_file
from resume_screener.schemas.document import Document
from resume_screener.services.corpus import Corpus
from resume_screener.utils.helpers import display_name
from resume_screener.utils.logger import get_logger

logger = get_logger(__name__)


async def extract_texts_concurrent(
    files: Sequence[Tuple[str, bytes]], max_concurrent: int = INGEST_CONCURRENCY
) -> List[Optional[str]]:
    """Extract text from (filename, bytes) pairs in worker threads. Result order matches input."""
    sem = asyncio.Semaphore(max(1, max_concurrent))

    async def extract_with_sem(filename: str, data: bytes) -> Optional[str]:
        async with sem:
            return await asyncio.to_thread(extract_text_from_file, data, filename)

    return list(await asyncio.gather(*[extract_with_sem(f, d) for f, d in files]))


def ingest_files(
    files: Sequence[Tuple[str, bytes]],
    corpus: Corpus,
    max_concurrent: int = INGEST_CONCURRENCY,
) -> List[Document]:
    """
    Decode every file and add the readable ones to the corpus.
    Files that fail extraction are logged and skipped. Safe to call from sync context (e.g. Streamlit).
    """
    if not files:
        return []
    loop = asyncio.new_event_loop()
    try:
        texts = loop.run_until_complete(extract_texts_concurrent(files, max_concurrent))
    finally:
        loop.close()

    added: List[Document] = []
    for (filename, _), text in zip(files, texts):
        if not text:
            logger.warning("Skipping %s: no text extracted", filename)
            continue
        added.append(corpus.add(text, name=display_name(filename)))
    logger.info("Ingested %s of %s files", len(added), len(files))
    return added
