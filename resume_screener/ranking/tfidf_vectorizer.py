"""
TF-IDF vectorization over one batch of documents.

The vocabulary and IDF are scoped to a single call: whatever is in the batch
(corpus texts plus the query at search time) decides every weight. Nothing is
cached between calls, so a search costs O(documents x vocabulary).

Weights are raw term count times idf, with idf = ln(N / max(df, 1)). Term
frequency is not normalized by document length.
"""

import math
from typing import Dict, List, Mapping, Sequence

import numpy as np

from resume_screener.pipeline.tokenizer import term_frequencies
from resume_screener.utils.helpers import require_text
from resume_screener.utils.logger import get_logger

logger = get_logger(__name__)


class TfidfBatch:
    """
    Vocabulary plus a dense weight matrix, one row per batch member in input order.
    Column j of the matrix is the weight of vocabulary[j].
    """

    def __init__(self, vocabulary: List[str], idf: np.ndarray, matrix: np.ndarray) -> None:
        self.vocabulary = vocabulary
        self.idf = idf
        self.matrix = matrix

    def __len__(self) -> int:
        return self.matrix.shape[0]

    def vector(self, row: int) -> Dict[str, float]:
        """Weight vector of one batch member as term -> weight (every vocabulary term present)."""
        weights = self.matrix[row]
        return {term: float(weights[j]) for j, term in enumerate(self.vocabulary)}

    def as_mappings(self) -> List[Dict[str, float]]:
        return [self.vector(i) for i in range(len(self))]


def build_batch(counts: Sequence[Mapping[str, int]]) -> TfidfBatch:
    """Build TF-IDF weights from per-document term counts."""
    n_docs = len(counts)
    # Union of terms in first-seen order so columns are deterministic
    vocabulary: List[str] = list(dict.fromkeys(term for tf in counts for term in tf))
    index = {term: j for j, term in enumerate(vocabulary)}

    tf_matrix = np.zeros((n_docs, len(vocabulary)), dtype=np.float64)
    for i, tf in enumerate(counts):
        for term, count in tf.items():
            if count:
                tf_matrix[i, index[term]] = count

    df = np.count_nonzero(tf_matrix, axis=0)
    idf = np.array(
        [math.log(n_docs / max(int(d), 1)) for d in df],
        dtype=np.float64,
    )
    matrix = tf_matrix * idf
    logger.debug("Vectorized batch: documents=%s vocabulary=%s", n_docs, len(vocabulary))
    return TfidfBatch(vocabulary, idf, matrix)


def vectorize_texts(documents: Sequence[str]) -> TfidfBatch:
    """Tokenize each text and build the batch."""
    return build_batch([term_frequencies(require_text(doc, "document")) for doc in documents])


def vectorize(documents: Sequence[str]) -> List[Dict[str, float]]:
    """
    One weight vector per input text, same order. Absent terms weigh 0.0.
    An empty input returns an empty list.
    """
    return vectorize_texts(documents).as_mappings()


def cosine_similarity(vec1: Mapping[str, float], vec2: Mapping[str, float]) -> float:
    """Cosine similarity of two sparse vectors; missing keys count as 0. Zero magnitude gives 0.0."""
    keys = set(vec1) | set(vec2)
    dot = 0.0
    mag1 = 0.0
    mag2 = 0.0
    for key in keys:
        v1 = vec1.get(key, 0.0)
        v2 = vec2.get(key, 0.0)
        dot += v1 * v2
        mag1 += v1 * v1
        mag2 += v2 * v2
    if mag1 <= 0.0 or mag2 <= 0.0:
        return 0.0
    return dot / (math.sqrt(mag1) * math.sqrt(mag2))


def cosine_similarities(matrix: np.ndarray, query: np.ndarray) -> np.ndarray:
    """Cosine similarity of every row against query; rows or query with zero norm give 0.0."""
    if matrix.size == 0:
        return np.zeros(matrix.shape[0], dtype=np.float64)
    row_norms = np.linalg.norm(matrix, axis=1)
    query_norm = float(np.linalg.norm(query))
    if query_norm == 0.0:
        return np.zeros(matrix.shape[0], dtype=np.float64)
    denom = row_norms * query_norm
    dots = matrix @ query
    return np.divide(dots, denom, out=np.zeros_like(dots), where=denom > 0)
