import math

import numpy as np
import pytest

from resume_screener.ranking.tfidf_vectorizer import (
    build_batch,
    cosine_similarities,
    cosine_similarity,
    vectorize,
    vectorize_texts,
)


def test_vectorize_one_vector_per_document_same_vocabulary():
    vectors = vectorize(["python developer", "java developer", "python python"])
    assert len(vectors) == 3
    keys = set(vectors[0])
    assert keys == {"python", "developer", "java"}
    assert all(set(v) == keys for v in vectors)


def test_vectorize_weights_are_raw_tf_times_natural_log_idf():
    vectors = vectorize(["python developer", "java developer", "python python"])
    idf_python = math.log(3 / 2)
    idf_java = math.log(3 / 1)
    assert vectors[2]["python"] == pytest.approx(2 * idf_python)
    assert vectors[0]["python"] == pytest.approx(idf_python)
    assert vectors[1]["java"] == pytest.approx(idf_java)
    # absent term weighs zero
    assert vectors[0]["java"] == 0.0
    # "developer" is in 2 of 3 documents
    assert vectors[0]["developer"] == pytest.approx(math.log(3 / 2))


def test_term_in_every_document_has_zero_weight():
    vectors = vectorize(["shared alpha", "shared beta"])
    assert vectors[0]["shared"] == 0.0
    assert vectors[1]["shared"] == 0.0


def test_batch_composition_changes_weights():
    alone = vectorize(["python developer", "java developer"])
    with_query = vectorize(["python developer", "java developer", "python"])
    assert alone[0]["python"] != pytest.approx(with_query[0]["python"])


def test_vectorize_empty_inputs():
    assert vectorize([]) == []
    assert vectorize(["", "  "]) == [{}, {}]


def test_vectorize_rejects_non_string_document():
    with pytest.raises(TypeError):
        vectorize(["python", None])


def test_batch_matrix_matches_mappings():
    batch = vectorize_texts(["python developer", "java developer", "python"])
    assert len(batch) == 3
    assert batch.matrix.shape == (3, len(batch.vocabulary))
    mapping = batch.vector(0)
    for j, term in enumerate(batch.vocabulary):
        assert mapping[term] == pytest.approx(batch.matrix[0, j])


def test_build_batch_from_counts():
    batch = build_batch([{"go": 2}, {"rust": 1}])
    assert batch.vocabulary == ["go", "rust"]
    assert batch.vector(0)["go"] == pytest.approx(2 * math.log(2))


def test_cosine_similarity_identical_and_disjoint():
    v = {"python": 1.0, "django": 2.0}
    assert cosine_similarity(v, v) == pytest.approx(1.0)
    assert cosine_similarity(v, {"java": 3.0}) == 0.0


def test_cosine_similarity_zero_magnitude_is_zero_not_nan():
    assert cosine_similarity({}, {}) == 0.0
    assert cosine_similarity({"a": 0.0}, {"a": 0.0}) == 0.0
    assert cosine_similarity({"a": 1.0}, {}) == 0.0


def test_cosine_similarities_matches_mapping_version():
    batch = vectorize_texts(["python developer django", "java spring developer", "python django"])
    sims = cosine_similarities(batch.matrix[:-1], batch.matrix[-1])
    query = batch.vector(2)
    for row, sim in enumerate(sims):
        assert sim == pytest.approx(cosine_similarity(query, batch.vector(row)))


def test_cosine_similarities_zero_rows():
    matrix = np.zeros((2, 3))
    sims = cosine_similarities(matrix, np.array([1.0, 0.0, 0.0]))
    assert sims.tolist() == [0.0, 0.0]
    assert not np.isnan(sims).any()
