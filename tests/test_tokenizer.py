import pytest

from resume_screener.pipeline.tokenizer import term_frequencies, tokenize


def test_tokenize_lowercases_and_keeps_order():
    assert tokenize("Python Developer python") == ["python", "developer", "python"]


def test_tokenize_drops_short_and_numeric_fragments():
    assert tokenize("a 3 years x of C") == ["years", "of"]


def test_tokenize_requires_word_boundaries():
    # digits are word characters, so an alphanumeric run is not a term
    assert tokenize("python3 py3k") == []


def test_tokenize_splits_on_punctuation():
    assert tokenize("CI/CD, node.js; scikit-learn") == ["ci", "cd", "node", "js", "scikit", "learn"]


def test_tokenize_empty_and_blank():
    assert tokenize("") == []
    assert tokenize("   \n\t") == []


def test_term_frequencies_counts():
    tf = term_frequencies("go go python")
    assert tf["go"] == 2
    assert tf["python"] == 1
    assert "java" not in tf


def test_tokenize_rejects_non_string():
    with pytest.raises(TypeError):
        tokenize(None)
    with pytest.raises(TypeError):
        tokenize(b"python")
