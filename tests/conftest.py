import pytest

from resume_screener.services.corpus import Corpus


@pytest.fixture
def sample_corpus():
    corpus = Corpus()
    corpus.add("python developer with 3 years experience", document_id="d1", name="Alice")
    corpus.add("java architect 10+ years", document_id="d2", name="Bob")
    return corpus


@pytest.fixture
def resumes():
    return [
        ("Alice", "Senior Python engineer, 7+ years. Django, Flask, PostgreSQL, Docker, AWS."),
        ("Bob", "Frontend developer: React, Redux, TypeScript, CSS. 2 years experience."),
        ("Carol", "Data scientist with 4 yrs in machine learning, pandas, numpy, scikit-learn and Python."),
        ("Dan", "Recent graduate. Interested in cooking and travel."),
    ]


@pytest.fixture
def loaded_corpus(resumes):
    corpus = Corpus()
    corpus.add_many(resumes)
    return corpus
