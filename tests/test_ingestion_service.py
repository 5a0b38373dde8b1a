import io

import docx

from resume_screener.pipeline.text_extractor import clean_resume_text, extract_text_from_file
from resume_screener.services.corpus import Corpus
from resume_screener.services.ingestion_service import ingest_files


def _docx_bytes(*paragraphs):
    document = docx.Document()
    for text in paragraphs:
        document.add_paragraph(text)
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()


def test_extract_txt():
    assert extract_text_from_file(b"Python   developer\t3 years", "cv.txt") == "Python developer 3 years"


def test_extract_docx():
    data = _docx_bytes("Jane Doe", "", "Kubernetes and Go, 6 years")
    assert extract_text_from_file(data, "jane.docx") == "Jane Doe\n\nKubernetes and Go, 6 years"


def test_unsupported_extension_returns_none():
    assert extract_text_from_file(b"data", "photo.png") is None


def test_invalid_utf8_rejected():
    assert extract_text_from_file(b"\xff\xfe\xfa", "cv.txt") is None


def test_corrupt_pdf_returns_none():
    assert extract_text_from_file(b"not a pdf", "cv.pdf") is None


def test_blank_text_returns_none():
    assert extract_text_from_file(b"   \n  ", "blank.txt") is None


def test_clean_resume_text_truncates_and_collapses():
    assert clean_resume_text("a\n\n\n\nb") == "a\n\nb"
    assert clean_resume_text("abcdef", max_chars=3) == "abc"
    assert clean_resume_text("") == ""


def test_ingest_files_skips_unreadable_and_keeps_order():
    corpus = Corpus()
    files = [
        ("resumes/alice.txt", b"Python developer, 3 years"),
        ("broken.pdf", b"garbage"),
        ("bob.docx", _docx_bytes("Java architect 10+ years")),
        ("notes.png", b"png"),
    ]
    added = ingest_files(files, corpus, max_concurrent=2)
    assert [d.name for d in added] == ["alice", "bob"]
    assert len(corpus) == 2
    assert added[0].experience_bucket == "Mid-level (3-5 years)"
    assert added[1].experience_bucket == "Senior (10+ years)"


def test_ingest_no_files():
    corpus = Corpus()
    assert ingest_files([], corpus) == []
    assert len(corpus) == 0
