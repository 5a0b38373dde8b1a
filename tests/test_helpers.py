import pytest

from resume_screener.utils.helpers import display_name, new_document_id, require_text, round_half_up


def test_require_text():
    assert require_text("ok") == "ok"
    with pytest.raises(TypeError, match="query_text must be a str"):
        require_text(3, "query_text")


def test_display_name():
    assert display_name("Jane_Doe.pdf") == "Jane_Doe"
    assert display_name("uploads/2024/bob.smith.docx") == "bob.smith"
    assert display_name(r"C:\cvs\carol.txt") == "carol"
    assert display_name("") == ""


def test_new_document_id_unique():
    assert new_document_id() != new_document_id()


def test_round_half_up():
    assert round_half_up(12.5) == 13
    assert round_half_up(0.5) == 1
    assert round_half_up(2.4) == 2
