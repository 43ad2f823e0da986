import pytest

from conftest import make_entry
from support_assistant.prompts.system_prompts import describe_file_type, faq_context, file_context_prompt


@pytest.mark.parametrize(
    "mime_type,expected",
    [
        ("image/png", "image"),
        ("video/mp4", "video"),
        ("application/pdf", "PDF document"),
        ("application/vnd.openxmlformats-officedocument.wordprocessingml.document", "document"),
        ("text/plain", "document"),
        ("application/zip", "file"),
    ],
)
def test_describe_file_type(mime_type: str, expected: str) -> None:
    assert describe_file_type(mime_type) == expected


def test_file_context_is_empty_without_files() -> None:
    assert file_context_prompt(False, ["image/png"]) == ""
    assert file_context_prompt(True, []) == ""


def test_faq_context_formats_question_answer_pairs() -> None:
    entries = [make_entry("a", "Is it waterproof?", "IPX5 rated."), make_entry("b", "Do you deliver?", "Yes.")]
    assert faq_context(entries, limit=1) == "Q: Is it waterproof?\nA: IPX5 rated."
