import io
from datetime import date

from docx import Document

from coverletter.documents import (
    document_filename, parse_bullets, render_bullets_docx, render_cover_letter_docx, split_paragraphs
)


def paragraphs(content: bytes):
    return [p.text for p in Document(io.BytesIO(content)).paragraphs]


def test_cover_letter_layout():
    letter = "First paragraph about Acme.\n\nSecond paragraph with results.\n\n\n"
    content = render_cover_letter_docx(letter, "Jordan Avery", "Scientist", "Acme", today=date(2025, 3, 4))

    texts = paragraphs(content)
    assert texts[0] == "Jordan Avery"
    assert texts[1] == "March 4, 2025"
    assert "Dear Hiring Manager," in texts
    assert "First paragraph about Acme." in texts
    assert "Second paragraph with results." in texts
    assert texts[-2:] == ["Sincerely,", "Jordan Avery"]


def test_bullets_layout():
    bullets = "Here you go:\n• Cut cycle time by 30%\n- Built SOPs\n* Led validation\n"
    texts = paragraphs(render_bullets_docx(bullets, "Scientist", "Acme"))

    assert texts[0] == "ATS-Optimized Resume Bullet Points"
    assert texts[1] == "Tailored for: Scientist at Acme"
    assert texts[2:5] == ["• Cut cycle time by 30%", "• Built SOPs", "• Led validation"]
    assert texts[-1].startswith("Instructions: ")
    assert "Here you go" not in " ".join(texts)


def test_bullets_subtitle_defaults():
    texts = paragraphs(render_bullets_docx("• one", None, None))
    assert texts[1] == "Tailored for: Target Role"


def test_parse_bullets_and_paragraphs():
    assert parse_bullets("• a\n  - **b**\nnot a bullet\n•\n") == ["a", "**b**"]
    assert split_paragraphs("one\n\n  \n two ") == ["one", "two"]


def test_document_filename():
    assert document_filename("cover-letter", "Acme Bio", "Jordan Avery") == "Cover_Letter_Acme_Bio_Jordan_Avery.docx"
    assert document_filename("bullets", None, "Jordan Avery") == "Resume_Bullets_Optimized_Jordan_Avery.docx"
    assert document_filename("cover-letter", "", "Jordan") == "Cover_Letter_Application_Jordan.docx"
