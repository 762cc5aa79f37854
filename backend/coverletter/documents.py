"""
Word Document (DOCX) rendering for generated cover letters and resume bullets
"""
import io
import re
from datetime import date
from typing import List, Optional

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Inches, Pt, RGBColor

DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

FONT_NAME = "Calibri"
BODY_SIZE = Pt(11)
HEADER_SIZE = Pt(14)
MUTED = RGBColor(0x66, 0x66, 0x66)

BULLET_MARKERS = ("•", "-", "*")
_BULLET_RX = re.compile(r"^[•\-*]\s*")
BULLET_INSTRUCTIONS = (
    "Replace or supplement your existing resume bullet points with these tailored versions. "
    "Prioritize bullets that most closely match the job requirements."
)


def _new_document():
    doc = Document()
    for section in doc.sections:
        section.top_margin = Inches(1)
        section.bottom_margin = Inches(1)
        section.left_margin = Inches(1)
        section.right_margin = Inches(1)
    style = doc.styles["Normal"]
    style.font.name = FONT_NAME
    style.font.size = BODY_SIZE
    return doc


def _add_paragraph(doc, text: str = "", *, bold=False, italic=False, size=BODY_SIZE,
                   color: Optional[RGBColor] = None, space_after=Pt(10), alignment=None):
    para = doc.add_paragraph()
    run = para.add_run(text)
    run.font.name = FONT_NAME
    run.font.size = size
    run.font.bold = bold
    run.font.italic = italic
    if color is not None:
        run.font.color.rgb = color
    para.paragraph_format.space_after = space_after
    if alignment is not None:
        para.alignment = alignment
    return para


def _to_bytes(doc) -> bytes:
    buffer = io.BytesIO()
    doc.save(buffer)
    return buffer.getvalue()


def split_paragraphs(text: str) -> List[str]:
    return [p.strip() for p in re.split(r"\n\s*\n", text or "") if p.strip()]


def parse_bullets(text: str) -> List[str]:
    """Lines that start with a bullet marker, marker removed."""
    bullets = []
    for line in (text or "").splitlines():
        line = line.strip()
        if line.startswith(BULLET_MARKERS):
            bullet = _BULLET_RX.sub("", line, count=1).strip()
            if bullet:
                bullets.append(bullet)
    return bullets


def render_cover_letter_docx(cover_letter: str, candidate_name: str,
                             role_title: Optional[str] = None, company_name: Optional[str] = None,
                             today: Optional[date] = None) -> bytes:
    doc = _new_document()
    today = today or date.today()

    _add_paragraph(doc, candidate_name, bold=True, size=HEADER_SIZE, space_after=Pt(4))
    _add_paragraph(doc, f"{today:%B} {today.day}, {today:%Y}", space_after=Pt(20))
    if company_name or role_title:
        target = " - ".join(p for p in (company_name, role_title) if p)
        _add_paragraph(doc, f"Re: {target}", space_after=Pt(12))

    _add_paragraph(doc, "Dear Hiring Manager,")
    for paragraph in split_paragraphs(cover_letter):
        _add_paragraph(doc, paragraph, alignment=WD_ALIGN_PARAGRAPH.JUSTIFY)

    _add_paragraph(doc, "Sincerely,", space_after=Pt(4))
    _add_paragraph(doc, candidate_name)
    return _to_bytes(doc)


def render_bullets_docx(bullets: str, role_title: Optional[str] = None,
                        company_name: Optional[str] = None) -> bytes:
    doc = _new_document()

    _add_paragraph(doc, "ATS-Optimized Resume Bullet Points", bold=True, size=HEADER_SIZE, space_after=Pt(4))
    subtitle = f"Tailored for: {role_title or 'Target Role'}"
    if company_name:
        subtitle += f" at {company_name}"
    _add_paragraph(doc, subtitle, italic=True, color=MUTED, space_after=Pt(16))

    for bullet in parse_bullets(bullets):
        _add_paragraph(doc, f"• {bullet}", space_after=Pt(6))

    para = _add_paragraph(doc, "Instructions: ", bold=True, size=Pt(10))
    para.paragraph_format.space_before = Pt(20)
    run = para.add_run(BULLET_INSTRUCTIONS)
    run.font.size = Pt(10)
    run.font.color.rgb = MUTED
    return _to_bytes(doc)


def document_filename(kind: str, company_name: Optional[str], candidate_name: str) -> str:
    """e.g. Cover_Letter_Acme_Jordan_Avery.docx"""
    prefix, fallback = {
        "cover-letter": ("Cover_Letter", "Application"),
        "bullets": ("Resume_Bullets", "Optimized"),
    }[kind]
    company = re.sub(r"[^\w.-]+", "_", company_name or fallback).strip("_") or fallback
    name = re.sub(r"\s+", "_", candidate_name.strip())
    return f"{prefix}_{company}_{name}.docx"
