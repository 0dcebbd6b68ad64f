"""
Generate a plain resume .docx from structured data.

Used when no template is available. The layout mirrors the template's
section order (contact, education, experience, projects, skills) with
uppercase headings so the result parses back through the markup strategy.
"""

from typing import List, Optional

import docx
from docx.document import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Pt

from tailor.contexts.parsing.resume_data_structure import (
    EducationEntry,
    ExperienceEntry,
    ParsedResume,
    ProjectEntry,
)
from tailor.contexts.templating.defaults import (
    BULLET_PREFIX,
    CONTACT_SEPARATOR,
    FALLBACK_HEADINGS,
    FALLBACK_TITLE,
)
from tailor.contexts.templating.docx_package import save_document
from tailor.contexts.templating.logger import _log_debug

FIELD_SEPARATOR = " – "
BODY_FONT_SIZE = Pt(10.5)


def _join(values: List[Optional[str]], separator: str) -> str:
    return separator.join(value for value in values if value)


def _add_line(document: Document, text: str, bold: bool = False, italic: bool = False) -> None:
    paragraph = document.add_paragraph()
    paragraph.paragraph_format.space_after = Pt(2)
    run = paragraph.add_run(text)
    run.font.size = BODY_FONT_SIZE
    run.font.bold = bold
    run.font.italic = italic


def _add_bullets(document: Document, bullets: List[str]) -> None:
    for bullet in bullets:
        _add_line(document, BULLET_PREFIX + bullet)


def _education_line(entry: EducationEntry) -> str:
    if entry.raw_text:
        return entry.raw_text
    gpa = f"GPA: {entry.gpa}" if entry.gpa else None
    return _join([entry.school, entry.degree, entry.dates, gpa], FIELD_SEPARATOR)


def _add_experience(document: Document, job: ExperienceEntry) -> None:
    header = _join([job.company, job.location, job.dates], FIELD_SEPARATOR)
    if header:
        _add_line(document, header, bold=True)
    role_line = _join([job.role, job.subheader], FIELD_SEPARATOR)
    if role_line:
        _add_line(document, role_line, italic=True)
    _add_bullets(document, job.bullets)


def _add_project(document: Document, project: ProjectEntry) -> None:
    if project.title:
        _add_line(document, project.title, bold=True)
    _add_bullets(document, project.bullets)


def build_resume_document(resume: ParsedResume) -> Document:
    """Lay out a resume in a new python-docx document."""
    document = docx.Document()

    name = resume.contact.name
    title = document.add_heading(name.upper() if name else FALLBACK_TITLE, level=0)
    title.alignment = WD_ALIGN_PARAGRAPH.CENTER

    contact = resume.contact
    contact_line = _join(
        [contact.phone, contact.email, contact.location, contact.linkedin], CONTACT_SEPARATOR
    )
    if contact_line:
        paragraph = document.add_paragraph(contact_line)
        paragraph.alignment = WD_ALIGN_PARAGRAPH.CENTER

    if resume.education:
        document.add_heading(FALLBACK_HEADINGS["education"], level=1)
        for entry in resume.education:
            line = _education_line(entry)
            if line:
                _add_line(document, line)

    if resume.experience:
        document.add_heading(FALLBACK_HEADINGS["experience"], level=1)
        for job in resume.experience:
            _add_experience(document, job)

    if resume.projects:
        document.add_heading(FALLBACK_HEADINGS["projects"], level=1)
        for project in resume.projects:
            _add_project(document, project)

    if resume.skills:
        document.add_heading(FALLBACK_HEADINGS["skills"], level=1)
        _add_line(document, ", ".join(resume.skills))

    return document


def generate_resume_docx(resume: ParsedResume) -> bytes:
    """
    Generate a .docx package for a resume without a template.

    Args:
        resume: Resume to render (already merged with any overlay)

    Returns:
        .docx bytes

    Example:
        >>> data = generate_resume_docx(ParsedResume(skills=["Python"]))
        >>> data[:2]
        b'PK'
    """
    document = build_resume_document(resume)
    _log_debug(f"Generated document with {len(document.paragraphs)} paragraphs")
    return save_document(document)
