"""
Resume parsing entry points for the Parsing context.

Turns a .docx resume into a ParsedResume:

    .docx -> block markup -> sections -> field extractors -> ParsedResume

Segmentation runs the markup-heading strategy first. If it finds nothing the
plain-text heading-line strategy is used instead. If it leaves education,
experience or skills empty, the heading-line strategy is rerun and used for
exactly the empty sections. A contact block without name or email is finally
re-derived from the top of the document.
"""

from pathlib import Path
from typing import List, Union

from tailor.contexts.parsing.contact_extractor import parse_contact_block, top_lines
from tailor.contexts.parsing.docx_markup import docx_to_markup
from tailor.contexts.parsing.education_extractor import parse_education_block
from tailor.contexts.parsing.experience_extractor import parse_experience_block
from tailor.contexts.parsing.logger import _log_debug, log_parse_summary, log_sections_found
from tailor.contexts.parsing.normalizer import strip_markup
from tailor.contexts.parsing.projects_extractor import parse_projects_block
from tailor.contexts.parsing.resume_data_structure import Contact, ParsedResume
from tailor.contexts.parsing.section_patterns import (
    CONTACT,
    EDUCATION,
    EXPERIENCE,
    PROJECTS,
    SKILLS,
    classify_section,
)
from tailor.contexts.parsing.segmenter import (
    Section,
    split_by_heading_lines,
    split_by_markup_headings,
)
from tailor.contexts.parsing.skills_extractor import parse_skills_block
from tailor.utils.text_processing import non_empty_lines

# Lines of plain text searched when contact has neither name nor email
CONTACT_FALLBACK_LINES = 8
PLAIN_CONTACT_FALLBACK_LINES = 6
MAX_SECTION_NAME_LINE_LENGTH = 80

FULL_TEXT_SECTION = "Full text"


def _contact_from_section(content: str) -> Contact:
    """Contact fields from a contact section, with its first line as a last-resort name."""
    contact = parse_contact_block(content)
    if contact.name is None:
        lines = non_empty_lines(content)
        if lines and len(lines[0]) < MAX_SECTION_NAME_LINE_LENGTH and "@" not in lines[0]:
            contact.name = lines[0]
    return contact


def _apply_section(resume: ParsedResume, section: Section) -> None:
    """Dispatch one section to its extractor, replacing that part of the resume."""
    kind = classify_section(section.title)
    if kind == CONTACT:
        resume.contact = resume.contact.merged_with(_contact_from_section(section.content))
    elif kind == EDUCATION:
        resume.education = parse_education_block(section.content)
    elif kind == PROJECTS:
        resume.projects = parse_projects_block(section.content)
    elif kind == EXPERIENCE:
        resume.experience = parse_experience_block(section.content)
    elif kind == SKILLS:
        resume.skills = parse_skills_block(section.content)
    else:
        resume.other_sections[section.title] = section.content


def _backfill_section(resume: ParsedResume, section: Section) -> None:
    """Dispatch one section only into parts of the resume that are still empty."""
    kind = classify_section(section.title)
    if kind == EDUCATION and not resume.education:
        resume.education = parse_education_block(section.content)
    elif kind == PROJECTS and not resume.projects:
        resume.projects = parse_projects_block(section.content)
    elif kind == EXPERIENCE and not resume.experience:
        resume.experience = parse_experience_block(section.content)
    elif kind == SKILLS and not resume.skills:
        resume.skills = parse_skills_block(section.content)
    elif kind == CONTACT:
        resume.contact = resume.contact.filled_from(parse_contact_block(section.content))


def _needs_backfill(resume: ParsedResume) -> bool:
    return not resume.education or not resume.experience or not resume.skills


def _fill_contact_from_top(resume: ParsedResume, text: str, line_count: int) -> None:
    if resume.contact.name is None and resume.contact.email is None:
        _log_debug(f"Contact fallback: first {line_count} lines")
        resume.contact = resume.contact.filled_from(
            parse_contact_block(top_lines(text.strip(), line_count))
        )


def _parse_plain_text(resume: ParsedResume, text: str) -> ParsedResume:
    """Heading-line strategy alone, used when markup headings found nothing."""
    sections = split_by_heading_lines(text)
    log_sections_found("Heading lines", [s.title for s in sections])

    if not sections:
        resume.contact = parse_contact_block(top_lines(text.strip(), PLAIN_CONTACT_FALLBACK_LINES))
        resume.other_sections = {FULL_TEXT_SECTION: text.strip()}
        return resume

    for section in sections:
        _apply_section(resume, section)
    _fill_contact_from_top(resume, text, PLAIN_CONTACT_FALLBACK_LINES)
    return resume


def parse_markup_to_resume(markup: str) -> ParsedResume:
    """
    Parse block markup into a ParsedResume.

    Args:
        markup: Block markup (from docx_to_markup) or plain text

    Returns:
        A new ParsedResume; never raises for unrecognized content

    Example:
        >>> resume = parse_markup_to_resume(
        ...     "<p>Jane Doe</p><p>jane@example.com</p><h1>SKILLS</h1><p>Python, Go</p>"
        ... )
        >>> resume.contact.name, resume.skills
        ('Jane Doe', ['Python', 'Go'])
    """
    resume = ParsedResume()
    text = strip_markup(markup)

    sections: List[Section] = split_by_markup_headings(markup)
    log_sections_found("Markup headings", [s.title for s in sections])

    if not sections:
        resume = _parse_plain_text(resume, text)
        log_parse_summary(resume)
        return resume

    for section in sections:
        _apply_section(resume, section)

    if _needs_backfill(resume):
        backfill = split_by_heading_lines(text)
        log_sections_found("Backfill from heading lines", [s.title for s in backfill])
        for section in backfill:
            _backfill_section(resume, section)

    _fill_contact_from_top(resume, text, CONTACT_FALLBACK_LINES)
    log_parse_summary(resume)
    return resume


def parse_resume_from_path(file_path: Union[str, Path]) -> ParsedResume:
    """
    Parse a .docx resume from disk.

    Raises:
        MalformedPackageError: If the file is not a usable .docx package
    """
    _log_debug(f"Parsing {file_path}")
    return parse_markup_to_resume(docx_to_markup(Path(file_path)))


def parse_resume_from_bytes(data: bytes) -> ParsedResume:
    """
    Parse a .docx resume held in memory (e.g. an uploaded file).

    Raises:
        MalformedPackageError: If the bytes are not a usable .docx package
    """
    return parse_markup_to_resume(docx_to_markup(data))

