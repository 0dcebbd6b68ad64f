"""
Placeholder injection (template build).

Turns a resume .docx into a template by replacing the first occurrence of
each parsed field value in word/document.xml with its {{dotted.path}}
placeholder. Runs offline, once per source resume.

Values are searched in document order of the resume structure, and each
search only sees text not yet replaced. A value that is not found (e.g. it
is split across runs, or was already consumed by an earlier replacement) is
skipped. A value repeated verbatim elsewhere in the document keeps its
literal text at every later location.
"""

from typing import List, Optional, Tuple

from tailor.contexts.parsing.resume_data_structure import ParsedResume
from tailor.contexts.parsing.resume_parser import parse_resume_from_bytes
from tailor.contexts.templating.docx_package import (
    PackageSource,
    read_document_xml,
    read_package,
    replace_document_xml,
)
from tailor.contexts.templating.logger import log_injection_summary, log_value_not_found
from tailor.contexts.templating.payload import CONTACT_KEYS, EDUCATION_KEYS, placeholder
from tailor.utils.text_processing import escape_xml_text, replace_first

Replacement = Tuple[str, str]

# Field order within an experience entry, as laid out in the document
EXPERIENCE_INJECTION_ORDER = ("company", "location", "dates", "role", "subheader")


def build_replacements(resume: ParsedResume) -> List[Replacement]:
    """
    List (literal value, placeholder) pairs in injection order.

    Order: contact fields; each education entry; each experience entry
    (company, location, dates, role, subheader, bullets); each project
    (title, bullets); the comma-joined skills. Empty and absent values are
    skipped.

    Example:
        >>> build_replacements(ParsedResume(skills=["Python", "Go"]))
        [('Python, Go', '{{skills}}')]
    """
    pairs: List[Replacement] = []

    def add(value: Optional[str], key: str) -> None:
        if value:
            pairs.append((value, placeholder(key)))

    for key in CONTACT_KEYS:
        add(getattr(resume.contact, key), f"contact.{key}")

    for i, entry in enumerate(resume.education):
        for key in EDUCATION_KEYS:
            add(getattr(entry, key), f"education.{i}.{key}")

    for i, job in enumerate(resume.experience):
        for key in EXPERIENCE_INJECTION_ORDER:
            add(getattr(job, key), f"experience.{i}.{key}")
        for j, bullet in enumerate(job.bullets):
            add(bullet, f"experience.{i}.bullet.{j}")

    for i, project in enumerate(resume.projects):
        add(project.title, f"projects.{i}.title")
        for j, bullet in enumerate(project.bullets):
            add(bullet, f"projects.{i}.bullet.{j}")

    add(", ".join(resume.skills), "skills")
    return pairs


def inject_placeholders(document_xml: str, replacements: List[Replacement]) -> str:
    """
    Replace the first remaining occurrence of each value with its placeholder.

    Values are searched in their XML-escaped form, as they appear inside
    text nodes.

    Args:
        document_xml: Contents of word/document.xml
        replacements: Pairs from build_replacements()

    Returns:
        Updated document XML

    Example:
        >>> inject_placeholders("<w:t>R&amp;D Lab</w:t>", [("R&D Lab", "{{projects.0.title}}")])
        '<w:t>{{projects.0.title}}</w:t>'
    """
    applied = 0
    for value, token in replacements:
        needle = escape_xml_text(value)
        if needle not in document_xml:
            log_value_not_found(token, value)
            continue
        document_xml = replace_first(document_xml, needle, token)
        applied += 1

    log_injection_summary(applied, len(replacements))
    return document_xml


def build_template(source: PackageSource, resume: Optional[ParsedResume] = None) -> bytes:
    """
    Build a templated .docx from a source resume.

    Only word/document.xml is rewritten; every other package entry is
    copied unchanged.

    Args:
        source: Path to the source .docx, or its bytes
        resume: Parsed resume of the source (default: parse the source)

    Returns:
        Templated package bytes

    Raises:
        MalformedPackageError: If the source is not a zip or lacks word/document.xml
    """
    package = read_package(source)
    document_xml = read_document_xml(package, source)
    if resume is None:
        resume = parse_resume_from_bytes(package)

    templated = inject_placeholders(document_xml, build_replacements(resume))
    return replace_document_xml(package, templated)
