"""
Pattern matching for resume section identification.

This module provides the section-name vocabulary, heading regexes, and the
classifier that maps a section title to one of the section kinds the field
extractors understand.

Pattern classes follow the convention from parsing/patterns.py:
- Dataclasses with frozen=True for immutability
- Class-level constants for patterns
- Helper functions that use these patterns
"""

import re
from dataclasses import dataclass

from tailor.utils.text_processing import collapse_whitespace

# Section kinds returned by classify_section()
CONTACT = "contact"
EDUCATION = "education"
EXPERIENCE = "experience"
PROJECTS = "projects"
SKILLS = "skills"
OTHER = "other"

MAX_HEADER_LENGTH = 80


# =============================================================================
# MARKUP HEADING PATTERNS
# =============================================================================


@dataclass(frozen=True)
class MarkupHeadingPatterns:
    """
    Regex patterns for splitting block markup at heading-like boundaries.

    Blocks come from docx_to_markup(): <h1>-<h3> for styled headings and
    <p> for ordinary paragraphs. Resumes often use bold uppercase paragraphs
    instead of real heading styles, so both open tags are candidates.
    """

    # Zero-width split point before each heading or paragraph open tag
    BLOCK_START: re.Pattern = re.compile(r"(?=<(?:h[1-3]|p)[\s>])", re.IGNORECASE)

    # Open tag at block start, then inner text with no nested tags, up to the close tag
    BLOCK_HEAD: re.Pattern = re.compile(r"^<(?:h[1-3]|p)(?:\s[^>]*)?>([^<]*)(?=</)", re.IGNORECASE)

    # Whole title is uppercase letters, spaces and ampersands
    UPPERCASE_TITLE: re.Pattern = re.compile(r"^[A-Z\s&]+$")


# =============================================================================
# SECTION VOCABULARY
# =============================================================================


@dataclass(frozen=True)
class SectionVocabulary:
    """Known section names, in the two forms the segmenter strategies use."""

    # Compared after lowercase + whitespace collapse
    MARKUP_NAMES: tuple = (
        "contact",
        "education",
        "experience",
        "professional experience",
        "work experience",
        "projects",
        "projects & outside experience",
        "skills",
        "technical skills",
    )

    # Whole-line headers for the plain-text strategy
    HEADING_LINES: tuple = (
        "EDUCATION",
        "EXPERIENCE",
        "PROFESSIONAL EXPERIENCE",
        "WORK EXPERIENCE",
        "PROJECTS",
        "PROJECTS & OUTSIDE EXPERIENCE",
        "SKILLS",
        "TECHNICAL SKILLS",
        "CONTACT",
    )


_HEADING_LINE = re.compile(
    r"^(?:" + "|".join(re.escape(h) for h in SectionVocabulary.HEADING_LINES) + r")$",
    re.IGNORECASE,
)


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================


def normalize_section_name(title: str) -> str:
    """
    Normalize a section title for vocabulary comparison.

    Example:
        >>> normalize_section_name("  Professional   EXPERIENCE ")
        'professional experience'
    """
    return collapse_whitespace(title).lower()


def is_markup_header(title: str) -> bool:
    """
    Check whether a block's inner text reads as a section header.

    A header is shorter than 80 characters and either names a known section
    or is written entirely in uppercase letters, spaces and ampersands.
    """
    stripped = title.strip()
    if not stripped or len(stripped) >= MAX_HEADER_LENGTH:
        return False

    normalized = normalize_section_name(stripped)
    if any(name in normalized for name in SectionVocabulary.MARKUP_NAMES):
        return True

    return bool(MarkupHeadingPatterns.UPPERCASE_TITLE.match(stripped)) and any(
        c.isalpha() for c in stripped
    )


def is_heading_line(line: str) -> bool:
    """Check whether a plain-text line is one of the fixed section headers."""
    return bool(_HEADING_LINE.match(line.strip()))


def classify_section(title: str) -> str:
    """
    Map a section title to a section kind.

    "project" is checked before "experience" so that
    "Projects & Outside Experience" lands in projects.

    Args:
        title: Section title as found in the document

    Returns:
        One of "contact", "education", "projects", "experience", "skills", "other"

    Examples:
        >>> classify_section("PROFESSIONAL EXPERIENCE")
        'experience'
        >>> classify_section("Projects & Outside Experience")
        'projects'
    """
    normalized = normalize_section_name(title)
    if not normalized or "contact" in normalized or "name" in normalized:
        return CONTACT
    if "education" in normalized:
        return EDUCATION
    if "project" in normalized:
        return PROJECTS
    if "experience" in normalized or "professional" in normalized or "work" in normalized:
        return EXPERIENCE
    if "skill" in normalized:
        return SKILLS
    return OTHER
