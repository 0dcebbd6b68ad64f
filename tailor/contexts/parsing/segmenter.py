"""
Section segmentation for the Parsing context.

Two independent strategies split a resume into titled sections:

1. split_by_markup_headings(): works on block markup, treating short
   vocabulary or uppercase blocks as headers.
2. split_by_heading_lines(): works on plain text, treating whole lines from
   a fixed uppercase header vocabulary as headers.

Both return an ordered list of Section. Choosing between them and
backfilling empty sections is done by resume_parser.
"""

from dataclasses import dataclass
from typing import List

from tailor.contexts.parsing.normalizer import decode_entities, strip_markup
from tailor.contexts.parsing.section_patterns import (
    MarkupHeadingPatterns,
    is_heading_line,
    is_markup_header,
)


@dataclass
class Section:
    """A titled block of resume text."""

    title: str
    content: str


def _append_block_text(content: List[str], block: str) -> None:
    # Consecutive blocks end up on consecutive lines
    text = strip_markup(block).strip()
    if text:
        content.append(text)


def split_by_markup_headings(markup: str) -> List[Section]:
    """
    Split block markup at heading-like block boundaries.

    The markup is cut before every <h1>-<h3> and <p> open tag. A block whose
    inner text passes is_markup_header() opens a new section; the rest of
    that block and every following block form its content, each block
    stripped to trimmed plain text and empty blocks dropped. Text before
    the first header is not part of any section.

    Args:
        markup: Block markup from docx_to_markup()

    Returns:
        Sections in document order (empty if no header was found)

    Example:
        >>> sections = split_by_markup_headings("<p>SKILLS</p><p>Python, Go</p>")
        >>> [(s.title, s.content) for s in sections]
        [('SKILLS', 'Python, Go')]
    """
    sections: List[Section] = []
    current_title = None
    current_content: List[str] = []

    for block in MarkupHeadingPatterns.BLOCK_START.split(markup):
        if not block:
            continue

        match = MarkupHeadingPatterns.BLOCK_HEAD.match(block)
        if match:
            candidate = decode_entities(match.group(1)).strip()
            if is_markup_header(candidate):
                if current_title is not None:
                    sections.append(Section(current_title, "\n".join(current_content).strip()))
                current_title = candidate
                current_content = []
                _append_block_text(current_content, block[match.end():])
                continue

        _append_block_text(current_content, block)

    if current_title is not None:
        sections.append(Section(current_title, "\n".join(current_content).strip()))

    return sections


def split_by_heading_lines(text: str) -> List[Section]:
    """
    Split plain text at lines that are exactly one of the known section headers.

    Lines before the first header are not part of any section.

    Args:
        text: Plain text from strip_markup()

    Returns:
        Sections in document order (empty if no header line was found)
    """
    sections: List[Section] = []
    current_title = None
    current_content: List[str] = []

    for line in text.split("\n"):
        trimmed = line.strip()
        if is_heading_line(trimmed):
            if current_title is not None:
                sections.append(Section(current_title, "\n".join(current_content).strip()))
            current_title = trimmed
            current_content = []
        else:
            current_content.append(line)

    if current_title is not None:
        sections.append(Section(current_title, "\n".join(current_content).strip()))

    return sections
