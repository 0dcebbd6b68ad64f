"""
Education section extraction.

The section is split into entry blocks at lines naming an institution or a
degree. Each block always keeps its full text as raw_text; structured
fields are best-effort.
"""

import re
from typing import List, Optional

from tailor.contexts.parsing.patterns import DatePatterns, EducationPatterns
from tailor.contexts.parsing.resume_data_structure import EducationEntry
from tailor.utils.text_processing import first_match, regex_strategy

_HAS_LETTER = re.compile(r"[A-Za-z]")


def _has_institution(block: str) -> bool:
    return bool(EducationPatterns.INSTITUTION_KEYWORD.search(block))


def _has_degree(block: str) -> bool:
    return bool(EducationPatterns.DEGREE_KEYWORD.search(block))


def split_education_blocks(text: str) -> List[str]:
    """
    Split an education section into one block per entry.

    A school line followed directly by its degree line is split by the entry
    regex into two complementary blocks (one names only an institution, the
    other only a degree); such adjacent pairs are joined back together.

    Example:
        >>> split_education_blocks("University of Washington\\nBachelor of Science in CS")
        ['University of Washington\\nBachelor of Science in CS']
    """
    raw_blocks = [b.strip() for b in EducationPatterns.ENTRY_START.split(text) if b.strip()]

    blocks: List[str] = []
    i = 0
    while i < len(raw_blocks):
        current = raw_blocks[i]
        if i + 1 < len(raw_blocks):
            following = raw_blocks[i + 1]
            school_then_degree = (
                _has_institution(current)
                and not _has_degree(current)
                and _has_degree(following)
                and not _has_institution(following)
            )
            degree_then_school = (
                _has_degree(current)
                and not _has_institution(current)
                and _has_institution(following)
                and not _has_degree(following)
            )
            if school_then_degree or degree_then_school:
                blocks.append(f"{current}\n{following}")
                i += 2
                continue
        blocks.append(current)
        i += 1
    return blocks


def _clean_fragment(value: str) -> Optional[str]:
    """Drop a trailing GPA fragment and date range from a school or degree phrase."""
    value = EducationPatterns.GPA_FRAGMENT.sub("", value)
    value = DatePatterns.DATE_RANGE.sub("", value)
    value = value.strip(" \t,;|-–—")
    return value or None


def _degree(block: str) -> Optional[str]:
    raw = first_match(
        (
            regex_strategy(EducationPatterns.DEGREE_WORDS),
            regex_strategy(EducationPatterns.DEGREE_ABBREV),
        ),
        block,
    )
    return _clean_fragment(raw) if raw else None


def _school(block: str) -> Optional[str]:
    raw = first_match(
        (
            regex_strategy(EducationPatterns.UNIVERSITY_OF),
            regex_strategy(EducationPatterns.NAMED_INSTITUTION),
        ),
        block,
    )
    return _clean_fragment(raw) if raw else None


def _school_from_first_line(block: str) -> Optional[str]:
    first_line = block.split("\n")[0].strip()
    if (
        not first_line
        or DatePatterns.DATE_RANGE.search(first_line)
        or EducationPatterns.GPA_LINE.match(first_line)
        or not _HAS_LETTER.search(first_line)
    ):
        return None
    return _clean_fragment(first_line)


def parse_education_entry(block: str) -> EducationEntry:
    """
    Extract one education entry from its block.

    The first line stands in for the school only when the block shows some
    other sign of being an education entry (a degree, dates or a GPA);
    otherwise the entry carries raw_text alone.
    """
    dates = regex_strategy(DatePatterns.DATE_RANGE, group=1)(block)
    gpa = regex_strategy(EducationPatterns.GPA, group=1)(block)
    degree = _degree(block)
    school = _school(block)

    if school is None and (degree or dates or gpa):
        school = _school_from_first_line(block)

    return EducationEntry(school=school, degree=degree, dates=dates, gpa=gpa, raw_text=block)


def parse_education_block(text: str) -> List[EducationEntry]:
    """
    Extract education entries from an education section.

    Args:
        text: Section content (plain text)

    Returns:
        Entries in document order; one raw_text-only entry if the section has
        content but no recognizable block; empty list for an empty section

    Example:
        >>> entries = parse_education_block(
        ...     "University of Washington | GPA: 3.90\\n"
        ...     "Bachelor of Science in Computer Science\\tSep 2018 - Jun 2022"
        ... )
        >>> entries[0].school, entries[0].gpa, entries[0].dates
        ('University of Washington', '3.90', 'Sep 2018 - Jun 2022')
    """
    entries = [parse_education_entry(block) for block in split_education_blocks(text)]
    if not entries and text.strip():
        entries.append(EducationEntry(raw_text=text.strip()))
    return entries
