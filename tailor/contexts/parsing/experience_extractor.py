"""
Experience section extraction.

Job boundaries are recovered from two layouts:

1. Tab-separated header: "Company | City, ST<TAB>Jul 2024 - Present"
2. Pipe-separated header: a short company line followed by a line
   starting with "|" (e.g. "| Software Engineer | Seattle, WA")

Within a job block the first line is the header. A short lookahead over
the following lines recovers dates, role, location and a subheader (a
tech-stack line). Every line consumed as header is removed before the
remaining lines are turned into bullets.
"""

import re
from typing import List, Optional, Set

from tailor.contexts.parsing.patterns import (
    HEADER_LOOKAHEAD_LINES,
    LOCATION_SEARCH_CHARS,
    MAX_COMPANY_LENGTH,
    MAX_ROLE_LENGTH,
    DatePatterns,
    ExperiencePatterns,
    LocationPatterns,
    extract_bullets,
    looks_like_bullet,
    looks_like_location,
    looks_like_role,
    looks_like_tech_or_skills,
)
from tailor.contexts.parsing.normalizer import normalize_line_endings
from tailor.contexts.parsing.resume_data_structure import ExperienceEntry
from tailor.utils.text_processing import first_match, non_empty_lines, regex_strategy

_TAB_RUN = re.compile(r"\t+")


def split_job_blocks(text: str) -> List[str]:
    """
    Split an experience section into one block per job.

    The tab+date split is tried first; the pipe-header split is used when
    the first one does not produce more than one block.
    """
    normalized = normalize_line_endings(text)
    blocks = [b for b in ExperiencePatterns.SPLIT_TAB_DATE.split(normalized) if b.strip()]
    if len(blocks) <= 1:
        blocks = [b for b in ExperiencePatterns.SPLIT_PIPE_HEADER.split(normalized) if b.strip()]
    return blocks


def _is_residual_heading(line: str) -> bool:
    return bool(ExperiencePatterns.ALL_CAPS_LINE.match(line)) and any(c.isalpha() for c in line)


def _short_enough(value: str, limit: int) -> Optional[str]:
    return value if value and len(value) < limit else None


def _parse_first_line(entry: ExperienceEntry, first_line: str) -> None:
    """Company, location and dates from the header line."""
    parts = _TAB_RUN.split(first_line, maxsplit=1)
    first_part = parts[0].strip()

    if len(parts) > 1:
        date_match = DatePatterns.DATE_RANGE.search(parts[1])
        if date_match:
            entry.dates = date_match.group(1)

    if "|" in first_part:
        left, right = (side.strip() for side in first_part.split("|", 1))
        if looks_like_location(right):
            entry.company = _short_enough(left, MAX_COMPANY_LENGTH)
            entry.location = right.rstrip("| ").strip()
            return

    entry.company = _short_enough(first_part, MAX_COMPANY_LENGTH)


def _parse_pipe_line(entry: ExperienceEntry, line: str) -> bool:
    """
    Apply the role/location/subheader rules to a "left | right" line.

    Returns:
        True if the line was recognized as a header line
    """
    left, right = (side.strip() for side in line.split("|", 1))

    if looks_like_role(left):
        entry.role = entry.role or left
        if looks_like_location(right):
            entry.location = entry.location or right.rstrip("| ").strip()
        elif looks_like_tech_or_skills(right):
            entry.subheader = entry.subheader or right
        return True

    if looks_like_role(right) and looks_like_tech_or_skills(left) and not looks_like_location(left):
        entry.role = entry.role or right
        entry.subheader = entry.subheader or left
        return True

    if looks_like_location(left):
        entry.location = entry.location or left
        if looks_like_role(right):
            entry.role = entry.role or right
        return True

    if looks_like_location(right):
        entry.location = entry.location or right.rstrip("| ").strip()
        if left and len(left) < MAX_ROLE_LENGTH:
            entry.role = entry.role or left
        return True

    return False


def _parse_lookahead_line(entry: ExperienceEntry, line: str) -> bool:
    """
    Recover header fields from one line after the first.

    Returns:
        True if the line is a header line (and must not become a bullet)
    """
    consumed = False
    date_match = DatePatterns.DATE_RANGE.search(line)
    if date_match:
        entry.dates = entry.dates or date_match.group(1)
        line = (line[: date_match.start()] + line[date_match.end():]).strip(" \t|,")
        consumed = True
        if not line:
            return True

    line = line.lstrip("| \t")
    if "|" in line:
        return _parse_pipe_line(entry, line) or consumed

    if looks_like_location(line):
        entry.location = entry.location or line
        return True

    if looks_like_role(line) and len(line) < MAX_ROLE_LENGTH and not entry.role:
        entry.role = line
        return True

    return consumed


def _join_city_state(entry: ExperienceEntry, lines: List[str], consumed: Set[int]) -> None:
    """Join a bare "City" line and a following bare state line into a location."""
    last = min(len(lines), HEADER_LOOKAHEAD_LINES + 1)
    for i in range(1, last):
        if i + 1 >= len(lines):
            break
        city = lines[i]
        state = re.sub(r"\s+", " ", lines[i + 1])
        if LocationPatterns.CITY_ONLY_LINE.match(city) and LocationPatterns.STATE_ONLY_LINE.match(
            state
        ):
            entry.location = f"{city.rstrip(', ')}, {state}"
            consumed.update((i, i + 1))
            return


def _location_in_header(block: str) -> Optional[str]:
    head = block[:LOCATION_SEARCH_CHARS]
    return first_match(
        (
            regex_strategy(LocationPatterns.CITY_STATE_FULL),
            regex_strategy(LocationPatterns.CITY_STATE_ABBREV),
        ),
        head,
    )


def parse_job_block(block: str) -> Optional[ExperienceEntry]:
    """
    Extract one job from its block.

    Returns:
        ExperienceEntry, or None if the block is only a residual section heading
    """
    lines = non_empty_lines(block)
    if not lines or _is_residual_heading(lines[0]):
        return None

    entry = ExperienceEntry()
    consumed = {0}
    _parse_first_line(entry, lines[0])

    for i in range(1, min(len(lines), HEADER_LOOKAHEAD_LINES + 1)):
        if looks_like_bullet(lines[i]):
            break
        if _parse_lookahead_line(entry, lines[i]):
            consumed.add(i)

    if not entry.location:
        _join_city_state(entry, lines, consumed)

    # Fallback strategies over the whole block
    if not entry.dates:
        entry.dates = regex_strategy(DatePatterns.DATE_RANGE, group=1)(block)
    if not entry.location:
        entry.location = _location_in_header(block)

    body = "\n".join(line for i, line in enumerate(lines) if i not in consumed)
    entry.bullets = extract_bullets(body)
    return entry


def parse_experience_block(text: str) -> List[ExperienceEntry]:
    """
    Extract experience entries from an experience section.

    Args:
        text: Section content (plain text)

    Returns:
        Entries in document order. If no job block is recognized but the
        section has content, a single entry holding the section's bullets
        (or its raw text as one bullet).

    Example:
        >>> jobs = parse_experience_block(
        ...     "Stackline | Seattle, WA\\tJul 2024 - Present\\n"
        ...     "Software Engineer | Python, AWS\\n"
        ...     "• Built backend services"
        ... )
        >>> jobs[0].company, jobs[0].role, jobs[0].subheader, jobs[0].bullets
        ('Stackline', 'Software Engineer', 'Python, AWS', ['Built backend services'])
    """
    entries = []
    for block in split_job_blocks(text):
        entry = parse_job_block(block)
        if entry is not None:
            entries.append(entry)

    if not entries and text.strip():
        bullets = extract_bullets(text)
        entries.append(ExperienceEntry(bullets=bullets if bullets else [text.strip()]))

    return entries
