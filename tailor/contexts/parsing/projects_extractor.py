"""Projects section extraction."""

from typing import List

from tailor.contexts.parsing.patterns import ListPatterns, extract_bullets
from tailor.contexts.parsing.resume_data_structure import ProjectEntry


def parse_projects_block(text: str) -> List[ProjectEntry]:
    """
    Extract project entries from a projects section.

    Entries start at "Title | something" lines. The title is the first line
    cut at its first "|"; the rest of the block becomes bullets.

    Example:
        >>> projects = parse_projects_block("Resume Tailor | Python, docx\\n- Parsed resumes")
        >>> projects[0].title, projects[0].bullets
        ('Resume Tailor', ['Parsed resumes'])
    """
    entries = []
    for part in ListPatterns.PROJECT_START.split(text):
        if not part.strip():
            continue
        stripped = part.strip()
        first_line, _, remainder = stripped.partition("\n")
        first_line = first_line.strip()
        title = ListPatterns.PIPE_TAIL.sub("", first_line).strip() or first_line
        entries.append(ProjectEntry(title=title or None, bullets=extract_bullets(remainder)))

    if not entries and text.strip():
        bullets = extract_bullets(text)
        entries.append(ProjectEntry(bullets=bullets if bullets else [text.strip()]))

    return entries
