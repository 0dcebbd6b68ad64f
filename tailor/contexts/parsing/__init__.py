"""
Parsing Context

Responsibilities:
- Converts .docx resumes into block markup and plain text
- Segments resume text into titled sections
- Extracts contact, education, experience, projects and skills entries

Owns: ParsedResume data structure, section heuristics, field extraction patterns
Never: Rewrites resume content or touches templated documents
"""

from tailor.contexts.parsing.resume_data_structure import (
    DEFAULT_RESUME_ID,
    Contact,
    EducationEntry,
    ExperienceEntry,
    ParsedResume,
    ProjectEntry,
)
from tailor.contexts.parsing.resume_parser import (
    parse_markup_to_resume,
    parse_resume_from_bytes,
    parse_resume_from_path,
)

__all__ = [
    # Data structures
    "Contact",
    "EducationEntry",
    "ExperienceEntry",
    "ProjectEntry",
    "ParsedResume",
    "DEFAULT_RESUME_ID",
    # Entry points
    "parse_markup_to_resume",
    "parse_resume_from_path",
    "parse_resume_from_bytes",
]
