"""Shared fixtures: small .docx resumes built with python-docx."""

import io

import docx
import pytest

from tailor.contexts.parsing.resume_data_structure import (
    Contact,
    EducationEntry,
    ExperienceEntry,
    ParsedResume,
    ProjectEntry,
)

RESUME_PARAGRAPHS = [
    ("Normal", "Jane Doe"),
    ("Normal", "jane.doe@example.com | (206) 555-0100 | Seattle, WA | linkedin.com/in/janedoe"),
    ("Heading 1", "EDUCATION"),
    ("Normal", "University of Washington | GPA: 3.90"),
    ("Normal", "Bachelor of Science in Computer Science\tSep 2018 - Jun 2022"),
    ("Heading 1", "PROFESSIONAL EXPERIENCE"),
    ("Normal", "Stackline | Seattle, WA\tJul 2024 - Present"),
    ("Normal", "Software Engineer | Python, AWS"),
    ("Normal", "• Built backend services and APIs"),
    ("Normal", "• Reduced latency by 40%"),
    ("Normal", "Acme Corp | Austin, TX\tJun 2022 - Jun 2024"),
    ("Normal", "Backend Developer | Java, SQL"),
    ("Normal", "• Maintained payment APIs"),
    ("Heading 1", "PROJECTS"),
    ("Normal", "Resume Tailor | Python, python-docx"),
    ("Normal", "- Parsed resumes into sections"),
    ("Heading 1", "SKILLS"),
    ("Normal", "Python, Java, AWS, REST APIs"),
]


def build_docx(paragraphs) -> bytes:
    """Build a .docx from (style, text) pairs."""
    document = docx.Document()
    for style, text in paragraphs:
        document.add_paragraph(text, style=style)
    output = io.BytesIO()
    document.save(output)
    return output.getvalue()


def paragraph_texts(data: bytes) -> list:
    """Text of every body paragraph of a .docx."""
    return [p.text for p in docx.Document(io.BytesIO(data)).paragraphs]


@pytest.fixture
def resume_docx_bytes() -> bytes:
    return build_docx(RESUME_PARAGRAPHS)


@pytest.fixture
def resume_docx_path(tmp_path, resume_docx_bytes):
    path = tmp_path / "resume.docx"
    path.write_bytes(resume_docx_bytes)
    return path


@pytest.fixture
def sample_resume() -> ParsedResume:
    """The structured form of RESUME_PARAGRAPHS."""
    return ParsedResume(
        contact=Contact(
            name="Jane Doe",
            email="jane.doe@example.com",
            phone="(206) 555-0100",
            location="Seattle, WA",
            linkedin="https://linkedin.com/in/janedoe",
        ),
        education=[
            EducationEntry(
                school="University of Washington",
                degree="Bachelor of Science in Computer Science",
                dates="Sep 2018 - Jun 2022",
                gpa="3.90",
                raw_text=(
                    "University of Washington | GPA: 3.90\n"
                    "Bachelor of Science in Computer Science\tSep 2018 - Jun 2022"
                ),
            )
        ],
        experience=[
            ExperienceEntry(
                company="Stackline",
                role="Software Engineer",
                location="Seattle, WA",
                dates="Jul 2024 - Present",
                subheader="Python, AWS",
                bullets=["Built backend services and APIs", "Reduced latency by 40%"],
            ),
            ExperienceEntry(
                company="Acme Corp",
                role="Backend Developer",
                location="Austin, TX",
                dates="Jun 2022 - Jun 2024",
                subheader="Java, SQL",
                bullets=["Maintained payment APIs"],
            ),
        ],
        projects=[ProjectEntry(title="Resume Tailor", bullets=["Parsed resumes into sections"])],
        skills=["Python", "Java", "AWS", "REST APIs"],
    )


@pytest.fixture
def make_docx():
    """Factory fixture: (style, text) pairs -> .docx bytes."""
    return build_docx


@pytest.fixture
def read_paragraphs():
    """Helper fixture: .docx bytes -> list of paragraph texts."""
    return paragraph_texts
