"""Integration tests: .docx packages through markup conversion and parsing."""

import io
import zipfile

import docx
import pytest

from tailor.contexts.parsing.docx_markup import docx_to_markup
from tailor.contexts.parsing.resume_parser import (
    parse_markup_to_resume,
    parse_resume_from_bytes,
    parse_resume_from_path,
)
from tailor.contexts.templating.docx_package import (
    read_document_xml,
    replace_document_xml,
    save_document,
)
from tailor.contexts.templating.exceptions import MalformedPackageError


@pytest.mark.integration
class TestParseDocx:
    """Tests for parsing a complete resume document."""

    def test_parse_from_path(self, resume_docx_path, sample_resume):
        assert parse_resume_from_path(resume_docx_path) == sample_resume

    def test_parse_from_bytes(self, resume_docx_bytes, sample_resume):
        assert parse_resume_from_bytes(resume_docx_bytes) == sample_resume

    def test_markup_blocks(self, resume_docx_bytes):
        markup = docx_to_markup(resume_docx_bytes)

        assert markup.startswith("<p>Jane Doe</p>")
        assert "<h1>EDUCATION</h1>" in markup
        assert "<h1>PROFESSIONAL EXPERIENCE</h1>" in markup
        assert "<p>Python, Java, AWS, REST APIs</p>" in markup

    def test_list_paragraphs_become_list_items(self, make_docx):
        data = make_docx(
            [
                ("Heading 1", "SKILLS"),
                ("List Bullet", "Python"),
                ("List Bullet", "Go"),
                ("Normal", "Tools: Docker"),
            ]
        )
        assert docx_to_markup(data) == (
            "<h1>SKILLS</h1><ul><li>Python</li><li>Go</li></ul><p>Tools: Docker</p>"
        )

    def test_markup_escapes_text(self, make_docx):
        markup = docx_to_markup(make_docx([("Normal", "R&D <Lab>")]))
        assert markup == "<p>R&amp;D &lt;Lab&gt;</p>"

    def test_table_cells_visited_once(self):
        document = docx.Document()
        document.add_paragraph("SKILLS", style="Heading 1")
        table = document.add_table(rows=1, cols=3)
        table.cell(0, 0).text = "Python"
        table.cell(0, 0).merge(table.cell(0, 1))
        table.cell(0, 2).text = "Go"

        markup = docx_to_markup(save_document(document))

        assert markup.count("Python") == 1
        assert markup.index("Python") < markup.index("Go")


@pytest.mark.integration
class TestMalformedPackages:
    """Tests for inputs that are not usable .docx packages."""

    def test_not_a_zip(self):
        with pytest.raises(MalformedPackageError, match="Not a zip package"):
            parse_resume_from_bytes(b"plain text, not a document")

    def test_zip_without_document_entry(self):
        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, "w") as archive:
            archive.writestr("word/styles.xml", "<w:styles/>")

        with pytest.raises(MalformedPackageError) as exc_info:
            docx_to_markup(buffer.getvalue())
        assert exc_info.value.entry_name == "word/document.xml"

    def test_source_path_in_error(self, tmp_path):
        path = tmp_path / "broken.docx"
        path.write_bytes(b"broken")

        with pytest.raises(MalformedPackageError) as exc_info:
            parse_resume_from_path(path)
        assert exc_info.value.source == str(path)

    def test_zip_without_content_types(self, resume_docx_bytes):
        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, "w") as archive:
            archive.writestr("word/document.xml", read_document_xml(resume_docx_bytes))

        with pytest.raises(MalformedPackageError, match="Unreadable package"):
            parse_resume_from_bytes(buffer.getvalue())

    def test_broken_document_xml(self, resume_docx_path, resume_docx_bytes):
        resume_docx_path.write_bytes(replace_document_xml(resume_docx_bytes, "<not xml"))

        with pytest.raises(MalformedPackageError) as exc_info:
            parse_resume_from_path(resume_docx_path)
        assert exc_info.value.source == str(resume_docx_path)


@pytest.mark.integration
class TestPipeLayoutDocument:
    """Jobs and projects written as separate "|" paragraphs rather than tab-dated headers."""

    PARAGRAPHS = [
        ("Normal", "Jane Doe"),
        ("Heading 1", "EXPERIENCE"),
        ("Normal", "Acme"),
        ("Normal", "| Software Engineer | Austin, TX"),
        ("Normal", "- Built APIs"),
        ("Normal", "Beta Corp"),
        ("Normal", "| Data Analyst | Seattle, WA"),
        ("Normal", "- Ran reports"),
        ("Heading 1", "PROJECTS"),
        ("Normal", "Resume Tailor | Python, python-docx"),
        ("Normal", "- Parsed resumes"),
        ("Normal", "Job Board | React, Node"),
        ("Normal", "- Built search"),
        ("Heading 1", "SKILLS"),
        ("Normal", "Python, Go"),
    ]

    @pytest.fixture
    def resume(self, make_docx):
        return parse_markup_to_resume(docx_to_markup(make_docx(self.PARAGRAPHS)))

    def test_jobs(self, resume):
        assert [(job.company, job.role, job.location) for job in resume.experience] == [
            ("Acme", "Software Engineer", "Austin, TX"),
            ("Beta Corp", "Data Analyst", "Seattle, WA"),
        ]
        assert [job.bullets for job in resume.experience] == [["Built APIs"], ["Ran reports"]]

    def test_projects(self, resume):
        assert [project.title for project in resume.projects] == ["Resume Tailor", "Job Board"]
        assert [project.bullets for project in resume.projects] == [
            ["Parsed resumes"],
            ["Built search"],
        ]

    def test_skills(self, resume):
        assert resume.skills == ["Python", "Go"]
