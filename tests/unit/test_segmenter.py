"""Unit tests for section classification and the two segmentation strategies."""

import pytest

from tailor.contexts.parsing.section_patterns import (
    classify_section,
    is_heading_line,
    is_markup_header,
    normalize_section_name,
)
from tailor.contexts.parsing.segmenter import split_by_heading_lines, split_by_markup_headings


@pytest.mark.unit
class TestSectionPatterns:
    """Tests for header detection and classification."""

    def test_normalize_section_name(self):
        assert normalize_section_name("  Work \t Experience ") == "work experience"

    def test_vocabulary_header_any_case(self):
        assert is_markup_header("Technical Skills")

    def test_uppercase_header(self):
        assert is_markup_header("LEADERSHIP & AWARDS")

    def test_long_title_rejected(self):
        assert not is_markup_header("EXPERIENCE " * 8)

    def test_ordinary_paragraph_rejected(self):
        assert not is_markup_header("Built backend services and APIs")

    def test_heading_line_requires_whole_line(self):
        assert is_heading_line("  SKILLS  ")
        assert not is_heading_line("SKILLS AND INTERESTS")

    @pytest.mark.parametrize(
        "title,kind",
        [
            ("EDUCATION", "education"),
            ("Professional Experience", "experience"),
            ("PROJECTS & OUTSIDE EXPERIENCE", "projects"),
            ("Technical Skills", "skills"),
            ("Contact", "contact"),
            ("", "contact"),
            ("Awards", "other"),
        ],
    )
    def test_classify_section(self, title, kind):
        assert classify_section(title) == kind


@pytest.mark.unit
class TestMarkupStrategy:
    """Tests for split_by_markup_headings()."""

    def test_heading_and_uppercase_paragraph_both_open_sections(self):
        markup = (
            "<p>Jane Doe</p>"
            "<h1>EDUCATION</h1><p>University of Washington</p>"
            "<p>SKILLS</p><p>Python, Go</p>"
        )
        sections = split_by_markup_headings(markup)

        assert [s.title for s in sections] == ["EDUCATION", "SKILLS"]
        assert sections[0].content == "University of Washington"
        assert sections[1].content == "Python, Go"

    def test_text_before_first_header_is_dropped(self):
        sections = split_by_markup_headings("<p>Jane Doe</p><h2>Skills</h2><p>Go</p>")
        assert len(sections) == 1
        assert "Jane Doe" not in sections[0].content

    def test_list_items_join_preceding_section(self):
        markup = "<h1>EXPERIENCE</h1><p>Acme</p><ul><li>Built APIs</li><li>Led team</li></ul>"
        sections = split_by_markup_headings(markup)
        assert sections[0].content.split("\n") == ["Acme", "Built APIs", "Led team"]

    def test_consecutive_blocks_land_on_consecutive_lines(self):
        markup = (
            "<h1>EXPERIENCE</h1><p>Acme</p><p>| Software Engineer | Austin, TX</p>"
            "<p></p><p>- Built APIs</p>"
        )
        sections = split_by_markup_headings(markup)
        assert sections[0].content.split("\n") == [
            "Acme",
            "| Software Engineer | Austin, TX",
            "- Built APIs",
        ]

    def test_no_headers(self):
        assert split_by_markup_headings("<p>just some text</p>") == []


@pytest.mark.unit
class TestHeadingLineStrategy:
    """Tests for split_by_heading_lines()."""

    def test_splits_on_vocabulary_lines(self):
        text = "Jane Doe\nEDUCATION\nUniversity of X\n\nSKILLS\nPython\nGo\n"
        sections = split_by_heading_lines(text)

        assert [(s.title, s.content) for s in sections] == [
            ("EDUCATION", "University of X"),
            ("SKILLS", "Python\nGo"),
        ]

    def test_uppercase_line_outside_vocabulary_is_content(self):
        sections = split_by_heading_lines("SKILLS\nAWS\nGCP")
        assert sections[0].content == "AWS\nGCP"
