"""Unit tests for education section extraction."""

import pytest

from tailor.contexts.parsing.education_extractor import (
    parse_education_block,
    split_education_blocks,
)


@pytest.mark.unit
class TestSplitEducationBlocks:
    """Tests for split_education_blocks()."""

    def test_school_and_degree_lines_are_joined(self):
        blocks = split_education_blocks(
            "University of Washington | GPA: 3.90\n"
            "Bachelor of Science in Computer Science\tSep 2018 - Jun 2022"
        )
        assert len(blocks) == 1

    def test_two_schools_stay_separate(self):
        text = (
            "Stanford University\tSep 2022 - Jun 2024\n"
            "Master of Science in Computer Science\n"
            "University of Washington\tSep 2018 - Jun 2022\n"
            "Bachelor of Science in Computer Science"
        )
        blocks = split_education_blocks(text)
        assert len(blocks) == 2
        assert blocks[0].startswith("Stanford University")
        assert blocks[1].startswith("University of Washington")


@pytest.mark.unit
class TestParseEducationBlock:
    """Tests for parse_education_block()."""

    def test_structured_fields(self):
        entries = parse_education_block(
            "University of Washington | GPA: 3.90\n"
            "Bachelor of Science in Computer Science\tSep 2018 - Jun 2022"
        )

        assert len(entries) == 1
        entry = entries[0]
        assert entry.school == "University of Washington"
        assert entry.degree == "Bachelor of Science in Computer Science"
        assert entry.dates == "Sep 2018 - Jun 2022"
        assert entry.gpa == "3.90"
        assert entry.raw_text.startswith("University of Washington")

    def test_named_institution_and_abbreviated_degree(self):
        entries = parse_education_block("B.S. in Physics, Reed College\tAug 2015 – May 2019")

        entry = entries[0]
        assert entry.school == "Reed College"
        assert entry.degree == "B.S. in Physics"
        assert entry.dates == "Aug 2015 – May 2019"
        assert entry.gpa is None

    def test_first_line_stands_in_for_school(self):
        entries = parse_education_block("Lakeside Academy\nGPA: 4.0")
        assert entries[0].school == "Lakeside Academy"
        assert entries[0].gpa == "4.0"

    def test_unparseable_section_yields_one_raw_entry(self):
        """A section with no recognizable structure still yields exactly one entry."""
        entries = parse_education_block("self-taught through online courses")

        assert len(entries) == 1
        entry = entries[0]
        assert entry.raw_text == "self-taught through online courses"
        assert entry.school is None
        assert entry.degree is None
        assert entry.dates is None
        assert entry.gpa is None

    def test_empty_section(self):
        assert parse_education_block("  \n ") == []
