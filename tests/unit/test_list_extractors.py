"""Unit tests for the projects and skills extractors and the bullet rule."""

import pytest

from tailor.contexts.parsing.patterns import extract_bullets
from tailor.contexts.parsing.projects_extractor import parse_projects_block
from tailor.contexts.parsing.skills_extractor import parse_skills_block


@pytest.mark.unit
class TestExtractBullets:
    """Tests for extract_bullets()."""

    def test_glyphs_and_numbering_stripped(self):
        text = "• Built APIs\n- Led team\n* Wrote docs\n1. Shipped\n2) Hired"
        assert extract_bullets(text) == ["Built APIs", "Led team", "Wrote docs", "Shipped", "Hired"]

    def test_plain_lines_kept(self):
        assert extract_bullets("Built APIs\n\n  Led team  ") == ["Built APIs", "Led team"]

    def test_glyph_only_lines_fall_back_to_raw_lines(self):
        assert extract_bullets("•\n-") == ["•", "-"]


@pytest.mark.unit
class TestParseProjectsBlock:
    """Tests for parse_projects_block()."""

    def test_titles_cut_at_pipe(self):
        text = (
            "Resume Tailor | Python, python-docx\n"
            "- Parsed resumes into sections\n"
            "Trail Finder | React Native\n"
            "- Mapped 200 trails\n"
            "- Added offline mode"
        )
        projects = parse_projects_block(text)

        assert [p.title for p in projects] == ["Resume Tailor", "Trail Finder"]
        assert projects[0].bullets == ["Parsed resumes into sections"]
        assert projects[1].bullets == ["Mapped 200 trails", "Added offline mode"]

    def test_block_without_pipe_header(self):
        projects = parse_projects_block("Weekend hacks\n- Built a CLI")

        assert len(projects) == 1
        assert projects[0].title == "Weekend hacks"
        assert projects[0].bullets == ["Built a CLI"]

    def test_empty_section(self):
        assert parse_projects_block("") == []


@pytest.mark.unit
class TestParseSkillsBlock:
    """Tests for parse_skills_block()."""

    def test_newlines_act_as_commas(self):
        assert parse_skills_block("Python, Java\nAWS\n\nDocker") == ["Python", "Java", "AWS", "Docker"]

    def test_repeated_commas_and_blanks_dropped(self):
        assert parse_skills_block("Go,, ,Rust ,") == ["Go", "Rust"]

    def test_first_appearance_order_kept(self):
        assert parse_skills_block("SQL, Go\nSQL") == ["SQL", "Go"]
