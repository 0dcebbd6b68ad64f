"""Unit tests for the keyword comparator."""

import pytest

from tailor.contexts.analysis.keyword_comparator import (
    compare_keyword_list,
    compare_keywords,
    tokenize,
)
from tailor.contexts.parsing.resume_data_structure import (
    EducationEntry,
    ExperienceEntry,
    ParsedResume,
    ProjectEntry,
)


@pytest.fixture
def backend_resume():
    return ParsedResume(
        skills=["Python", "Java", "AWS", "REST APIs"],
        experience=[
            ExperienceEntry(role="Software Engineer", bullets=["Built backend services and APIs"])
        ],
    )


@pytest.mark.unit
class TestTokenize:
    """Tests for tokenize()."""

    def test_short_and_numeric_tokens_dropped(self):
        assert tokenize("Go 5 years of C++ and 2024 SQL") == ["years", "and", "sql"]

    def test_punctuation_separates(self):
        assert tokenize("CI/CD, node.js") == ["node"]

    def test_unique_in_first_appearance_order(self):
        assert tokenize("Python python PYTHON java") == ["python", "java"]


@pytest.mark.unit
class TestTokenMode:
    """Tests for compare_keywords()."""

    def test_end_to_end_scenario(self, backend_resume):
        report = compare_keywords(
            backend_resume, "Software Engineer backend Python Java AWS REST APIs"
        )

        assert set(report.matched_keywords) >= {
            "python", "java", "aws", "software", "engineer", "backend", "apis"
        }
        assert report.missing_keywords == []

    def test_words_absent_from_resume_are_missing(self, backend_resume):
        report = compare_keywords(backend_resume, "Senior Software Engineer, Kubernetes")

        assert report.matched_keywords == ["software", "engineer"]
        assert report.missing_keywords == ["senior", "kubernetes"]

    def test_partition_of_job_tokens(self, backend_resume):
        job = "Kubernetes, Python, Terraform; distributed systems with AWS (5+ years)"
        report = compare_keywords(backend_resume, job)

        matched, missing = set(report.matched_keywords), set(report.missing_keywords)
        assert matched | missing == set(tokenize(job))
        assert matched & missing == set()

    def test_no_substring_leakage(self):
        resume = ParsedResume(skills=["Go"])
        report = compare_keywords(resume, "Golang")

        assert report.matched_keywords == []
        assert report.missing_keywords == ["golang"]

    def test_education_and_projects_count(self):
        resume = ParsedResume(
            education=[EducationEntry(school="Reed College", degree="B.A. in Physics")],
            projects=[ProjectEntry(title="Telescope", bullets=["Calibrated optics"])],
        )
        report = compare_keywords(resume, "physics optics telescope chemistry")

        assert report.matched_keywords == ["physics", "optics", "telescope"]
        assert report.missing_keywords == ["chemistry"]

    def test_camel_case_output(self, backend_resume):
        data = compare_keywords(backend_resume, "Python Rust").to_dict()
        assert data == {"matchedKeywords": ["python"], "missingKeywords": ["rust"]}


@pytest.mark.unit
class TestPhraseListMode:
    """Tests for compare_keyword_list()."""

    def test_case_insensitive_substring_mid_bullet(self):
        resume = ParsedResume(experience=[ExperienceEntry(bullets=["Led api design reviews"])])
        report = compare_keyword_list(resume, ["API design", "gRPC"])

        assert report.matched_keywords == ["API design"]
        assert report.missing_keywords == ["gRPC"]

    def test_blank_phrases_skipped_and_trimmed(self, backend_resume):
        report = compare_keyword_list(backend_resume, ["  REST APIs ", "", "   "])

        assert report.matched_keywords == ["REST APIs"]
        assert report.missing_keywords == []
