"""
Reusable patterns and constants for resume field extraction.

This module provides geographic constants and regex patterns used across
the parsing context by the contact, education, experience, and projects
extractors.

Pattern classes follow a single convention:
- Dataclasses with frozen=True for immutability
- Class-level constants for patterns
- Helper functions that use these patterns
"""

import re
from dataclasses import dataclass

# =============================================================================
# GEOGRAPHIC CONSTANTS
# =============================================================================

US_STATES = (
    "Alabama",
    "Alaska",
    "Arizona",
    "Arkansas",
    "California",
    "Colorado",
    "Connecticut",
    "Delaware",
    "Florida",
    "Georgia",
    "Hawaii",
    "Idaho",
    "Illinois",
    "Indiana",
    "Iowa",
    "Kansas",
    "Kentucky",
    "Louisiana",
    "Maine",
    "Maryland",
    "Massachusetts",
    "Michigan",
    "Minnesota",
    "Mississippi",
    "Missouri",
    "Montana",
    "Nebraska",
    "Nevada",
    "New Hampshire",
    "New Jersey",
    "New Mexico",
    "New York",
    "North Carolina",
    "North Dakota",
    "Ohio",
    "Oklahoma",
    "Oregon",
    "Pennsylvania",
    "Rhode Island",
    "South Carolina",
    "South Dakota",
    "Tennessee",
    "Texas",
    "Utah",
    "Vermont",
    "Virginia",
    "Washington",
    "West Virginia",
    "Wisconsin",
    "Wyoming",
)

# Cities recognized on their own, without a state suffix
KNOWN_CITIES = (
    "Seattle",
    "San Jose",
    "Los Angeles",
    "San Francisco",
    "New York",
    "Boston",
    "Austin",
    "Chicago",
    "Remote",
)

# Build regex alternations from the constants
_US_STATE_PATTERN = "|".join(re.escape(s) for s in US_STATES)
_KNOWN_CITY_PATTERN = "|".join(re.escape(c) for c in KNOWN_CITIES)
_CITY = r"[A-Z][a-z]+(?:[ .'-]+[A-Z][a-z]+)*"


# =============================================================================
# LOCATION PATTERNS
# =============================================================================


@dataclass(frozen=True)
class LocationPatterns:
    """
    Regex patterns for recognizing locations.

    Supports:
    - City, ST (two-letter state code)
    - City, State Name (full state name)
    - A bare city from the KNOWN_CITIES gazetteer
    """

    # City, State (2-letter abbreviation) - e.g., "Seattle, WA"
    CITY_STATE_ABBREV: re.Pattern = re.compile(rf"\b({_CITY}),[ \t]*([A-Z]{{2}})\b")

    # City, State (full name) - e.g., "Seattle, Washington"
    CITY_STATE_FULL: re.Pattern = re.compile(rf"\b({_CITY}),[ \t]*({_US_STATE_PATTERN})\b")

    # Whole string is a location (used on header fragments)
    WHOLE_LOCATION: re.Pattern = re.compile(
        rf"^{_CITY},\s*(?:[A-Z]{{2}}|{_US_STATE_PATTERN})$|^(?:{_KNOWN_CITY_PATTERN})$"
    )

    # Bare gazetteer city anywhere in text
    KNOWN_CITY: re.Pattern = re.compile(rf"\b(?:{_KNOWN_CITY_PATTERN})\b")

    # A line that is only a city name (optionally with trailing comma)
    CITY_ONLY_LINE: re.Pattern = re.compile(r"^[A-Za-z][A-Za-z .'-]*,?\s*$")

    # A line that is only a state code or full state name
    STATE_ONLY_LINE: re.Pattern = re.compile(rf"^(?:[A-Z]{{2}}|{_US_STATE_PATTERN})$")


# =============================================================================
# DATE PATTERNS
# =============================================================================


@dataclass(frozen=True)
class DatePatterns:
    """
    Regex patterns for date ranges.

    Ranges look like "Jul 2024 – Present", "Sep 2018 - Jun 2022", or
    "September 2018 — 2022", with hyphen, en dash, or em dash separators.
    """

    DATE_RANGE: re.Pattern = re.compile(
        r"([A-Za-z]+\.?\s+\d{4}\s*[-–—]\s*(?:Present|Current|Now|[A-Za-z]+\.?\s+\d{4}|\d{4}))",
        re.IGNORECASE,
    )

    # Start of a date range directly after a tab (tab-separated header layout)
    TAB_DATE_START: re.Pattern = re.compile(r"\t\s*[A-Za-z]+\.?\s+\d{4}\s*[-–—]")


# =============================================================================
# CONTACT PATTERNS
# =============================================================================


@dataclass(frozen=True)
class ContactPatterns:
    """Regex patterns for contact block fields."""

    EMAIL: re.Pattern = re.compile(r"[\w.+%-]+@[\w.-]+\.[A-Za-z]{2,}")

    # Candidate runs of phone characters; callers require 10+ digits inside the run
    PHONE_RUN: re.Pattern = re.compile(r"\+?[\d \t\-().]{10,}")

    LINKEDIN: re.Pattern = re.compile(r"linkedin\.com/in/[^\s|,;]+", re.IGNORECASE)

    # Two or three capitalized words at line start, followed by whitespace or a separator
    NAME: re.Pattern = re.compile(
        r"^([A-Z][a-z]+[ \t]+[A-Z][a-z]+(?:[ \t]+[A-Z][a-z]+)?)[ \t]*[\s|]", re.MULTILINE
    )

    LETTERS_AND_SPACES: re.Pattern = re.compile(r"^[A-Za-z\s]+$")


MIN_PHONE_DIGITS = 10


# =============================================================================
# EDUCATION PATTERNS
# =============================================================================

_INSTITUTION_KEYWORDS = r"University|College|Institute|School"


@dataclass(frozen=True)
class EducationPatterns:
    """Regex patterns for education blocks."""

    # Newline before a capitalized line naming an institution or degree
    ENTRY_START: re.Pattern = re.compile(
        rf"\n(?=[A-Z][a-z][^\n]*?(?:\b(?:{_INSTITUTION_KEYWORDS})\b|\b(?:Bachelor|Master|PhD)|Ph\.D|B\.S\.|M\.S\.|B\.A\.|M\.A\.))"
    )

    INSTITUTION_KEYWORD: re.Pattern = re.compile(rf"\b(?:{_INSTITUTION_KEYWORDS})\b")
    DEGREE_KEYWORD: re.Pattern = re.compile(r"(?:\b(?:Bachelor|Master|PhD)|Ph\.D|B\.S\.|M\.S\.|B\.A\.|M\.A\.)")

    GPA: re.Pattern = re.compile(r"GPA[:\s]*(\d+(?:\.\d+)?)", re.IGNORECASE)
    GPA_LINE: re.Pattern = re.compile(r"^GPA", re.IGNORECASE)
    GPA_FRAGMENT: re.Pattern = re.compile(r"\s*[|,]?\s*GPA.*$", re.IGNORECASE)

    # "Bachelor of Science in Computer Science", "Master's in Data Science"
    DEGREE_WORDS: re.Pattern = re.compile(
        r"\b(?:Bachelor|Master|Doctor|Associate)(?:['\u2019]?s)?"
        r"(?:[ \t]+of[ \t]+[A-Z][a-z]+(?:[ \t]+[A-Z][a-z]+)*)?"
        r"(?:[ \t]+in[ \t]+[^|\n,;\t]+)?"
    )

    # "B.S. in Computer Science", "PhD in Physics", "MBA"
    DEGREE_ABBREV: re.Pattern = re.compile(
        r"(?<!, )\b(?:B\.?S|M\.?S|B\.?A|M\.?A|Ph\.?D|MBA)\b\.?(?:[ \t]+in[ \t]+[^|\n,;\t]+)?"
    )

    UNIVERSITY_OF: re.Pattern = re.compile(r"University of [^|\n\t]+")
    NAMED_INSTITUTION: re.Pattern = re.compile(
        r"(?:[A-Z][\w.&'-]*[ ]+)+(?:University|College|Institute)(?:[ ]+of[ ]+[^|\n\t]+)?"
    )


# =============================================================================
# EXPERIENCE PATTERNS
# =============================================================================


@dataclass(frozen=True)
class ExperiencePatterns:
    """Regex patterns for experience blocks."""

    # Split before a line containing a tab followed by a date range
    SPLIT_TAB_DATE: re.Pattern = re.compile(r"\n(?=[^\n]*\t\s*[A-Za-z]+\.?\s+\d{4}\s*[-–—])")

    # Split before a short line (<= 45 chars) immediately followed by a line starting with "|"
    SPLIT_PIPE_HEADER: re.Pattern = re.compile(r"\n(?=[A-Za-z][^\n]{0,44}\n[ \t]*\|)")

    ROLE_KEYWORDS: re.Pattern = re.compile(
        r"engineer|developer|lead|analyst|manager|designer|founder|architect", re.IGNORECASE
    )

    TECH_TOKENS: re.Pattern = re.compile(
        r"\b(?:AWS|Python|React|Node|TypeScript|Go|Java|SQL)\b|\bC#(?!\w)", re.IGNORECASE
    )

    # Residual section heading, e.g. "WORK EXPERIENCE"
    ALL_CAPS_LINE: re.Pattern = re.compile(r"^[A-Z\s&]+$")


MAX_COMPANY_LENGTH = 50
MAX_ROLE_LENGTH = 60
HEADER_LOOKAHEAD_LINES = 5
LOCATION_SEARCH_CHARS = 400


# =============================================================================
# PROJECT AND BULLET PATTERNS
# =============================================================================


@dataclass(frozen=True)
class ListPatterns:
    """Regex patterns for project headers and bullets."""

    # Split before "ShortTitle | something"
    PROJECT_START: re.Pattern = re.compile(r"\n(?=[A-Z][^\n|]{4,59}\s*\|\s*[A-Za-z])")

    PIPE_TAIL: re.Pattern = re.compile(r"\s*\|.*$")

    # Leading bullet glyph or list numbering
    BULLET_PREFIX: re.Pattern = re.compile(r"^(?:[•‣◦⁃∙▪●*-]|\d+[.)])\s*")


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================


def looks_like_location(text: str) -> bool:
    """
    Check whether a header fragment is a location.

    Accepts "City, ST", "City, State Name", or a bare gazetteer city,
    ignoring a dangling trailing pipe.
    """
    candidate = re.sub(r"\s*\|\s*$", "", text).strip()
    return bool(LocationPatterns.WHOLE_LOCATION.match(candidate))


def looks_like_role(text: str) -> bool:
    return bool(ExperiencePatterns.ROLE_KEYWORDS.search(text))


def looks_like_tech_or_skills(text: str) -> bool:
    """A comma-separated list or a line naming a common technology."""
    return "," in text or bool(ExperiencePatterns.TECH_TOKENS.search(text))


def looks_like_bullet(line: str) -> bool:
    return bool(ListPatterns.BULLET_PREFIX.match(line))


def extract_bullets(text: str) -> list[str]:
    """
    Turn a block of lines into bullet strings.

    Leading bullet glyphs and numbering are stripped. If stripping leaves
    nothing, every non-empty line is returned as-is.

    Example:
        >>> extract_bullets("• Built APIs\\n- Led team\\n")
        ['Built APIs', 'Led team']
    """
    lines = [line.strip() for line in text.split("\n") if line.strip()]
    bullets = []
    for line in lines:
        cleaned = ListPatterns.BULLET_PREFIX.sub("", line).strip()
        if cleaned:
            bullets.append(cleaned)
    return bullets if bullets else lines
