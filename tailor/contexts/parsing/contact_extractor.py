"""
Contact block extraction.

Each field is resolved by an ordered list of pure strategies; the first
strategy returning a value wins (see utils.text_processing.first_match).
Absence is never an error.
"""

from typing import Optional

from tailor.contexts.parsing.patterns import (
    MIN_PHONE_DIGITS,
    ContactPatterns,
    LocationPatterns,
)
from tailor.contexts.parsing.resume_data_structure import Contact
from tailor.utils.text_processing import first_match, non_empty_lines, regex_strategy

MAX_NAME_LINE_LENGTH = 50


def _phone(text: str) -> Optional[str]:
    for match in ContactPatterns.PHONE_RUN.finditer(text):
        candidate = match.group(0).strip()
        if sum(c.isdigit() for c in candidate) >= MIN_PHONE_DIGITS:
            return candidate
    return None


def _linkedin(text: str) -> Optional[str]:
    match = ContactPatterns.LINKEDIN.search(text)
    if not match:
        return None
    return "https://" + match.group(0)


def _name_from_first_line(text: str) -> Optional[str]:
    """First line as name when it is short, has no '@', and is only letters and spaces."""
    lines = non_empty_lines(text)
    if not lines:
        return None
    first = lines[0]
    if (
        len(first) < MAX_NAME_LINE_LENGTH
        and "@" not in first
        and ContactPatterns.LETTERS_AND_SPACES.match(first)
    ):
        return first
    return None


EMAIL_STRATEGIES = (regex_strategy(ContactPatterns.EMAIL),)
PHONE_STRATEGIES = (_phone,)
LINKEDIN_STRATEGIES = (_linkedin,)
LOCATION_STRATEGIES = (
    regex_strategy(LocationPatterns.CITY_STATE_FULL),
    regex_strategy(LocationPatterns.CITY_STATE_ABBREV),
    regex_strategy(LocationPatterns.KNOWN_CITY),
)
NAME_STRATEGIES = (
    regex_strategy(ContactPatterns.NAME, group=1),
    _name_from_first_line,
)


def parse_contact_block(text: str) -> Contact:
    """
    Extract contact fields from a block of text.

    Args:
        text: The contact section, or the top lines of the document

    Returns:
        Contact with every field found; missing fields are None

    Example:
        >>> contact = parse_contact_block("Jane Doe\\njane@example.com | Seattle, WA")
        >>> contact.name, contact.email, contact.location
        ('Jane Doe', 'jane@example.com', 'Seattle, WA')
    """
    return Contact(
        name=first_match(NAME_STRATEGIES, text),
        email=first_match(EMAIL_STRATEGIES, text),
        phone=first_match(PHONE_STRATEGIES, text),
        location=first_match(LOCATION_STRATEGIES, text),
        linkedin=first_match(LINKEDIN_STRATEGIES, text),
    )


def top_lines(text: str, count: int) -> str:
    """Return the first `count` lines of text (blank lines included)."""
    return "\n".join(text.split("\n")[:count])
