"""Unit tests for contact block extraction."""

import pytest

from tailor.contexts.parsing.contact_extractor import parse_contact_block, top_lines


@pytest.mark.unit
class TestParseContactBlock:
    """Tests for parse_contact_block()."""

    def test_full_contact_line(self):
        text = (
            "Jane Doe\n"
            "jane.doe@example.com | (206) 555-0100 | Seattle, WA | linkedin.com/in/janedoe"
        )
        contact = parse_contact_block(text)

        assert contact.name == "Jane Doe"
        assert contact.email == "jane.doe@example.com"
        assert contact.phone == "(206) 555-0100"
        assert contact.location == "Seattle, WA"
        assert contact.linkedin == "https://linkedin.com/in/janedoe"

    def test_short_digit_run_is_not_a_phone(self):
        contact = parse_contact_block("Jane Doe\nExt 555-0100")
        assert contact.phone is None

    def test_full_state_name_location(self):
        contact = parse_contact_block("Portland, Oregon")
        assert contact.location == "Portland, Oregon"

    def test_gazetteer_city_alone(self):
        contact = parse_contact_block("Open to Remote roles")
        assert contact.location == "Remote"

    def test_name_pattern_with_three_words(self):
        contact = parse_contact_block("Mary Ann Smith | mary@example.com")
        assert contact.name == "Mary Ann Smith"

    def test_name_falls_back_to_short_letter_only_first_line(self):
        contact = parse_contact_block("JANE DOE\njane@example.com")
        assert contact.name == "JANE DOE"

    def test_first_line_with_at_sign_is_not_a_name(self):
        contact = parse_contact_block("jane@example.com\n(206) 555-0100")
        assert contact.name is None

    def test_absent_fields_are_none(self):
        """Absence is represented as None, never as an empty string."""
        contact = parse_contact_block("")
        assert contact.is_empty()
        assert contact.to_dict() == {
            "name": None,
            "email": None,
            "phone": None,
            "location": None,
            "linkedin": None,
        }


@pytest.mark.unit
def test_top_lines_keeps_blank_lines():
    assert top_lines("a\n\nb\nc", 2) == "a\n"
