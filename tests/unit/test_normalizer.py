"""Unit tests for markup normalization."""

import pytest

from tailor.contexts.parsing.normalizer import decode_entities, strip_markup


@pytest.mark.unit
class TestStripMarkup:
    """Tests for strip_markup()."""

    def test_block_boundaries_become_newlines(self):
        """Paragraph, list item, heading and break boundaries each end a line."""
        markup = "<h1>SKILLS</h1><p>Python</p><ul><li>Go</li></ul>a<br />b"
        assert strip_markup(markup) == "SKILLS\nPython\nGo\na\nb"

    def test_table_rows_end_lines(self):
        assert strip_markup("<tr><td>A</td><td>B</td></tr><tr><td>C</td></tr>") == "AB\nC\n"

    def test_entities_decoded(self):
        assert strip_markup("<p>R&amp;D&nbsp;&lt;team&gt;</p>") == "R&D <team>\n"

    def test_double_escaped_ampersand_decoded_once(self):
        """&amp; is decoded last, so &amp;lt; becomes the text '&lt;'."""
        assert strip_markup("a &amp;lt; b") == "a &lt; b"

    def test_crlf_normalized(self):
        assert strip_markup("one\r\ntwo\rthree") == "one\ntwo\nthree"

    def test_plain_text_unchanged(self):
        """Text with no tags, entities or carriage returns is returned as-is."""
        text = "  Jane Doe\nSeattle, WA\t2024  "
        assert strip_markup(text) == text

    def test_idempotent_on_output(self):
        once = strip_markup("<p>Built APIs</p><p>Led team</p>")
        assert strip_markup(once) == once


@pytest.mark.unit
def test_decode_entities_fixed_set_only():
    """Entities outside the fixed set are left alone."""
    assert decode_entities("&quot;x&quot; &amp; y") == "&quot;x&quot; & y"
