"""
Markup normalizer for the Parsing context.

Turns the block markup produced by docx_to_markup() into plain text before
section segmentation. Paragraph, list-item, heading and table-row boundaries
become newlines; every other tag is dropped.

Design principle: Normalize BEFORE parsing. The extractors only ever see
plain text with "\\n" line boundaries.
"""

import re

# Block boundaries that become line breaks
LINE_BREAK_PATTERNS = (
    r"<br\s*/?>",
    r"</p>",
    r"</li>",
    r"</h[1-6]>",
    r"</tr>",
)

# Entities decoded after tag removal; &amp; must stay last
ENTITY_REPLACEMENTS = (
    ("&nbsp;", " "),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&amp;", "&"),
)

_LINE_BREAKS = re.compile("|".join(LINE_BREAK_PATTERNS), re.IGNORECASE)
_ANY_TAG = re.compile(r"<[^>]+>")


def normalize_line_endings(text: str) -> str:
    """Convert CRLF and lone CR to LF."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def decode_entities(text: str) -> str:
    """
    Decode the fixed entity set.

    Example:
        >>> decode_entities("R&amp;D &lt;team&gt;")
        'R&D <team>'
    """
    for entity, char in ENTITY_REPLACEMENTS:
        text = text.replace(entity, char)
    return text


def strip_markup(markup: str) -> str:
    """
    Strip markup to plain text.

    Block boundaries become newlines, remaining tags are removed, and
    &nbsp; &lt; &gt; &amp; are decoded. Text is not trimmed. Plain text
    without tags, entities or carriage returns comes back unchanged.

    Args:
        markup: Block markup (or plain text)

    Returns:
        Plain text with one line per paragraph or list item

    Example:
        >>> strip_markup("<h1>SKILLS</h1><p>Python, Go</p>")
        'SKILLS\\nPython, Go\\n'
    """
    text = _LINE_BREAKS.sub("\n", markup)
    text = normalize_line_endings(text)
    text = _ANY_TAG.sub("", text)
    return decode_entities(text)
