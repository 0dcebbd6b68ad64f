"""
Text processing utilities shared across contexts.
"""

import re
from typing import Callable, Iterable, List, Optional

Strategy = Callable[[str], Optional[str]]

XML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
)


def first_match(strategies: Iterable[Strategy], text: str) -> Optional[str]:
    """
    Run extraction strategies in order and return the first non-empty result.

    Each strategy is a pure function of the input text returning either a value
    or None. Strategies never see each other's results.

    Args:
        strategies: Ordered strategy callables
        text: Text handed unchanged to every strategy

    Returns:
        First value that is not None or empty, otherwise None

    Example:
        >>> first_match([lambda t: None, lambda t: t.upper()], "abc")
        'ABC'
    """
    for strategy in strategies:
        value = strategy(text)
        if value:
            return value
    return None


def regex_strategy(pattern: re.Pattern, group: int = 0) -> Strategy:
    """
    Build a strategy returning the stripped group of the first regex match.

    Example:
        >>> find_year = regex_strategy(re.compile(r"\\d{4}"))
        >>> find_year("since 2019")
        '2019'
    """

    def strategy(text: str) -> Optional[str]:
        match = pattern.search(text)
        if not match:
            return None
        return match.group(group).strip() or None

    return strategy


def non_empty_lines(text: str) -> List[str]:
    """Split text on newlines and return the stripped, non-empty lines."""
    return [line.strip() for line in text.split("\n") if line.strip()]


def collapse_whitespace(text: str) -> str:
    """Collapse runs of whitespace into single spaces and trim."""
    return re.sub(r"\s+", " ", text).strip()


def replace_first(text: str, old: str, new: str) -> str:
    """
    Replace only the first occurrence of `old` in `text`.

    Example:
        >>> replace_first("a-b-a", "a", "X")
        'X-b-a'
    """
    index = text.find(old)
    if index == -1:
        return text
    return text[:index] + new + text[index + len(old):]


def escape_xml(text: str) -> str:
    """
    Escape the five XML special characters.

    Example:
        >>> escape_xml('R&D <"lead">')
        'R&amp;D &lt;&quot;lead&quot;&gt;'
    """
    for char, entity in XML_ESCAPES:
        text = text.replace(char, entity)
    return text


def escape_xml_text(text: str) -> str:
    """Escape only the characters Word escapes inside text nodes (& < >)."""
    for char, entity in XML_ESCAPES[:3]:
        text = text.replace(char, entity)
    return text


def truncate_display(text: str, max_len: int) -> str:
    """
    Truncate text for display with ellipsis if needed.

    Example:
        >>> truncate_display("this is a very long string", 10)
        'this is...'
    """
    return text if len(text) <= max_len else text[: max_len - 3] + "..."
