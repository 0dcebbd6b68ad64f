"""Skills section extraction."""

import re
from typing import List


def parse_skills_block(text: str) -> List[str]:
    """
    Split a skills section into individual skills.

    Newlines act as commas. Skills are trimmed, empty items dropped, and
    duplicates removed keeping the first appearance.

    Example:
        >>> parse_skills_block("Python, Java\\nAWS,, Python")
        ['Python', 'Java', 'AWS']
    """
    normalized = re.sub(r",+", ",", text.replace("\n", ","))
    skills: List[str] = []
    for item in normalized.split(","):
        skill = item.strip()
        if skill and skill not in skills:
            skills.append(skill)
    return skills
