"""
Default values for template payload generation.

Caps on how many entries of each section the template has slots for.
Overridable through a YAML file (see config_resolver.py).
"""

from typing import Any, Dict

# Slot counts matching the layout of the generated template
DEFAULT_PAYLOAD_LIMITS = {
    "education": {"entries": 2},
    "experience": {"entries": 3, "bullets": 4},
    "projects": {"entries": 2, "bullets": 2},
}

# Section headings used when generating a document from scratch
FALLBACK_HEADINGS = {
    "education": "EDUCATION",
    "experience": "PROFESSIONAL EXPERIENCE",
    "projects": "PROJECTS & OUTSIDE EXPERIENCE",
    "skills": "SKILLS",
}

FALLBACK_TITLE = "Resume"
CONTACT_SEPARATOR = "  |  "
BULLET_PREFIX = "• "


def get_default_payload_limits() -> Dict[str, Any]:
    """Return a fresh copy of the default payload limits."""
    return {section: dict(limits) for section, limits in DEFAULT_PAYLOAD_LIMITS.items()}
