"""
Template payload construction.

Flattens a resume into the dotted keys used by template placeholders:

    contact.name, contact.email, contact.phone, contact.location, contact.linkedin
    education.{i}.school|degree|dates|gpa
    experience.{i}.company|role|location|dates|subheader
    experience.{i}.bullet.{j}
    projects.{i}.title
    projects.{i}.bullet.{j}
    skills

Every slot up to the configured caps is present. Slots beyond the data
resolve to "".
"""

from typing import Dict, List, Optional

from tailor.contexts.optimization.merge import apply_optimized_sections
from tailor.contexts.optimization.optimized_sections import OptimizedSections
from tailor.contexts.parsing.resume_data_structure import ParsedResume
from tailor.contexts.templating.config_resolver import PayloadLimits, load_payload_limits

TemplatePayload = Dict[str, str]

CONTACT_KEYS = ("name", "email", "phone", "location", "linkedin")
EDUCATION_KEYS = ("school", "degree", "dates", "gpa")
EXPERIENCE_KEYS = ("company", "role", "location", "dates", "subheader")


def placeholder(key: str) -> str:
    """
    Wrap a payload key in placeholder delimiters.

    Example:
        >>> placeholder("experience.0.bullet.1")
        '{{experience.0.bullet.1}}'
    """
    return "{{" + key + "}}"


def _slot(values: List, index: int):
    return values[index] if index < len(values) else None


def _text(value: Optional[str]) -> str:
    return value if value is not None else ""


def flatten_resume(resume: ParsedResume, limits: PayloadLimits) -> TemplatePayload:
    """Flatten an already merged resume into a capped payload."""
    payload: TemplatePayload = {}

    for key in CONTACT_KEYS:
        payload[f"contact.{key}"] = _text(getattr(resume.contact, key))

    for i in range(limits.education_entries):
        entry = _slot(resume.education, i)
        for key in EDUCATION_KEYS:
            payload[f"education.{i}.{key}"] = _text(getattr(entry, key)) if entry else ""

    for i in range(limits.experience_entries):
        job = _slot(resume.experience, i)
        for key in EXPERIENCE_KEYS:
            payload[f"experience.{i}.{key}"] = _text(getattr(job, key)) if job else ""
        bullets = job.bullets if job else []
        for j in range(limits.experience_bullets):
            payload[f"experience.{i}.bullet.{j}"] = _text(_slot(bullets, j))

    for i in range(limits.project_entries):
        project = _slot(resume.projects, i)
        payload[f"projects.{i}.title"] = _text(project.title) if project else ""
        bullets = project.bullets if project else []
        for j in range(limits.project_bullets):
            payload[f"projects.{i}.bullet.{j}"] = _text(_slot(bullets, j))

    payload["skills"] = ", ".join(resume.skills)
    return payload


def build_template_payload(
    parsed: ParsedResume,
    optimized: Optional[OptimizedSections] = None,
    limits: Optional[PayloadLimits] = None,
) -> TemplatePayload:
    """
    Build the flat placeholder payload for a resume.

    The overlay is merged first (see optimization.merge), then the result is
    flattened with the configured caps.

    Args:
        parsed: Parsed resume
        optimized: Optional overlay
        limits: Slot caps (default: load_payload_limits())

    Returns:
        Dict with every capped key present

    Example:
        >>> payload = build_template_payload(ParsedResume(skills=["Python", "Go"]))
        >>> payload["skills"], payload["experience.2.bullet.3"]
        ('Python, Go', '')
    """
    if limits is None:
        limits = load_payload_limits()
    return flatten_resume(apply_optimized_sections(parsed, optimized), limits)
