"""
Merge an OptimizedSections overlay into a ParsedResume.

Merge rules:
- contact, education and skills are replaced wholesale when the overlay
  section is present and non-empty.
- experience and projects are merged positionally: overlay entry i
  overrides the fields of original entry i that it sets. The original's
  entry count and order are kept; overlay entries beyond the original
  count are dropped.
- other_sections are always kept.
"""

from dataclasses import replace
from typing import List, Optional, Sequence

from tailor.contexts.optimization.logger import _log_warning
from tailor.contexts.optimization.optimized_sections import (
    ExperienceOverlay,
    OptimizedSections,
    ProjectOverlay,
)
from tailor.contexts.parsing.resume_data_structure import (
    ExperienceEntry,
    ParsedResume,
    ProjectEntry,
)


def _merge_experience(
    original: List[ExperienceEntry], overlay: Sequence[ExperienceOverlay]
) -> List[ExperienceEntry]:
    merged = []
    for i, entry in enumerate(original):
        patch = overlay[i] if i < len(overlay) else None
        if patch is None:
            merged.append(replace(entry, bullets=list(entry.bullets)))
            continue
        merged.append(
            ExperienceEntry(
                company=patch.company if patch.company is not None else entry.company,
                role=patch.role if patch.role is not None else entry.role,
                location=patch.location if patch.location is not None else entry.location,
                dates=patch.dates if patch.dates is not None else entry.dates,
                subheader=patch.subheader if patch.subheader is not None else entry.subheader,
                bullets=list(patch.bullets if patch.bullets is not None else entry.bullets),
            )
        )
    return merged


def _merge_projects(
    original: List[ProjectEntry], overlay: Sequence[ProjectOverlay]
) -> List[ProjectEntry]:
    merged = []
    for i, entry in enumerate(original):
        patch = overlay[i] if i < len(overlay) else None
        if patch is None:
            merged.append(replace(entry, bullets=list(entry.bullets)))
            continue
        merged.append(
            ProjectEntry(
                title=patch.title if patch.title is not None else entry.title,
                bullets=list(patch.bullets if patch.bullets is not None else entry.bullets),
            )
        )
    return merged


def _warn_dropped(section: str, original_count: int, overlay_count: int) -> None:
    if overlay_count > original_count:
        _log_warning(
            f"Dropping {overlay_count - original_count} extra {section} entries from overlay "
            f"(original has {original_count})"
        )


def apply_optimized_sections(
    parsed: ParsedResume, optimized: Optional[OptimizedSections]
) -> ParsedResume:
    """
    Apply an overlay to a parsed resume.

    Args:
        parsed: Original parsed resume (not modified)
        optimized: Overlay, or None for no changes

    Returns:
        New ParsedResume with the same number and order of experience and
        project entries as `parsed`

    Example:
        >>> original = ParsedResume(experience=[ExperienceEntry(company="Acme", dates="2020")])
        >>> overlay = OptimizedSections(experience=[ExperienceOverlay(bullets=["Shipped APIs"])])
        >>> merged = apply_optimized_sections(original, overlay)
        >>> merged.experience[0].company, merged.experience[0].bullets
        ('Acme', ['Shipped APIs'])
    """
    optimized = optimized or OptimizedSections()

    contact = parsed.contact
    if optimized.contact is not None and not optimized.contact.is_empty():
        contact = optimized.contact

    education = list(optimized.education) if optimized.education else list(parsed.education)
    skills = list(optimized.skills) if optimized.skills else list(parsed.skills)

    experience = list(parsed.experience)
    if optimized.experience:
        _warn_dropped("experience", len(parsed.experience), len(optimized.experience))
        experience = _merge_experience(parsed.experience, optimized.experience)

    projects = list(parsed.projects)
    if optimized.projects:
        _warn_dropped("project", len(parsed.projects), len(optimized.projects))
        projects = _merge_projects(parsed.projects, optimized.projects)

    return ParsedResume(
        contact=replace(contact),
        education=education,
        experience=experience,
        projects=projects,
        skills=skills,
        other_sections=dict(parsed.other_sections),
    )
