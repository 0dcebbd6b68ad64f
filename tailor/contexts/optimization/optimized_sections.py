"""
Optimized sections overlay.

A sparse overlay over ParsedResume produced by the language-model rewriting
step. Any of contact, education, experience, projects and skills may be
present; an absent section (None) keeps the original.

The overlay arrives as untrusted JSON, so from_untrusted() validates the
shape before anything is merged.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, List, Optional

from tailor.contexts.parsing.resume_data_structure import Contact, EducationEntry

CONTACT_FIELDS = tuple(f.name for f in fields(Contact))
EDUCATION_FIELDS = ("school", "degree", "dates", "gpa")
EXPERIENCE_FIELDS = ("company", "role", "location", "dates", "subheader")


class InvalidOptimizerResponseError(ValueError):
    """
    Exception raised when an optimizer response does not have the overlay shape.

    Attributes:
        message: Error description
        path: Location of the offending value (e.g., 'experience[1].bullets')
    """

    def __init__(self, message: str, path: Optional[str] = None):
        self.message = message
        self.path = path
        super().__init__(f"{message} (at {path})" if path else message)


@dataclass
class ExperienceOverlay:
    """Overlay for one experience entry; every field optional, bullets included."""

    company: Optional[str] = None
    role: Optional[str] = None
    location: Optional[str] = None
    dates: Optional[str] = None
    subheader: Optional[str] = None
    bullets: Optional[List[str]] = None

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass
class ProjectOverlay:
    """Overlay for one project entry."""

    title: Optional[str] = None
    bullets: Optional[List[str]] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"title": self.title, "bullets": self.bullets}


@dataclass
class OptimizedSections:
    """
    Sparse overlay over a ParsedResume.

    Attributes:
        contact: Replacement contact (used when not empty)
        education: Replacement education list (used when non-empty)
        experience: Positional overlays for experience entries
        projects: Positional overlays for project entries
        skills: Replacement skills list (used when non-empty)
    """

    contact: Optional[Contact] = None
    education: Optional[List[EducationEntry]] = None
    experience: Optional[List[ExperienceOverlay]] = None
    projects: Optional[List[ProjectOverlay]] = None
    skills: Optional[List[str]] = None

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))

    def to_dict(self) -> Dict[str, Any]:
        """Plain-container form; absent sections are omitted."""
        data: Dict[str, Any] = {}
        if self.contact is not None:
            data["contact"] = self.contact.to_dict()
        if self.education is not None:
            data["education"] = [entry.to_dict() for entry in self.education]
        if self.experience is not None:
            data["experience"] = [entry.to_dict() for entry in self.experience]
        if self.projects is not None:
            data["projects"] = [entry.to_dict() for entry in self.projects]
        if self.skills is not None:
            data["skills"] = list(self.skills)
        return data

    @classmethod
    def from_untrusted(cls, data: Any) -> "OptimizedSections":
        """
        Validate and build an overlay from decoded JSON.

        Unknown keys are ignored. Null sections and null fields count as absent.

        Args:
            data: Decoded JSON value (expected: an object)

        Returns:
            OptimizedSections

        Raises:
            InvalidOptimizerResponseError: If any present value has the wrong shape
        """
        if data is None:
            return cls()
        mapping = _require_dict(data, "optimizedSections")

        overlay = cls()
        if mapping.get("contact") is not None:
            contact = _require_dict(mapping["contact"], "contact")
            overlay.contact = Contact(
                **{name: _optional_text(contact.get(name), f"contact.{name}") for name in CONTACT_FIELDS}
            )

        if mapping.get("education") is not None:
            overlay.education = [
                _education_entry(item, f"education[{i}]")
                for i, item in enumerate(_require_list(mapping["education"], "education"))
            ]

        if mapping.get("experience") is not None:
            overlay.experience = [
                _experience_overlay(item, f"experience[{i}]")
                for i, item in enumerate(_require_list(mapping["experience"], "experience"))
            ]

        if mapping.get("projects") is not None:
            overlay.projects = [
                _project_overlay(item, f"projects[{i}]")
                for i, item in enumerate(_require_list(mapping["projects"], "projects"))
            ]

        if mapping.get("skills") is not None:
            overlay.skills = _text_list(mapping["skills"], "skills")

        return overlay

    from_dict = from_untrusted


# --- Shape validation helpers ---


def _require_dict(value: Any, path: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise InvalidOptimizerResponseError(f"Expected an object, got {type(value).__name__}", path)
    return value


def _require_list(value: Any, path: str) -> List[Any]:
    if not isinstance(value, list):
        raise InvalidOptimizerResponseError(f"Expected a list, got {type(value).__name__}", path)
    return value


def _optional_text(value: Any, path: str) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise InvalidOptimizerResponseError(f"Expected a string, got {type(value).__name__}", path)
    return str(value)


def _text_list(value: Any, path: str) -> List[str]:
    items = _require_list(value, path)
    result = []
    for i, item in enumerate(items):
        if not isinstance(item, str):
            raise InvalidOptimizerResponseError(
                f"Expected a string, got {type(item).__name__}", f"{path}[{i}]"
            )
        result.append(item)
    return result


def _education_entry(value: Any, path: str) -> EducationEntry:
    item = _require_dict(value, path)
    raw_text = item.get("raw_text", item.get("rawText"))
    return EducationEntry(
        **{name: _optional_text(item.get(name), f"{path}.{name}") for name in EDUCATION_FIELDS},
        raw_text=_optional_text(raw_text, f"{path}.raw_text"),
    )


def _experience_overlay(value: Any, path: str) -> ExperienceOverlay:
    item = _require_dict(value, path)
    bullets = item.get("bullets")
    return ExperienceOverlay(
        **{name: _optional_text(item.get(name), f"{path}.{name}") for name in EXPERIENCE_FIELDS},
        bullets=None if bullets is None else _text_list(bullets, f"{path}.bullets"),
    )


def _project_overlay(value: Any, path: str) -> ProjectOverlay:
    item = _require_dict(value, path)
    bullets = item.get("bullets")
    return ProjectOverlay(
        title=_optional_text(item.get("title"), f"{path}.title"),
        bullets=None if bullets is None else _text_list(bullets, f"{path}.bullets"),
    )
