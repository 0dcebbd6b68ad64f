"""
Resume Data Structure

Structured representation of a parsed resume. This structure is the interface
between the Parsing context (which builds it), the Analysis context (which reads
its text), and the Templating context (which flattens it into placeholders).

Every optional field uses None for "absent". An empty string is a value that was
present but empty; extractors never produce one for a missing field.
"""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional

DEFAULT_RESUME_ID = "default"


def _optional_str(value: Any) -> Optional[str]:
    """Coerce a loaded value to Optional[str] without turning None into 'None'."""
    if value is None:
        return None
    return str(value)


def _str_list(value: Any) -> List[str]:
    if not value:
        return []
    return [str(item) for item in value]


def _pick(data: Dict[str, Any], *keys: str) -> Any:
    """Return the first key present in data (snake_case first, camelCase alias second)."""
    for key in keys:
        if key in data:
            return data[key]
    return None


@dataclass
class Contact:
    """Contact block. No field is required."""

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    linkedin: Optional[str] = None

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))

    def merged_with(self, other: "Contact") -> "Contact":
        """Return a copy where fields set on `other` override this contact's."""
        values = {
            f.name: getattr(other, f.name)
            if getattr(other, f.name) is not None
            else getattr(self, f.name)
            for f in fields(self)
        }
        return Contact(**values)

    def filled_from(self, other: "Contact") -> "Contact":
        """Return a copy where only this contact's missing fields are taken from `other`."""
        return other.merged_with(self)

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "Contact":
        data = data or {}
        return cls(**{f.name: _optional_str(data.get(f.name)) for f in fields(cls)})


@dataclass
class EducationEntry:
    """
    One education entry.

    Attributes:
        school: Institution name
        degree: Degree phrase (e.g., "Bachelor of Science in Computer Science")
        dates: Date range as written
        gpa: GPA number as written (kept as text, e.g., "3.90")
        raw_text: The whole unparsed block; always set by the extractor
    """

    school: Optional[str] = None
    degree: Optional[str] = None
    dates: Optional[str] = None
    gpa: Optional[str] = None
    raw_text: Optional[str] = None

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EducationEntry":
        return cls(
            school=_optional_str(data.get("school")),
            degree=_optional_str(data.get("degree")),
            dates=_optional_str(data.get("dates")),
            gpa=_optional_str(data.get("gpa")),
            raw_text=_optional_str(_pick(data, "raw_text", "rawText")),
        )


@dataclass
class ExperienceEntry:
    """
    One job.

    Attributes:
        company: Employer name
        role: Job title
        location: "City, ST" or similar
        dates: Date range as written
        subheader: Free-text line under the role (e.g., tech stack list)
        bullets: Ordered bullet strings (possibly empty, never None)
    """

    company: Optional[str] = None
    role: Optional[str] = None
    location: Optional[str] = None
    dates: Optional[str] = None
    subheader: Optional[str] = None
    bullets: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "company": self.company,
            "role": self.role,
            "location": self.location,
            "dates": self.dates,
            "subheader": self.subheader,
            "bullets": list(self.bullets),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ExperienceEntry":
        return cls(
            company=_optional_str(data.get("company")),
            role=_optional_str(data.get("role")),
            location=_optional_str(data.get("location")),
            dates=_optional_str(data.get("dates")),
            subheader=_optional_str(data.get("subheader")),
            bullets=_str_list(data.get("bullets")),
        )


@dataclass
class ProjectEntry:
    """One project: optional title plus ordered bullets."""

    title: Optional[str] = None
    bullets: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"title": self.title, "bullets": list(self.bullets)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ProjectEntry":
        return cls(title=_optional_str(data.get("title")), bullets=_str_list(data.get("bullets")))


@dataclass
class ParsedResume:
    """
    Root aggregate for a parsed resume.

    Constructed fresh on every parse. Each section extractor returns a complete
    replacement list for its section; nothing is mutated incrementally.

    Attributes:
        contact: Contact block
        education: Education entries in document order
        experience: Experience entries in document order
        projects: Project entries in document order
        skills: Skills in order of first appearance (compared as a set)
        other_sections: Unrecognized section title -> raw text
    """

    contact: Contact = field(default_factory=Contact)
    education: List[EducationEntry] = field(default_factory=list)
    experience: List[ExperienceEntry] = field(default_factory=list)
    projects: List[ProjectEntry] = field(default_factory=list)
    skills: List[str] = field(default_factory=list)
    other_sections: Dict[str, str] = field(default_factory=dict)

    def search_text(self) -> str:
        """
        Flatten the resume into the text used for keyword comparison.

        Includes contact name/email, skills, every experience company/role/bullet,
        every project title/bullet, and each education entry's raw text (or
        school + degree when no raw text was kept).
        """
        parts: List[Optional[str]] = [self.contact.name, self.contact.email, " ".join(self.skills)]
        for job in self.experience:
            parts.extend([job.company, job.role, *job.bullets])
        for project in self.projects:
            parts.extend([project.title, *project.bullets])
        for entry in self.education:
            if entry.raw_text is not None:
                parts.append(entry.raw_text)
            else:
                parts.append(" ".join(p for p in (entry.school, entry.degree) if p))
        return " ".join(part for part in parts if part)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "contact": self.contact.to_dict(),
            "education": [entry.to_dict() for entry in self.education],
            "experience": [entry.to_dict() for entry in self.experience],
            "projects": [entry.to_dict() for entry in self.projects],
            "skills": list(self.skills),
            "other_sections": dict(self.other_sections),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ParsedResume":
        other = _pick(data, "other_sections", "otherSections") or {}
        return cls(
            contact=Contact.from_dict(data.get("contact")),
            education=[EducationEntry.from_dict(e) for e in data.get("education") or []],
            experience=[ExperienceEntry.from_dict(e) for e in data.get("experience") or []],
            projects=[ProjectEntry.from_dict(p) for p in data.get("projects") or []],
            skills=_str_list(data.get("skills")),
            other_sections={str(k): str(v) for k, v in other.items()},
        )
