"""
File-backed store for parsed resumes and their optimized overlays.

One YAML file per resume id under the data directory:

    {TAILOR_DATA_PATH}/resumes/{resume_id}.yaml

The resume id is derived from the contact phone (see resume_id_from_phone).
"""

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from omegaconf import OmegaConf

from tailor.contexts.optimization.optimized_sections import OptimizedSections
from tailor.contexts.parsing.resume_data_structure import DEFAULT_RESUME_ID, ParsedResume
from tailor.utils.timestamp import now_exact

load_dotenv()
DATA_PATH = Path(os.getenv("TAILOR_DATA_PATH", "data"))

MIN_ID_DIGITS = 10


def resume_id_from_phone(phone: Optional[str]) -> str:
    """
    Derive a resume id from a phone number.

    Examples:
        >>> resume_id_from_phone("(206) 555-0100")
        '2065550100'
        >>> resume_id_from_phone("555-0100")
        'default'
        >>> resume_id_from_phone(None)
        'default'
    """
    digits = re.sub(r"\D", "", phone or "")
    return digits if len(digits) >= MIN_ID_DIGITS else DEFAULT_RESUME_ID


@dataclass
class StoredResume:
    """
    One stored record.

    Attributes:
        resume_id: Store key
        parsed: Parsed resume as uploaded
        file_path: Original upload path, if known
        optimized: Latest optimized overlay, if any
        updated_at: ISO timestamp of the last write
    """

    resume_id: str
    parsed: ParsedResume
    file_path: Optional[str] = None
    optimized: Optional[OptimizedSections] = None
    updated_at: Optional[str] = None


class ResumeStore:
    """
    YAML-file store keyed by resume id.

    Example:
        store = ResumeStore(Path("data"))
        store.save_resume("2065550100", parsed, file_path="uploads/resume.docx")
        record = store.get_resume("2065550100")
    """

    def __init__(self, base_dir: Path = None):
        if base_dir is None:
            base_dir = DATA_PATH
        self.base_dir = Path(base_dir) / "resumes"

    def _path(self, resume_id: str) -> Path:
        return self.base_dir / f"{resume_id}.yaml"

    def _write(self, record: StoredResume) -> None:
        self.base_dir.mkdir(parents=True, exist_ok=True)
        data = {
            "resume_id": record.resume_id,
            "file_path": record.file_path,
            "updated_at": now_exact(),
            "parsed": record.parsed.to_dict(),
            "optimized": record.optimized.to_dict() if record.optimized is not None else None,
        }
        OmegaConf.save(OmegaConf.create(data), self._path(record.resume_id))

    def save_resume(
        self, resume_id: str, parsed: ParsedResume, file_path: Optional[str] = None
    ) -> Path:
        """
        Store a freshly parsed resume, clearing any previous overlay.

        Returns:
            Path to the written YAML file
        """
        self._write(StoredResume(resume_id=resume_id, parsed=parsed, file_path=file_path))
        return self._path(resume_id)

    def get_resume(self, resume_id: str) -> Optional[StoredResume]:
        """Load a stored record, or None if the id is unknown."""
        path = self._path(resume_id)
        if not path.exists():
            return None

        data = OmegaConf.to_container(OmegaConf.load(path), resolve=False)
        optimized = data.get("optimized")
        return StoredResume(
            resume_id=data.get("resume_id", resume_id),
            parsed=ParsedResume.from_dict(data.get("parsed") or {}),
            file_path=data.get("file_path"),
            optimized=OptimizedSections.from_dict(optimized) if optimized is not None else None,
            updated_at=data.get("updated_at"),
        )

    def save_optimized(self, resume_id: str, optimized: OptimizedSections) -> Path:
        """
        Attach an optimized overlay to a stored resume.

        Raises:
            KeyError: If no resume is stored under resume_id
        """
        record = self.get_resume(resume_id)
        if record is None:
            raise KeyError(f"No stored resume with id '{resume_id}'")
        record.optimized = optimized
        self._write(record)
        return self._path(resume_id)
