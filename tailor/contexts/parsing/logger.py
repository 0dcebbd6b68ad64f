"""
Parsing context logger.

Provides logging interface for parsing context with automatic [parse] prefix.
All parsing modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from tailor.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[parse]"


def setup_parsing_logger(log_dir: Path, source: Optional[Path] = None) -> Path:
    """
    Setup logger for parsing context.

    Args:
        log_dir: Directory for this parsing session
        source: Resume file being parsed (recorded in provenance)

    Returns:
        Path to log file

    Example:
        from tailor.contexts.parsing.logger import setup_parsing_logger

        log_file = setup_parsing_logger(log_dir, source=Path("resume.docx"))
    """
    return _setup_logger(
        context_name="parse",
        log_dir=log_dir,
        extra_provenance={"Source": source} if source else None,
    )


# Wrapper functions with automatic [parse] prefix


def _log_info(message: str) -> None:
    """Log info message with [parse] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [parse] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [parse] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [parse] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level parsing-specific logging helpers


def log_sections_found(strategy: str, titles: list) -> None:
    """Log which segmentation strategy ran and the section titles it produced."""
    _log_debug(f"{strategy}: {len(titles)} sections")
    for title in titles:
        _log_debug(f"  - {title!r}")


def log_parse_summary(resume) -> None:
    """
    Log entry counts for a finished parse.

    Args:
        resume: ParsedResume returned by parse_markup_to_resume()
    """
    _log_success(
        f"Parsed resume: {len(resume.education)} education, "
        f"{len(resume.experience)} experience, {len(resume.projects)} projects, "
        f"{len(resume.skills)} skills"
    )
    if resume.other_sections:
        _log_debug(f"  Unrecognized sections: {', '.join(resume.other_sections)}")
    if resume.contact.name is None and resume.contact.email is None:
        _log_warning("No name or email found in contact block")
