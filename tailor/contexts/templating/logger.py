"""
Templating context logger.

Provides logging interface for templating context with automatic [template] prefix.
All templating modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from tailor.utils.logger import setup_logger as _setup_logger
from tailor.utils.text_processing import truncate_display

CONTEXT_PREFIX = "[template]"


def setup_templating_logger(log_dir: Path, phase: str = "export") -> Path:
    """
    Setup logger for templating context.

    Args:
        log_dir: Directory for this templating session
        phase: Phase name for provenance ("build" or "export")

    Returns:
        Path to log file

    Example:
        from tailor.contexts.templating.logger import setup_templating_logger, _log_info

        log_file = setup_templating_logger(log_dir, phase="build")
        _log_info("Injecting placeholders...")
    """
    return _setup_logger(
        context_name="template",
        log_dir=log_dir,
        extra_provenance={"Phase": phase},
    )


# Wrapper functions with automatic [template] prefix


def _log_info(message: str) -> None:
    """Log info message with [template] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [template] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [template] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level templating-specific logging helpers


def log_value_not_found(placeholder: str, value: str) -> None:
    """Log a replacement whose literal value is not in the document."""
    _log_debug(f"Not found for {placeholder}: {truncate_display(value, 40)!r}")


def log_injection_summary(applied: int, total: int) -> None:
    _log_info(f"Injected {applied}/{total} placeholders (first occurrence each)")
    if applied < total:
        _log_debug(f"  {total - applied} values not found in document text")


def log_fill_summary(patched: int, raw_replaced: int) -> None:
    """Log how many placeholders each fill pass replaced."""
    _log_info(f"Patch pass replaced {patched} placeholders")
    _log_info(f"Raw pass replaced {raw_replaced} remaining placeholders")
