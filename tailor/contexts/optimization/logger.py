"""
Optimization context logger.

Provides logging interface for optimization context with automatic [optimize] prefix.
All optimization modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from tailor.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[optimize]"


def setup_optimization_logger(log_dir: Path, provider_name: str = None) -> Path:
    """
    Setup logger for optimization context.

    Args:
        log_dir: Directory for this optimization session
        provider_name: Resolved provider (e.g., "openai/gpt-4o-mini"), recorded in provenance

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="optimize",
        log_dir=log_dir,
        extra_provenance={"LLM provider": provider_name} if provider_name else None,
    )


# Wrapper functions with automatic [optimize] prefix


def _log_info(message: str) -> None:
    """Log info message with [optimize] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [optimize] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [optimize] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [optimize] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [optimize] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level optimization-specific logging helpers


def log_llm_call(provider_name: str, purpose: str, response) -> None:
    """
    Log a completed LLM call.

    Args:
        provider_name: Provider name (e.g., "openai/gpt-4o-mini")
        purpose: What the call was for (e.g., "keyword extraction")
        response: LLMResponse from the provider
    """
    _log_info(f"{purpose}: {provider_name}")
    _log_debug(f"  Tokens: {response.input_tokens} in / {response.output_tokens} out")


def log_overlay_summary(overlay) -> None:
    """Log which sections an OptimizedSections overlay revises."""
    present = [name for name, value in overlay.to_dict().items() if value]
    if present:
        _log_success(f"Optimizer revised: {', '.join(present)}")
    else:
        _log_warning("Optimizer returned no revised sections")
