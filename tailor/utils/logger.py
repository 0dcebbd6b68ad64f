"""
Session logging for TAILOR scripts.

Each script run writes one log directory, e.g. outs/logs/export_20260114_183040/,
holding a {context}.log file with every DEBUG message, while INFO and above are
echoed to the console. The first lines of each log record where the run came
from (command, working directory, data and template locations).

Library modules never configure sinks. They log through the wrappers in
contexts/{context}/logger.py; scripts call the matching setup function.
"""

import os
import sys
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv
from loguru import logger

from tailor import __version__

load_dotenv()

CONSOLE_LEVEL = os.getenv("TAILOR_LOG_LEVEL", "INFO").upper()

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "<dim>{time:HH:mm:ss}</dim> | <level>{level: <7}</level> | <level>{message}</level>"

# Console colors per level; SUCCESS and DEBUG keep loguru's defaults
LEVEL_COLORS = {
    "INFO": "<white>",
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}

# Environment settings worth recording at the top of every log
PROVENANCE_ENV = ("TAILOR_DATA_PATH", "TEMPLATE_DOCX_PATH", "PAYLOAD_LIMITS_PATH", "LLM_MODEL")


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: Optional[Dict[str, object]] = None,
    console_level: Optional[str] = None,
) -> Path:
    """
    Route loguru output to a per-session file and the console.

    Any previously added sinks are removed, so calling this twice in one
    process starts a fresh session.

    Args:
        context_name: Log file stem (e.g., "parse", "template", "optimize")
        log_dir: Session directory, created if missing
        extra_provenance: Extra key-value pairs for the provenance header
        console_level: Console threshold (default: TAILOR_LOG_LEVEL or INFO)

    Returns:
        Path to the log file

    Example:
        log_file = setup_logger(
            context_name="template",
            log_dir=Path("outs/logs/export_20260114_123456"),
            extra_provenance={"Phase": "export"},
        )
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    for level_name, color in LEVEL_COLORS.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG", encoding="utf-8")
    logger.add(
        sys.stderr,
        format=CONSOLE_FORMAT,
        level=(console_level or CONSOLE_LEVEL).upper(),
        colorize=True,
    )

    log_provenance(context_name, extra_provenance)
    return log_file


def log_provenance(context_name: str, extra_context: Optional[Dict[str, object]] = None) -> None:
    """Write the run header: version, command line, cwd and configured paths."""
    logger.info("=" * 80)
    logger.info(f"TAILOR {__version__} ({context_name})")
    logger.info(f"Command: {' '.join(sys.argv)}")
    logger.info(f"Working directory: {Path.cwd()}")
    logger.info(f"Python: {sys.version.split()[0]}")

    for name in PROVENANCE_ENV:
        value = os.getenv(name)
        if value:
            logger.info(f"{name}: {value}")

    for key, value in (extra_context or {}).items():
        logger.info(f"{key}: {value}")

    logger.info("=" * 80)
