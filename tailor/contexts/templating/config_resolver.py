"""
Payload limit resolution.

Merges optional YAML overrides over the default payload limits:

    # configs/payload_limits.yaml
    experience:
      entries: 3
      bullets: 5

The override file comes from the argument or the PAYLOAD_LIMITS_PATH
environment variable. Without either, the defaults are used.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from omegaconf import OmegaConf

from tailor.contexts.templating.defaults import get_default_payload_limits

load_dotenv()


@dataclass(frozen=True)
class PayloadLimits:
    """Number of template slots per section."""

    education_entries: int = 2
    experience_entries: int = 3
    experience_bullets: int = 4
    project_entries: int = 2
    project_bullets: int = 2


def load_payload_limits(config_path: Optional[Path] = None) -> PayloadLimits:
    """
    Load payload limits, applying YAML overrides over the defaults.

    Args:
        config_path: Optional override file (defaults to PAYLOAD_LIMITS_PATH env variable)

    Returns:
        PayloadLimits

    Raises:
        ValueError: If a resolved limit is negative
    """
    if config_path is None and os.getenv("PAYLOAD_LIMITS_PATH"):
        config_path = Path(os.getenv("PAYLOAD_LIMITS_PATH"))

    merged = OmegaConf.create(get_default_payload_limits())
    if config_path is not None:
        merged = OmegaConf.merge(merged, OmegaConf.load(config_path))
    limits = OmegaConf.to_container(merged, resolve=True)

    resolved = PayloadLimits(
        education_entries=int(limits["education"]["entries"]),
        experience_entries=int(limits["experience"]["entries"]),
        experience_bullets=int(limits["experience"]["bullets"]),
        project_entries=int(limits["projects"]["entries"]),
        project_bullets=int(limits["projects"]["bullets"]),
    )
    for name, value in vars(resolved).items():
        if value < 0:
            raise ValueError(f"Payload limit '{name}' must not be negative (got {value})")
    return resolved
