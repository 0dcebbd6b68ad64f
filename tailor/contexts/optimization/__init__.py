"""
Optimization Context

Responsibilities:
- Asks a language model for job keywords and sparse resume rewrites
- Validates the untrusted rewrite (OptimizedSections overlay)
- Merges an overlay into a parsed resume without changing entry counts

Owns: Prompts, overlay shape, merge rules
Never: Parses documents or writes .docx packages
"""

from tailor.contexts.optimization.merge import apply_optimized_sections
from tailor.contexts.optimization.optimized_sections import (
    ExperienceOverlay,
    InvalidOptimizerResponseError,
    OptimizedSections,
    ProjectOverlay,
)
from tailor.contexts.optimization.optimizer import (
    OptimizeResult,
    extract_keywords,
    optimize_resume,
)

__all__ = [
    # Overlay
    "OptimizedSections",
    "ExperienceOverlay",
    "ProjectOverlay",
    "InvalidOptimizerResponseError",
    "apply_optimized_sections",
    # LLM operations
    "OptimizeResult",
    "extract_keywords",
    "optimize_resume",
]
