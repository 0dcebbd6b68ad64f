"""
Shared utilities for TAILOR.

Common functionality used across contexts:
- Text processing and XML escaping
- LLM provider resolution
- Logging setup
- Resume storage
"""

from tailor.utils.timestamp import now, now_exact

__all__ = ["now", "now_exact"]
