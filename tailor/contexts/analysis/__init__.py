"""
Analysis Context

Responsibilities:
- Compares a parsed resume against a job description
- Reports matched and missing keywords (single tokens or supplied phrases)

Owns: Tokenization and keyword matching rules
Never: Modifies resume content
"""

from tailor.contexts.analysis.keyword_comparator import (
    KeywordReport,
    compare_keyword_list,
    compare_keywords,
    tokenize,
)

__all__ = ["KeywordReport", "tokenize", "compare_keywords", "compare_keyword_list"]
