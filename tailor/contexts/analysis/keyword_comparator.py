"""
Keyword comparison between a parsed resume and a job description.

Two modes:
- Token mode: single-word tokens of the job text, each classified as
  matched or missing against the resume's token set.
- Phrase-list mode: an externally supplied list of keywords or phrases
  (e.g. extracted by a language model), each matched case-insensitively
  as a substring of the resume text.
"""

import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from tailor.contexts.parsing.resume_data_structure import ParsedResume

MIN_TOKEN_LENGTH = 3


@dataclass
class KeywordReport:
    """
    Result of a keyword comparison.

    In token mode the two lists partition the job's token set.
    """

    matched_keywords: List[str] = field(default_factory=list)
    missing_keywords: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, List[str]]:
        return {
            "matchedKeywords": list(self.matched_keywords),
            "missingKeywords": list(self.missing_keywords),
        }


def tokenize(text: str) -> List[str]:
    """
    Split text into unique comparison tokens, in order of first appearance.

    Lowercases, treats every non-word character as a separator, and keeps
    tokens of at least 3 characters that are not purely numeric.

    Example:
        >>> tokenize("Go/Golang, 5+ years of REST APIs")
        ['golang', 'years', 'rest', 'apis']
    """
    normalized = re.sub(r"\W", " ", text.lower())
    tokens: List[str] = []
    seen = set()
    for token in normalized.split():
        if len(token) < MIN_TOKEN_LENGTH or token.isdigit() or token in seen:
            continue
        seen.add(token)
        tokens.append(token)
    return tokens


def compare_keywords(resume: ParsedResume, job_description: str) -> KeywordReport:
    """
    Token-mode comparison.

    A job token is matched if and only if it is in the resume's token set.
    Substrings never match: "go" in the resume does not match "golang".

    Args:
        resume: Parsed resume
        job_description: Free-text job description

    Returns:
        KeywordReport whose lists partition the job tokens, in job order
    """
    resume_tokens = set(tokenize(resume.search_text()))
    report = KeywordReport()
    for token in tokenize(job_description):
        if token in resume_tokens:
            report.matched_keywords.append(token)
        else:
            report.missing_keywords.append(token)
    return report


def compare_keyword_list(resume: ParsedResume, keywords: Iterable[str]) -> KeywordReport:
    """
    Phrase-list comparison.

    Each trimmed, non-empty phrase is matched as a case-insensitive substring
    of the resume text. Phrases keep their original casing in the report.

    Example:
        A phrase "API design" matches a bullet "Led api design reviews".
    """
    resume_text = resume.search_text().lower()
    report = KeywordReport()
    for keyword in keywords:
        phrase = keyword.strip()
        if not phrase:
            continue
        if phrase.lower() in resume_text:
            report.matched_keywords.append(phrase)
        else:
            report.missing_keywords.append(phrase)
    return report
