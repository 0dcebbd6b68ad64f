"""
TAILOR - Template-Aware Information Lifting and Optimized Resume-reassembly

Parses .docx resumes into structured data, compares them against job descriptions,
and reassembles edited data into the original document layout.

Architecture:
- Parsing Context: docx -> markup -> plain text -> sections -> structured resume
- Analysis Context: Keyword comparison between resume and job description
- Optimization Context: Language-model rewriting and overlay merging
- Templating Context: Placeholder injection, payload building, and document export
"""

__version__ = "0.1.0"
