"""
Templating Context

Responsibilities:
- Reads and rewrites the zipped .docx package (word/document.xml only)
- Builds a template by injecting {{dotted.path}} placeholders into a source resume
- Flattens a resume (plus optional overlay) into the placeholder payload
- Fills a template in two passes (run-aware patch, then raw XML replacement)
- Generates a plain .docx when no template is usable

Owns: Placeholder syntax, payload keys and caps, package I/O, export fallback
Never: Parses resume text into sections or talks to a language model
"""
