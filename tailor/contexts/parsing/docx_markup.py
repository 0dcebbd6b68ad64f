"""
Convert a .docx package into lightweight block markup.

The segmenter's first strategy works on block boundaries (headings,
paragraphs, list items), so the document is rendered as a flat sequence of
<h1>-<h3>, <p> and <ul><li> blocks in body order. Table cells contribute
their paragraphs in row order.
"""

import re
from typing import List

from docx.document import Document
from docx.text.paragraph import Paragraph

from tailor.contexts.templating.docx_package import (
    PackageSource,
    iter_paragraphs,
    open_document,
    read_package,
)
from tailor.utils.text_processing import escape_xml_text

_HEADING_STYLE = re.compile(r"^Heading\s*(\d+)$", re.IGNORECASE)
MAX_HEADING_LEVEL = 3


def _heading_level(paragraph: Paragraph) -> int:
    """Return 1-3 for Title/Heading styles, 0 otherwise."""
    style_name = paragraph.style.name if paragraph.style is not None else ""
    if style_name == "Title":
        return 1
    match = _HEADING_STYLE.match(style_name)
    if match:
        return min(int(match.group(1)), MAX_HEADING_LEVEL)
    return 0


def _is_list_item(paragraph: Paragraph) -> bool:
    style_name = paragraph.style.name if paragraph.style is not None else ""
    if style_name.startswith("List"):
        return True
    p_pr = paragraph._p.pPr
    return p_pr is not None and p_pr.numPr is not None


def _inline_markup(paragraph: Paragraph) -> str:
    # Paragraph.text includes hyperlink runs; tabs arrive as "\t", breaks as "\n"
    return escape_xml_text(paragraph.text).replace("\n", "<br />")


def document_to_markup(document: Document) -> str:
    """Render an open python-docx document as block markup."""
    blocks: List[str] = []
    in_list = False

    for paragraph in iter_paragraphs(document):
        inner = _inline_markup(paragraph)
        level = _heading_level(paragraph)

        if level == 0 and _is_list_item(paragraph):
            if not in_list:
                blocks.append("<ul>")
                in_list = True
            blocks.append(f"<li>{inner}</li>")
            continue

        if in_list:
            blocks.append("</ul>")
            in_list = False

        if level:
            blocks.append(f"<h{level}>{inner}</h{level}>")
        else:
            blocks.append(f"<p>{inner}</p>")

    if in_list:
        blocks.append("</ul>")

    return "".join(blocks)


def docx_to_markup(source: PackageSource) -> str:
    """
    Convert a .docx file or its bytes to block markup.

    Args:
        source: Path to a .docx file, or its raw bytes

    Returns:
        Markup string, e.g. "<h1>EDUCATION</h1><p>University of X</p><ul><li>...</li></ul>"

    Raises:
        MalformedPackageError: If the package is not a zip or lacks word/document.xml
    """
    package = read_package(source)
    return document_to_markup(open_document(package, source))
