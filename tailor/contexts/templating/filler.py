"""
Template filling (export).

Two passes resolve every {{key}} placeholder in a templated .docx:

1. Patch pass: walks body and table-cell paragraphs with python-docx. A
   placeholder whose characters are spread over several runs (Word splits
   runs on spell-check, revision and formatting boundaries) is rewritten in
   place: the value goes into the run where the placeholder starts and the
   placeholder's remaining characters are removed from the following runs.
   Run formatting is preserved; a following run left with neither text nor
   formatting is dropped.
2. Raw pass: string replacement over word/document.xml for placeholders the
   patch pass does not reach, e.g. inside hyperlinks.

Placeholders whose key is not in the payload are left as-is.
"""

from typing import List, Tuple

from docx.text.paragraph import Paragraph
from docx.text.run import Run

from tailor.contexts.templating.docx_package import (
    PackageSource,
    iter_paragraphs,
    open_document,
    read_document_xml,
    read_package,
    replace_document_xml,
    save_document,
)
from tailor.contexts.templating.logger import _log_debug, log_fill_summary
from tailor.contexts.templating.payload import TemplatePayload, placeholder
from tailor.utils.text_processing import escape_xml


def _locate(runs: List[Run], offset: int) -> Tuple[int, int]:
    """Map an offset in the joined run text to (run index, offset in run)."""
    position = 0
    for index, run in enumerate(runs):
        length = len(run.text)
        if offset < position + length:
            return index, offset - position
        position += length
    return len(runs) - 1, len(runs[-1].text)


def _drop_if_bare(run: Run) -> None:
    # Only runs left with no text and no run properties
    if len(run._r) == 0:
        run._r.getparent().remove(run._r)


def _replace_span(runs: List[Run], start: int, end: int, value: str) -> None:
    first, first_offset = _locate(runs, start)
    last, last_offset = _locate(runs, end - 1)
    last_offset += 1

    head = runs[first].text
    if first == last:
        runs[first].text = head[:first_offset] + value + head[last_offset:]
        return

    runs[first].text = head[:first_offset] + value
    for run in runs[first + 1 : last]:
        run.text = ""
    runs[last].text = runs[last].text[last_offset:]

    for run in runs[first + 1 : last + 1]:
        if not run.text:
            _drop_if_bare(run)


def patch_paragraph(paragraph: Paragraph, payload: TemplatePayload) -> int:
    """
    Replace placeholders in one paragraph's direct runs.

    Runs emptied by a replacement are removed unless they carry formatting.

    Returns:
        Number of placeholders replaced
    """
    if not paragraph.runs:
        return 0

    replaced = 0
    for key, value in payload.items():
        token = placeholder(key)
        search_from = 0
        while True:
            runs = paragraph.runs
            joined = "".join(run.text for run in runs)
            start = joined.find(token, search_from)
            if start < 0:
                break
            _replace_span(runs, start, start + len(token), value)
            search_from = start + len(value)
            replaced += 1
    return replaced


def patch_paragraphs(template: bytes, payload: TemplatePayload) -> Tuple[bytes, int]:
    """
    Run the patch pass over a templated package.

    Hyperlink runs are not children of the paragraph's run list and are
    left for the raw pass.

    Args:
        template: Templated .docx bytes
        payload: Flat placeholder payload

    Returns:
        (patched package bytes, number of placeholders replaced)
    """
    document = open_document(template)
    replaced = sum(patch_paragraph(paragraph, payload) for paragraph in iter_paragraphs(document))
    if replaced == 0:
        return template, 0
    return save_document(document), replaced


def replace_raw_placeholders(document_xml: str, payload: TemplatePayload) -> str:
    """
    Replace every literal {{key}} token in document XML with its escaped value.

    Example:
        >>> replace_raw_placeholders("<w:t>{{contact.name}}</w:t>", {"contact.name": "A & B"})
        '<w:t>A &amp; B</w:t>'
    """
    for key, value in payload.items():
        token = placeholder(key)
        if token in document_xml:
            document_xml = document_xml.replace(token, escape_xml(value))
    return document_xml


def _count_tokens(document_xml: str, payload: TemplatePayload) -> int:
    return sum(document_xml.count(placeholder(key)) for key in payload)


def populate_template(template: PackageSource, payload: TemplatePayload) -> bytes:
    """
    Fill a templated .docx with payload values.

    Args:
        template: Path to the templated .docx, or its bytes
        payload: Flat placeholder payload (see build_template_payload)

    Returns:
        Filled package bytes

    Raises:
        MalformedPackageError: If the template is not a zip, lacks word/document.xml
            or cannot be loaded by python-docx
    """
    package = read_package(template)
    read_document_xml(package, template)

    patched, patched_count = patch_paragraphs(package, payload)

    document_xml = read_document_xml(patched)
    raw_count = _count_tokens(document_xml, payload)
    if raw_count:
        patched = replace_document_xml(patched, replace_raw_placeholders(document_xml, payload))
    else:
        _log_debug("No placeholders left for the raw pass")

    log_fill_summary(patched_count, raw_count)
    return patched
