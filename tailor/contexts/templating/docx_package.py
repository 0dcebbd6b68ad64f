"""
Access to the zipped .docx package.

Only the inner document entry (word/document.xml) is ever read or rewritten.
Every other entry is treated as opaque and copied through unchanged, with
its original compression settings.
"""

import io
import zipfile
from pathlib import Path
from typing import Iterator, Optional, Union

import docx
from docx.document import Document
from docx.opc.exceptions import PackageNotFoundError
from docx.table import Table
from docx.text.paragraph import Paragraph
from lxml.etree import XMLSyntaxError

from tailor.contexts.templating.exceptions import DOCUMENT_ENTRY, MalformedPackageError

PackageSource = Union[str, Path, bytes]


def read_package(source: PackageSource) -> bytes:
    """Return package bytes from a path or pass bytes through."""
    if isinstance(source, (bytes, bytearray)):
        return bytes(source)
    return Path(source).read_bytes()


def _open_zip(package: bytes, source: Optional[PackageSource] = None) -> zipfile.ZipFile:
    try:
        return zipfile.ZipFile(io.BytesIO(package))
    except zipfile.BadZipFile as e:
        raise MalformedPackageError(f"Not a zip package: {e}", source=_describe(source)) from e


def _describe(source: Optional[PackageSource]) -> Optional[str]:
    if source is None or isinstance(source, (bytes, bytearray)):
        return None
    return str(source)


def read_document_xml(package: bytes, source: Optional[PackageSource] = None) -> str:
    """
    Read the inner document entry as text.

    Args:
        package: .docx bytes
        source: Original path, used only in error messages

    Returns:
        word/document.xml decoded as UTF-8

    Raises:
        MalformedPackageError: If the package is not a zip or lacks the entry
    """
    with _open_zip(package, source) as archive:
        if DOCUMENT_ENTRY not in archive.namelist():
            raise MalformedPackageError("Package has no document entry", source=_describe(source))
        return archive.read(DOCUMENT_ENTRY).decode("utf-8")


def replace_document_xml(package: bytes, document_xml: str) -> bytes:
    """
    Return a copy of the package with word/document.xml replaced.

    Entry order, names and compression of all other entries are preserved.

    Raises:
        MalformedPackageError: If the package is not a zip or lacks the entry
    """
    output = io.BytesIO()
    with _open_zip(package) as archive:
        if DOCUMENT_ENTRY not in archive.namelist():
            raise MalformedPackageError("Package has no document entry")
        with zipfile.ZipFile(output, "w") as rewritten:
            for info in archive.infolist():
                if info.filename == DOCUMENT_ENTRY:
                    rewritten.writestr(info, document_xml.encode("utf-8"))
                else:
                    rewritten.writestr(info, archive.read(info.filename))
    return output.getvalue()


def open_document(package: bytes, source: Optional[PackageSource] = None) -> Document:
    """
    Open package bytes with python-docx.

    The document entry is checked first so a missing entry surfaces as
    MalformedPackageError rather than a python-docx internal error. Load
    failures raised by python-docx or lxml are reported the same way.
    """
    read_document_xml(package, source)
    try:
        return docx.Document(io.BytesIO(package))
    except (KeyError, ValueError, PackageNotFoundError, XMLSyntaxError) as e:
        raise MalformedPackageError(f"Unreadable package: {e}", source=_describe(source)) from e


def save_document(document: Document) -> bytes:
    """Serialize a python-docx document to bytes."""
    output = io.BytesIO()
    document.save(output)
    return output.getvalue()


def _iter_table_paragraphs(table: Table, seen: set) -> Iterator[Paragraph]:
    for row in table.rows:
        for cell in row.cells:
            # Merged cells repeat the same <w:tc> across the grid
            if cell._tc in seen:
                continue
            seen.add(cell._tc)
            for block in cell.iter_inner_content():
                if isinstance(block, Paragraph):
                    yield block
                else:
                    yield from _iter_table_paragraphs(block, seen)


def iter_paragraphs(document: Document) -> Iterator[Paragraph]:
    """
    Yield body paragraphs in document order, descending into table cells.

    Headers, footers and text boxes are not visited.
    """
    seen: set = set()
    for block in document.iter_inner_content():
        if isinstance(block, Paragraph):
            yield block
        else:
            yield from _iter_table_paragraphs(block, seen)
