"""Custom exceptions for templating context with package references."""

from pathlib import Path
from typing import Optional, Union

DOCUMENT_ENTRY = "word/document.xml"


class MalformedPackageError(Exception):
    """
    Exception raised when a .docx package cannot be used.

    Raised when the input is not a zip archive or lacks the inner document
    entry. Fatal to template build and fill; export catches it and falls
    back to generating a fresh document.

    Attributes:
        message: Error description
        entry_name: Inner entry that was expected (e.g., 'word/document.xml')
        source: Path of the package, if it came from disk
    """

    def __init__(
        self,
        message: str,
        entry_name: Optional[str] = DOCUMENT_ENTRY,
        source: Optional[Union[str, Path]] = None,
    ):
        self.message = message
        self.entry_name = entry_name
        self.source = source

        # Build enhanced error message
        parts = [message]

        if entry_name:
            parts.append(f"Expected entry: {entry_name}")

        if source:
            parts.append(f"Package: {source}")

        super().__init__("\n".join(parts))
