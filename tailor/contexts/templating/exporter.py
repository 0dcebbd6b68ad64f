"""
Resume export.

Fills the configured .docx template with a resume and its optional overlay.
When the template is missing or unusable, a plain document is generated
instead, so export always yields a .docx.
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from tailor.contexts.optimization.merge import apply_optimized_sections
from tailor.contexts.optimization.optimized_sections import OptimizedSections
from tailor.contexts.parsing.resume_data_structure import ParsedResume
from tailor.contexts.templating.config_resolver import PayloadLimits
from tailor.contexts.templating.docx_generator import generate_resume_docx
from tailor.contexts.templating.exceptions import MalformedPackageError
from tailor.contexts.templating.filler import populate_template
from tailor.contexts.templating.logger import _log_info, _log_warning
from tailor.contexts.templating.payload import build_template_payload

load_dotenv()

TEMPLATE_DOCX_PATH = Path(os.getenv("TEMPLATE_DOCX_PATH", "public/template.docx"))


def export_resume(
    parsed: ParsedResume,
    optimized: Optional[OptimizedSections] = None,
    template_path: Optional[Path] = None,
    limits: Optional[PayloadLimits] = None,
) -> bytes:
    """
    Export a resume as .docx bytes.

    Args:
        parsed: Parsed resume
        optimized: Optional overlay merged over the parsed resume
        template_path: Templated .docx (default: TEMPLATE_DOCX_PATH)
        limits: Payload caps (default: load_payload_limits())

    Returns:
        Filled template, or a generated document if the template is missing
        or malformed
    """
    template_path = Path(template_path) if template_path is not None else TEMPLATE_DOCX_PATH

    if template_path.is_file():
        try:
            payload = build_template_payload(parsed, optimized, limits)
            filled = populate_template(template_path, payload)
            _log_info(f"Exported from template {template_path}")
            return filled
        except MalformedPackageError as e:
            _log_warning(f"Template unusable, generating plain document: {e.message}")
    else:
        _log_warning(f"Template not found at {template_path}, generating plain document")

    return generate_resume_docx(apply_optimized_sections(parsed, optimized))
