#!/usr/bin/env python3
"""
Resume Export CLI

Exports a stored resume as .docx. The stored overlay (if any) is merged over
the parsed resume and the result fills the template. Without a usable
template a plain document is generated.

Usage:
    python scripts/export_resume.py out/resume.docx --resume-id 2065550100
    python scripts/export_resume.py out/resume.docx -i 2065550100 --original
    python scripts/export_resume.py out/resume.docx --template my_template.docx
"""

import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from tailor.contexts.parsing import DEFAULT_RESUME_ID
from tailor.contexts.templating.exporter import export_resume
from tailor.contexts.templating.logger import setup_templating_logger
from tailor.utils.resume_store import ResumeStore
from tailor.utils.timestamp import format_timestamp, now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(
    help="Export a stored resume (with its optimized overlay) as .docx",
    add_completion=False,
)


@app.command()
def main(
    output: Annotated[
        Path,
        typer.Argument(help="Output .docx path", dir_okay=False, resolve_path=True)
    ],
    resume_id: Annotated[
        str,
        typer.Option("--resume-id", "-i", help="Stored resume id")
    ] = DEFAULT_RESUME_ID,
    template: Annotated[
        Optional[Path],
        typer.Option(
            "--template",
            "-t",
            help="Templated .docx (defaults to TEMPLATE_DOCX_PATH)",
            dir_okay=False,
            resolve_path=True,
        )
    ] = None,
    original: Annotated[
        bool,
        typer.Option("--original", help="Ignore the stored overlay")
    ] = False,
):
    """
    Export a resume to .docx.

    Examples:

        $ export_resume.py out/resume.docx -i 2065550100

        $ export_resume.py out/resume.docx -i 2065550100 -t public/template.docx
    """
    record = ResumeStore().get_resume(resume_id)
    if record is None:
        typer.echo(f"Error: No stored resume with id '{resume_id}'", err=True)
        raise typer.Exit(code=1)

    setup_templating_logger(LOGS_PATH / f"export_{now()}", phase="export")

    optimized = None if original else record.optimized
    if optimized is not None and record.updated_at:
        typer.echo(f"Using overlay saved {format_timestamp(record.updated_at)}")

    data = export_resume(record.parsed, optimized, template_path=template)

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(data)
    typer.echo(f"✓ Exported to {output}")


if __name__ == "__main__":
    app()
