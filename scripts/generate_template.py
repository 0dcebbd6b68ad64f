#!/usr/bin/env python3
"""
Template Generation CLI

Builds a placeholder template from a source resume: the first occurrence of
each parsed field value in the document is replaced with its {{dotted.path}}
placeholder. Formatting, styles and every other package entry are kept.

Usage:
    python scripts/generate_template.py resume.docx
    python scripts/generate_template.py resume.docx public/template.docx
"""

import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from tailor.contexts.parsing import parse_resume_from_path
from tailor.contexts.templating.exceptions import MalformedPackageError
from tailor.contexts.templating.injector import build_template
from tailor.contexts.templating.logger import setup_templating_logger
from tailor.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))
TEMPLATE_DOCX_PATH = Path(os.getenv("TEMPLATE_DOCX_PATH", "public/template.docx"))

app = typer.Typer(
    help="Build a {{placeholder}} template from a source resume",
    add_completion=False,
)


@app.command()
def main(
    source: Annotated[
        Path,
        typer.Argument(
            help="Source resume .docx",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        )
    ],
    output: Annotated[
        Optional[Path],
        typer.Argument(
            help="Template output path (defaults to TEMPLATE_DOCX_PATH)",
            dir_okay=False,
            resolve_path=True,
        )
    ] = None,
):
    """
    Inject placeholders into a copy of the source resume.

    Values that cannot be found verbatim (e.g. split across runs) stay as
    literal text; check the log for the list.
    """
    output = output or TEMPLATE_DOCX_PATH
    log_file = setup_templating_logger(LOGS_PATH / f"template_{now()}", phase="build")

    try:
        resume = parse_resume_from_path(source)
        templated = build_template(source, resume)
    except MalformedPackageError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(templated)
    typer.echo(f"✓ Template written to {output}")
    typer.echo(f"  Log: {log_file}")


if __name__ == "__main__":
    app()
