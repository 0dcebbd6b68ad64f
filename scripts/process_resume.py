#!/usr/bin/env python3
"""
Resume Processing CLI

Parses a .docx resume into structured sections, stores it under an id
derived from the contact phone, and prints the result as YAML.

Usage:
    python scripts/process_resume.py resume.docx
    python scripts/process_resume.py resume.docx --no-store
    python scripts/process_resume.py resume.docx --resume-id jane
"""

import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from omegaconf import OmegaConf
from typing_extensions import Annotated

from tailor.contexts.parsing import parse_resume_from_path
from tailor.contexts.parsing.logger import setup_parsing_logger
from tailor.contexts.templating.exceptions import MalformedPackageError
from tailor.utils.resume_store import ResumeStore, resume_id_from_phone
from tailor.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(
    help="Parse a .docx resume into structured sections",
    add_completion=False,
)


@app.command()
def main(
    input_file: Annotated[
        Path,
        typer.Argument(
            help="Resume .docx file",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        )
    ],
    resume_id: Annotated[
        Optional[str],
        typer.Option(
            "--resume-id",
            "-i",
            help="Store key (defaults to the digits of the contact phone)",
        )
    ] = None,
    store: Annotated[
        bool,
        typer.Option(
            "--store/--no-store",
            help="Save the parsed resume to the data directory",
        )
    ] = True,
):
    """
    Parse a resume and print its sections as YAML.

    Examples:

        $ process_resume.py resume.docx

        $ process_resume.py resume.docx --no-store
    """
    log_dir = LOGS_PATH / f"process_{now()}"
    setup_parsing_logger(log_dir, source=input_file)

    try:
        parsed = parse_resume_from_path(input_file)
    except MalformedPackageError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    resume_id = resume_id or resume_id_from_phone(parsed.contact.phone)

    if store:
        path = ResumeStore().save_resume(resume_id, parsed, file_path=str(input_file))
        typer.echo(f"Stored as '{resume_id}' at {path}")
    else:
        typer.echo(f"Resume id: {resume_id}")

    typer.echo()
    typer.echo(OmegaConf.to_yaml(OmegaConf.create(parsed.to_dict())))


if __name__ == "__main__":
    app()
