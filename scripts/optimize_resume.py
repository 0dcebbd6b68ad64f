#!/usr/bin/env python3
"""
Resume Optimization CLI

Asks a language model for a sparse rewrite of a stored resume aligned with a
job description, validates it, and saves it as the resume's overlay.

Usage:
    python scripts/optimize_resume.py job.txt --resume-id 2065550100
    python scripts/optimize_resume.py job.txt -i 2065550100 -m Kubernetes -m gRPC
    python scripts/optimize_resume.py job.txt --dry-run
"""

import os
from pathlib import Path
from typing import List, Optional

import typer
from dotenv import load_dotenv
from omegaconf import OmegaConf
from typing_extensions import Annotated

from tailor.contexts.analysis import compare_keywords
from tailor.contexts.optimization import InvalidOptimizerResponseError, optimize_resume
from tailor.contexts.optimization.logger import setup_optimization_logger
from tailor.contexts.parsing import DEFAULT_RESUME_ID
from tailor.utils.llm import LLMError, get_provider
from tailor.utils.resume_store import ResumeStore
from tailor.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(
    help="Rewrite a stored resume toward a job description with a language model",
    add_completion=False,
)


@app.command()
def main(
    job_file: Annotated[
        Path,
        typer.Argument(
            help="Job description text file",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        )
    ],
    resume_id: Annotated[
        str,
        typer.Option("--resume-id", "-i", help="Stored resume id")
    ] = DEFAULT_RESUME_ID,
    missing: Annotated[
        Optional[List[str]],
        typer.Option(
            "--missing",
            "-m",
            help="Keyword to weave in (repeatable; defaults to the comparator's missing keywords)",
        )
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", "-n", help="Print the overlay without saving it")
    ] = False,
):
    """
    Optimize a stored resume for a job and save the overlay.

    Examples:

        $ optimize_resume.py job.txt -i 2065550100

        $ optimize_resume.py job.txt -i 2065550100 -m "system design" --dry-run
    """
    store = ResumeStore()
    record = store.get_resume(resume_id)
    if record is None:
        typer.echo(f"Error: No stored resume with id '{resume_id}'", err=True)
        raise typer.Exit(code=1)

    job_description = job_file.read_text(encoding="utf-8")
    if not missing:
        missing = compare_keywords(record.parsed, job_description).missing_keywords

    try:
        provider = get_provider()
        setup_optimization_logger(LOGS_PATH / f"optimize_{now()}", provider_name=provider.name)
        result = optimize_resume(record.parsed, job_description, missing, provider=provider)
    except (LLMError, InvalidOptimizerResponseError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if result.optimized_sections.is_empty():
        typer.echo("Model returned no changes")
        return

    typer.echo(OmegaConf.to_yaml(OmegaConf.create(result.optimized_sections.to_dict())))

    if dry_run:
        typer.echo("Dry run: overlay not saved")
        return

    path = store.save_optimized(resume_id, result.optimized_sections)
    typer.echo(f"✓ Overlay saved to {path}")


if __name__ == "__main__":
    app()
