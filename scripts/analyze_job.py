#!/usr/bin/env python3
"""
Job Analysis CLI

Compares a job description with a resume and lists the job keywords the
resume already covers and the ones it lacks. Keywords come from the job
text's tokens, or from a language model with --llm.

Usage:
    python scripts/analyze_job.py job.txt --resume-id 2065550100
    python scripts/analyze_job.py job.txt --resume resume.docx --llm
    python scripts/analyze_job.py job.txt --json
"""

import json
import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from tailor.contexts.analysis import compare_keyword_list, compare_keywords
from tailor.contexts.optimization import extract_keywords
from tailor.contexts.optimization.logger import setup_optimization_logger
from tailor.contexts.parsing import DEFAULT_RESUME_ID, ParsedResume, parse_resume_from_path
from tailor.utils.llm import LLMError, get_provider
from tailor.utils.resume_store import ResumeStore
from tailor.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(
    help="Compare a job description with a stored or uploaded resume",
    add_completion=False,
)


def load_resume(resume_file: Optional[Path], resume_id: str) -> ParsedResume:
    """Parse resume_file if given, otherwise load resume_id from the store."""
    if resume_file is not None:
        return parse_resume_from_path(resume_file)

    record = ResumeStore().get_resume(resume_id)
    if record is None:
        typer.echo(f"Error: No stored resume with id '{resume_id}'", err=True)
        raise typer.Exit(code=1)
    return record.parsed


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
    resume_file: Annotated[
        Optional[Path],
        typer.Option(
            "--resume",
            "-r",
            help="Parse this .docx instead of loading from the store",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        )
    ] = None,
    use_llm: Annotated[
        bool,
        typer.Option("--llm", help="Extract job keywords with a language model")
    ] = False,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print {matchedKeywords, missingKeywords} as JSON")
    ] = False,
):
    """
    List matched and missing job keywords for a resume.

    Examples:

        $ analyze_job.py job.txt -i 2065550100

        $ analyze_job.py job.txt --resume resume.docx --llm --json
    """
    job_description = job_file.read_text(encoding="utf-8")
    resume = load_resume(resume_file, resume_id)

    if use_llm:
        try:
            provider = get_provider()
            setup_optimization_logger(LOGS_PATH / f"analyze_{now()}", provider_name=provider.name)
            keywords = extract_keywords(job_description, provider=provider)
        except LLMError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)
        report = compare_keyword_list(resume, keywords)
    else:
        report = compare_keywords(resume, job_description)

    if as_json:
        typer.echo(json.dumps(report.to_dict(), indent=2))
        return

    typer.echo(f"Matched ({len(report.matched_keywords)}):")
    for keyword in report.matched_keywords:
        typer.echo(f"  ✓ {keyword}")
    typer.echo(f"\nMissing ({len(report.missing_keywords)}):")
    for keyword in report.missing_keywords:
        typer.echo(f"  ✗ {keyword}")


if __name__ == "__main__":
    app()
