"""
Language-model collaborator for keyword extraction and resume rewriting.

Both operations take an injected LLMProvider (resolved from the environment
when omitted), make exactly one request, and treat the response as
untrusted: malformed JSON raises LLMResponseError, a wrongly shaped overlay
raises InvalidOptimizerResponseError. Nothing is merged on failure.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from tailor.contexts.optimization.logger import _log_debug, log_llm_call, log_overlay_summary
from tailor.contexts.optimization.optimized_sections import OptimizedSections
from tailor.contexts.optimization.prompt_registry import PromptRegistry
from tailor.contexts.parsing.resume_data_structure import ParsedResume
from tailor.utils.llm import LLMProvider, get_provider, parse_object_response

_registry = PromptRegistry()


@dataclass
class OptimizeResult:
    """
    Result of one optimization request.

    Attributes:
        optimized_sections: Validated overlay (possibly empty)
        full_text: Raw model response, kept for display and debugging
    """

    optimized_sections: OptimizedSections = field(default_factory=OptimizedSections)
    full_text: str = ""


def resume_to_prompt_text(resume: ParsedResume) -> str:
    """
    Render a parsed resume as the plain text sent to the model.

    Example:
        >>> resume_to_prompt_text(ParsedResume(skills=["Python", "Go"]))
        '## Contact\\n## Education\\n## Experience\\n## Projects\\n## Skills\\nPython, Go'
    """
    contact = resume.contact
    lines: List[Optional[str]] = [
        "## Contact",
        contact.name,
        contact.email,
        contact.phone,
        contact.location,
        contact.linkedin,
        "## Education",
    ]
    for entry in resume.education:
        if entry.raw_text is not None:
            lines.append(entry.raw_text)
        else:
            lines.append(" ".join(v for v in (entry.school, entry.degree, entry.dates, entry.gpa) if v))

    lines.append("## Experience")
    for job in resume.experience:
        lines.append(f"{job.company or ''} – {job.role or ''} | {job.dates or ''}")
        lines.extend(job.bullets)

    lines.append("## Projects")
    for project in resume.projects:
        lines.append(project.title)
        lines.extend(project.bullets)

    lines.append("## Skills")
    lines.append(", ".join(resume.skills))
    return "\n".join(line for line in lines if line)


def extract_keywords(
    job_description: str,
    provider: LLMProvider = None,
    max_keywords: int = None,
) -> List[str]:
    """
    Extract ATS-relevant keywords and phrases from a job description.

    The employer name is excluded by the prompt.

    Args:
        job_description: Free-text job description
        provider: LLM provider (default: resolved from environment)
        max_keywords: Optional cap communicated to the model

    Returns:
        Trimmed, non-empty keyword strings in model order; [] if the
        response has no keyword list

    Raises:
        LLMConfigurationError: If no provider is given and none is configured
        LLMRequestError: If the request fails
        LLMResponseError: If the response is empty or not a JSON object
    """
    provider = provider or get_provider()
    system_prompt = _registry.render("keyword_extraction_system", max_keywords=max_keywords)

    response = provider.generate(system_prompt, job_description, json_mode=True)
    log_llm_call(provider.name, "Keyword extraction", response)

    keywords = parse_object_response(response.content).get("keywords")
    if not isinstance(keywords, list):
        _log_debug("Response has no keyword list")
        return []
    return [k.strip() for k in keywords if isinstance(k, str) and k.strip()]


def optimize_resume(
    resume: ParsedResume,
    job_description: str,
    missing_keywords: Optional[Sequence[str]] = None,
    provider: LLMProvider = None,
) -> OptimizeResult:
    """
    Ask the model for a sparse rewrite of the resume aligned with a job.

    Args:
        resume: Parsed resume
        job_description: Free-text job description
        missing_keywords: Optional keyword hints to weave in
        provider: LLM provider (default: resolved from environment)

    Returns:
        OptimizeResult with the validated overlay and the raw response text

    Raises:
        LLMConfigurationError: If no provider is given and none is configured
        LLMRequestError: If the request fails
        LLMResponseError: If the response is empty or not a JSON object
        InvalidOptimizerResponseError: If the overlay has the wrong shape
    """
    provider = provider or get_provider()

    system_prompt = _registry.render(
        "optimize_system",
        experience_count=len(resume.experience),
        education_count=len(resume.education),
        project_count=len(resume.projects),
    )
    user_prompt = _registry.render(
        "optimize_user",
        resume_text=resume_to_prompt_text(resume),
        job_description=job_description,
        missing_keywords=list(missing_keywords or []),
    )

    response = provider.generate(system_prompt, user_prompt, json_mode=True)
    log_llm_call(provider.name, "Resume optimization", response)

    raw = response.content.strip()
    payload = parse_object_response(raw)
    overlay = OptimizedSections.from_untrusted(payload.get("optimizedSections"))
    log_overlay_summary(overlay)

    return OptimizeResult(optimized_sections=overlay, full_text=raw)
