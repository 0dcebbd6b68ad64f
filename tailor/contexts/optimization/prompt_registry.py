"""
Prompt Registry

Loads and caches the Jinja2 prompt templates used for language-model calls.
"""

from pathlib import Path
from typing import Any, Dict

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateNotFound

PROMPTS_PATH = Path(__file__).parent / "prompts"
TEMPLATE_SUFFIX = ".md.jinja"


class PromptRegistry:
    """
    Registry for loading and caching prompt templates.

    Prompts are stored in tailor/contexts/optimization/prompts/{prompt_name}.md.jinja
    and use standard Jinja2 delimiters.
    """

    def __init__(self, prompts_path: Path = None):
        """
        Initialize the prompt registry.

        Args:
            prompts_path: Directory holding the prompt templates. Defaults to
                          the prompts/ directory next to this module
        """
        if prompts_path is None:
            prompts_path = PROMPTS_PATH

        self.prompts_path = prompts_path
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(prompts_path)),
            # Catches silent failures
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=False,
        )

    def get_template(self, prompt_name: str) -> Template:
        """
        Get a prompt template by name, loading and caching it if necessary.

        Args:
            prompt_name: Name of the prompt (e.g., 'optimize_system')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateSyntaxError: If template has Jinja2 syntax errors
        """
        if prompt_name in self._cache:
            return self._cache[prompt_name]

        template_path = f"{prompt_name}{TEMPLATE_SUFFIX}"

        try:
            template = self.env.get_template(template_path)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Prompt not found: '{prompt_name}' at {self.prompts_path / template_path}"
            ) from e

        self._cache[prompt_name] = template
        return template

    def render(self, prompt_name: str, **context: Any) -> str:
        """Render a prompt with the given variables, stripped of outer whitespace."""
        return self.get_template(prompt_name).render(**context).strip()

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, prompt_name: str) -> bool:
        return prompt_name in self._cache
