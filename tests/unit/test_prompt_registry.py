"""Unit tests for PromptRegistry."""

import pytest
from jinja2 import TemplateNotFound, UndefinedError

from tailor.contexts.optimization.prompt_registry import PromptRegistry


@pytest.mark.unit
class TestPromptRegistry:
    """Tests for loading, caching and rendering prompts."""

    def test_bundled_prompts_render(self):
        registry = PromptRegistry()

        keyword_prompt = registry.render("keyword_extraction_system", max_keywords=None)
        system_prompt = registry.render(
            "optimize_system", experience_count=2, education_count=1, project_count=0
        )
        user_prompt = registry.render(
            "optimize_user", resume_text="RESUME", job_description="JOB", missing_keywords=[]
        )

        assert keyword_prompt.startswith("You are an expert")
        assert '"keywords"' in keyword_prompt
        assert "at most" not in keyword_prompt
        assert "(2 experience, 1 education, 0 projects)" in system_prompt
        assert user_prompt == "### Resume\n\nRESUME\n\n### Job description\n\nJOB"

    def test_template_is_cached(self):
        registry = PromptRegistry()
        assert not registry.is_cached("optimize_system")

        first = registry.get_template("optimize_system")
        assert registry.is_cached("optimize_system")
        assert registry.get_template("optimize_system") is first

        registry.clear_cache()
        assert not registry.is_cached("optimize_system")

    def test_missing_prompt_raises(self):
        with pytest.raises(TemplateNotFound, match="Prompt not found: 'nope'"):
            PromptRegistry().get_template("nope")

    def test_missing_variable_raises(self):
        with pytest.raises(UndefinedError):
            PromptRegistry().render("optimize_system", experience_count=1)

    def test_custom_prompts_path(self, tmp_path):
        (tmp_path / "greeting.md.jinja").write_text("Hello {{ name }}!\n")
        assert PromptRegistry(tmp_path).render("greeting", name="Jane") == "Hello Jane!"
