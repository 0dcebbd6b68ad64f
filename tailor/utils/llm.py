"""
LLM provider abstraction and response parsing utilities.

Provides provider resolution from the environment, a provider-agnostic
interface for single LLM API calls, and parsing of JSON object responses.

Providers make exactly one request per call. A failed request surfaces as a
single LLMRequestError; there is no retry loop.
"""

import json
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

load_dotenv()

MOONSHOT_BASE_URL = "https://api.moonshot.ai/v1"
OPENROUTER_BASE_URL = "https://openrouter.ai/api/v1"

MAX_TOKENS = 4096

# (provider, API key variable, default model, base URL), in resolution order
PROVIDER_ORDER = (
    ("openai", "OPENAI_API_KEY", "gpt-4o-mini", None),
    ("moonshot", "MOONSHOT_API_KEY", "kimi-k2-turbo-preview", MOONSHOT_BASE_URL),
    ("openrouter", "OPENROUTER_API_KEY", "moonshotai/kimi-k2-0905", OPENROUTER_BASE_URL),
    ("anthropic", "ANTHROPIC_API_KEY", "claude-sonnet-4-20250514", None),
)


# --- Errors ---


class LLMError(Exception):
    """Base class for language-model collaborator failures."""


class LLMConfigurationError(LLMError):
    """No provider API key is configured."""


class LLMRequestError(LLMError):
    """
    The provider request failed (network error, non-2xx status, SDK error).

    Attributes:
        provider: Provider name (e.g., "openai/gpt-4o-mini")
        original_error: The SDK exception
    """

    def __init__(self, message: str, provider: str = None, original_error: Exception = None):
        self.message = message
        self.provider = provider
        self.original_error = original_error

        parts = [message]
        if provider:
            parts.append(f"Provider: {provider}")
        if original_error:
            parts.append(f"Original error: {original_error}")

        super().__init__("\n".join(parts))


class LLMResponseError(LLMError):
    """The provider answered with an empty or malformed body."""


# --- Provider Configuration ---


@dataclass(frozen=True)
class ProviderConfig:
    """
    Resolved provider selection.

    Attributes:
        provider: "openai", "moonshot", "openrouter" or "anthropic"
        model: Model name (LLM_MODEL override or the provider default)
        api_key: API key for the provider
        base_url: Base URL for OpenAI-compatible endpoints (None for the default)
    """

    provider: str
    model: str
    api_key: str
    base_url: Optional[str] = None

    @property
    def name(self) -> str:
        return f"{self.provider}/{self.model}"


def resolve_provider_config(env: Optional[Mapping[str, str]] = None) -> ProviderConfig:
    """
    Pick the first configured provider.

    Checks OPENAI_API_KEY, MOONSHOT_API_KEY, OPENROUTER_API_KEY and
    ANTHROPIC_API_KEY in that order. A non-empty LLM_MODEL overrides the
    provider's default model.

    Args:
        env: Environment mapping (default: os.environ)

    Returns:
        ProviderConfig for the first provider with a key

    Raises:
        LLMConfigurationError: If no provider key is set
    """
    env = os.environ if env is None else env
    model_override = (env.get("LLM_MODEL") or "").strip()

    for provider, key_var, default_model, base_url in PROVIDER_ORDER:
        api_key = (env.get(key_var) or "").strip()
        if api_key:
            return ProviderConfig(
                provider=provider,
                model=model_override or default_model,
                api_key=api_key,
                base_url=base_url,
            )

    key_names = ", ".join(key_var for _, key_var, _, _ in PROVIDER_ORDER)
    raise LLMConfigurationError(f"No LLM API key set. Set one of: {key_names}")


def is_llm_configured(env: Optional[Mapping[str, str]] = None) -> bool:
    """True if any supported provider key is set."""
    try:
        resolve_provider_config(env)
    except LLMConfigurationError:
        return False
    return True


# --- LLM Provider Classes ---


@dataclass
class LLMResponse:
    """Response from an LLM provider."""

    content: str
    model: str
    input_tokens: int
    output_tokens: int


class LLMProvider(ABC):
    """
    Abstract base for LLM providers.

    Subclasses must:
    - Set _provider_prefix class attribute (e.g., "anthropic", "openai")
    - Implement _call_api() for the actual API call
    - Call update_model(model) in __init__ to set model and name
    """

    _provider_prefix: str

    name: str
    model: str

    def update_model(self, model: str):
        """Update the model and refresh the provider name."""
        self.model = model
        self.name = f"{self._provider_prefix}/{model}"

    @abstractmethod
    def _call_api(self, system_prompt: str, user_prompt: str, json_mode: bool) -> LLMResponse:
        """Make a single API call. Implemented by subclasses."""
        pass

    def generate(self, system_prompt: str, user_prompt: str, json_mode: bool = False) -> LLMResponse:
        """
        Generate a response from the LLM.

        Raises:
            LLMRequestError: If the request fails
            LLMResponseError: If the response has no content
        """
        response = self._call_api(system_prompt, user_prompt, json_mode)
        if not response.content or not response.content.strip():
            raise LLMResponseError(f"Empty LLM response from {self.name}")
        return response


class AnthropicProvider(LLMProvider):
    """Anthropic Claude provider."""

    _provider_prefix = "anthropic"

    def __init__(self, config: ProviderConfig):
        # Lazy import - anthropic SDK is heavy, only load if this provider is used
        import anthropic

        self._error_type = anthropic.AnthropicError
        self.client = anthropic.Anthropic(api_key=config.api_key)
        self.update_model(config.model)

    def _call_api(self, system_prompt: str, user_prompt: str, json_mode: bool) -> LLMResponse:
        try:
            response = self.client.messages.create(
                model=self.model,
                max_tokens=MAX_TOKENS,
                system=system_prompt,
                messages=[{"role": "user", "content": user_prompt}],
            )
        except self._error_type as e:
            raise LLMRequestError("LLM request failed", provider=self.name, original_error=e) from e

        text = "".join(block.text for block in response.content if block.type == "text")
        return LLMResponse(
            content=text,
            model=self.model,
            input_tokens=response.usage.input_tokens,
            output_tokens=response.usage.output_tokens,
        )


class OpenAIProvider(LLMProvider):
    """OpenAI-compatible chat completions provider (OpenAI, Moonshot, OpenRouter)."""

    def __init__(self, config: ProviderConfig):
        # Lazy import - openai SDK is heavy, only load if this provider is used
        import openai

        self._provider_prefix = config.provider
        self._error_type = openai.OpenAIError
        self.client = openai.OpenAI(api_key=config.api_key, base_url=config.base_url)
        self.update_model(config.model)

    def _call_api(self, system_prompt: str, user_prompt: str, json_mode: bool) -> LLMResponse:
        extra = {"response_format": {"type": "json_object"}} if json_mode else {}
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                max_tokens=MAX_TOKENS,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
                **extra,
            )
        except self._error_type as e:
            raise LLMRequestError("LLM request failed", provider=self.name, original_error=e) from e

        choice = response.choices[0] if response.choices else None
        usage = response.usage
        return LLMResponse(
            content=(choice.message.content or "") if choice else "",
            model=self.model,
            input_tokens=usage.prompt_tokens if usage else 0,
            output_tokens=usage.completion_tokens if usage else 0,
        )


# --- Provider Factory ---


def get_provider(config: ProviderConfig = None) -> LLMProvider:
    """
    Get an LLM provider instance.

    Args:
        config: Resolved provider configuration (default: resolve_provider_config())

    Returns:
        LLMProvider instance

    Raises:
        LLMConfigurationError: If no config is given and no provider key is set
    """
    if config is None:
        config = resolve_provider_config()

    if config.provider == "anthropic":
        return AnthropicProvider(config)
    return OpenAIProvider(config)


# --- Response Parsing Utilities ---


def parse_object_response(text: str) -> dict:
    """
    Parse a JSON object from an LLM response.

    Tries the whole text first, then the outermost {...} span (for providers
    that wrap JSON in prose or code fences).

    Args:
        text: LLM response text

    Returns:
        Parsed dict

    Raises:
        LLMResponseError: If no JSON object can be parsed
    """
    text = text.strip()

    # Try direct JSON parse
    try:
        result = json.loads(text)
        if isinstance(result, dict):
            return result
    except json.JSONDecodeError:
        pass

    # Try to find JSON object in the text
    start = text.find("{")
    end = text.rfind("}")
    if start != -1 and end != -1 and end > start:
        try:
            result = json.loads(text[start : end + 1])
            if isinstance(result, dict):
                return result
        except json.JSONDecodeError:
            pass

    raise LLMResponseError(f"LLM response is not a JSON object: {text[:200]}")
