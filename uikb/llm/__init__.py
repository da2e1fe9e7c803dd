"""
LLM Provider Abstraction

Interface to the hosted model used by the code generation relay.
"""

from typing import Optional

from .gemini_provider import GeminiProvider
from .prompts import CODE_GENERATION_PROMPT, build_code_generation_prompt
from .provider import LLMConfig, LLMProvider, LLMResponse

__all__ = [
    "LLMProvider",
    "LLMConfig",
    "LLMResponse",
    "GeminiProvider",
    "CODE_GENERATION_PROMPT",
    "build_code_generation_prompt",
    "get_provider",
]


def get_provider(config: Optional[dict] = None) -> LLMProvider:
    """
    Get the LLM provider described by configuration.

    Args:
        config: Configuration dict with an optional 'llm' section containing:
            - provider: str (only "gemini" is supported)
            - model / base_url: provider settings

    Returns:
        An LLMProvider instance (availability is checked by the caller)

    Raises:
        ValueError: If the configured provider is unknown
    """
    config = config or {}
    llm_config = config.get("llm") or {}

    name = llm_config.get("provider", "gemini")
    if name == "gemini":
        return GeminiProvider(llm_config)
    raise ValueError(f"Unknown provider: {name}")
