"""
Hosted Model Interface

What the relay needs from a model backend: generate text for one prompt and
list the models that can do so.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

from uikb.configs.constants import get_timeout


@dataclass
class LLMConfig:
    """Per-request generation settings. None leaves the backend's default."""

    model: Optional[str] = None
    max_tokens: Optional[int] = None
    temperature: Optional[float] = None
    timeout: float = get_timeout("http_llm_request")  # seconds


@dataclass
class LLMResponse:
    """Generated text plus bookkeeping."""

    text: str
    model: str
    tokens_used: int = 0
    latency_ms: float = 0.0
    provider: str = ""


class LLMProvider(ABC):
    """Base class for model backends."""

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @property
    @abstractmethod
    def default_model(self) -> str:
        """Model used when LLMConfig.model is None."""

    @abstractmethod
    def is_available(self) -> bool:
        """True when credentials are present. Checked before every request."""

    @abstractmethod
    def generate(self, prompt: str, config: Optional[LLMConfig] = None) -> LLMResponse:
        """
        Run a single-turn generation.

        Raises:
            MissingConfigError: Credentials are not configured
            LLMError: Transport failure or unusable upstream answer
        """

    @abstractmethod
    def list_models(self) -> list[dict[str, Any]]:
        """Model descriptors able to serve generate()."""
