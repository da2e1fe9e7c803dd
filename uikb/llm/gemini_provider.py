"""
Gemini Provider

Uses the Google Generative Language REST API (`generateContent`).
Requires GEMINI_API_KEY environment variable, read on every call so a
rotated key takes effect without a restart.
"""

import os
import time
from typing import Any, Optional

from uikb.configs.constants import (
    API_KEY_ENV_VAR,
    DEFAULT_MODEL,
    GEMINI_BASE_URL,
    GENERATE_CONTENT_METHOD,
    get_timeout,
)
from uikb.configs.logging import get_logger
from uikb.exceptions import LLMConnectionError, LLMResponseError, LLMTimeoutError, MissingConfigError
from uikb.utils.http_client import HTTPError, http_json_get, http_json_post

from .provider import LLMConfig, LLMProvider, LLMResponse

logger = get_logger("llm.gemini")


class GeminiProvider(LLMProvider):
    """
    LLM provider using the Gemini REST API.

    Configuration:
        model: Model to use (default: gemini-1.5-flash-latest)
        base_url: API URL (default: https://generativelanguage.googleapis.com/v1beta)

    Environment:
        GEMINI_API_KEY: Required API key
    """

    def __init__(self, config: Optional[dict] = None):
        self._config = config or {}
        self._base_url = self._config.get("base_url", GEMINI_BASE_URL).rstrip("/")

    @property
    def name(self) -> str:
        return "gemini"

    @property
    def default_model(self) -> str:
        return self._config.get("model", DEFAULT_MODEL)

    @property
    def api_key(self) -> Optional[str]:
        return os.environ.get(API_KEY_ENV_VAR) or None

    def is_available(self) -> bool:
        """Check if API key is set."""
        if not self.api_key:
            logger.debug(f"{API_KEY_ENV_VAR} not set")
            return False
        return True

    def _headers(self) -> dict[str, str]:
        api_key = self.api_key
        if not api_key:
            raise MissingConfigError(f"{API_KEY_ENV_VAR} is not configured")
        return {"x-goog-api-key": api_key}

    def generate(self, prompt: str, config: Optional[LLMConfig] = None) -> LLMResponse:
        """Generate content with a single user turn."""
        headers = self._headers()
        config = config or LLMConfig()
        model = config.model or self.default_model

        payload: dict[str, Any] = {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
        }
        generation_config = {}
        if config.max_tokens is not None:
            generation_config["maxOutputTokens"] = config.max_tokens
        if config.temperature is not None:
            generation_config["temperature"] = config.temperature
        if generation_config:
            payload["generationConfig"] = generation_config

        start_time = time.time()

        try:
            data = http_json_post(
                f"{self._base_url}/models/{model}:{GENERATE_CONTENT_METHOD}",
                json=payload,
                headers=headers,
                timeout=config.timeout,
            )
        except (LLMConnectionError, LLMTimeoutError):
            raise
        except HTTPError as e:
            logger.error(f"Gemini HTTP error: {e}")
            raise LLMResponseError(
                f"Google API error: {e.response_text or e}",
                {"status_code": e.status_code},
            ) from e

        latency_ms = (time.time() - start_time) * 1000

        candidates = data.get("candidates") or []
        if not candidates:
            feedback = data.get("promptFeedback", {})
            raise LLMResponseError("Gemini returned no candidates", feedback or None)

        parts = candidates[0].get("content", {}).get("parts") or []
        text = "".join(p.get("text", "") for p in parts)
        if not text:
            reason = candidates[0].get("finishReason", "")
            raise LLMResponseError("Gemini returned empty response", {"finishReason": reason})

        usage = data.get("usageMetadata", {})
        logger.debug(f"Gemini generated {len(text)} chars in {latency_ms:.0f}ms")

        return LLMResponse(
            text=text,
            model=data.get("modelVersion", model),
            tokens_used=usage.get("totalTokenCount", 0),
            latency_ms=latency_ms,
            provider=self.name,
        )

    def list_models(self) -> list[dict[str, Any]]:
        """
        List models that support content generation.

        Returns:
            Model descriptors from the API, in API order

        Raises:
            LLMResponseError: Upstream returned an error payload
        """
        headers = self._headers()
        models: list[dict[str, Any]] = []
        params: dict[str, Any] = {"pageSize": 1000}

        while True:
            try:
                data = http_json_get(
                    f"{self._base_url}/models",
                    params=params,
                    headers=headers,
                    timeout=get_timeout("http_list_models"),
                )
            except HTTPError as e:
                logger.error(f"Gemini model listing failed: {e}")
                raise LLMResponseError(
                    f"Google API error: {e.response_text or e}",
                    {"status_code": e.status_code},
                ) from e

            for model in data.get("models", []):
                if GENERATE_CONTENT_METHOD in model.get("supportedGenerationMethods", []):
                    models.append(model)

            page_token = data.get("nextPageToken")
            if not page_token:
                break
            params = {"pageSize": 1000, "pageToken": page_token}

        return models
