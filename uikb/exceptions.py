"""
UIKB Exceptions

Every error raised on purpose by uikb derives from UIKBError, which carries
a human message plus an optional dict of structured details.

    try:
        run_build(get_paths())
    except DiscoveryError as e:
        logger.error(f"Build failed: {e}")
"""


class UIKBError(Exception):
    """Root of the uikb error hierarchy."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        return f"{self.message} ({self.details})"


# --- Configuration ---


class ConfigurationError(UIKBError):
    """uikb.yaml or the environment is unusable."""


class MissingConfigError(ConfigurationError):
    """A required setting (e.g. GEMINI_API_KEY) is absent."""


# --- Extraction ---


class ExtractionError(UIKBError):
    """Build-time failure that aborts the whole run."""


class DiscoveryError(ExtractionError):
    """The stories root does not exist."""


# --- Hosted model ---


class LLMError(UIKBError):
    """Talking to the hosted model failed."""


class LLMConnectionError(LLMError):
    """Could not reach the model API."""


class LLMTimeoutError(LLMError):
    """The model API did not answer in time."""


class LLMResponseError(LLMError):
    """The model API answered with an error or an unusable payload."""
