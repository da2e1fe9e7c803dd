"""
UIKB Constants

Static configuration values that rarely change: file naming conventions,
placeholder text, hosted model defaults and timeout configuration.
"""

# --- Component Library Conventions ---

STORIES_SUFFIX = ".stories.ts"
COMPONENT_SUFFIX = ".component.ts"
DOC_SUFFIXES = (".doc.mdx", ".doc.md")

# Directories never descended into during discovery
IGNORED_DIRS = {
    "node_modules",
    "dist",
    "coverage",
    ".angular",
    ".storybook",
}

# --- Knowledge Base ---

DEFAULT_OUTPUT_FILENAME = "knowledge_base.json"
AI_HINT_PLACEHOLDER = "COMPLETE AI HINT"
NO_PAYLOAD_TYPE = "void"

# --- Hosted Model ---

GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-1.5-flash-latest"
API_KEY_ENV_VAR = "GEMINI_API_KEY"
GENERATE_CONTENT_METHOD = "generateContent"

# --- Timeout Configuration ---
# Centralized timeout values (in seconds)

TIMEOUTS = {
    # HTTP requests
    "http_default": 10,  # Default HTTP request timeout
    "http_list_models": 15,  # Model listing
    "http_llm_request": 120,  # Generation requests (can be slow)
}


def get_timeout(key: str, default: int | float | None = None) -> int | float:
    """
    Get a timeout value by key.

    Args:
        key: Timeout key from TIMEOUTS dict
        default: Default value if key not found

    Returns:
        Timeout value in seconds
    """
    if default is None:
        default = TIMEOUTS.get("http_default", 10)
    return TIMEOUTS.get(key, default)
