"""Remote model credential lookup shared by the scorer and the summarizer."""

import os

from review_confidence.core.errors import ReviewConfidenceError

# Value shipped in the sample env file; treated the same as an unset key.
PLACEHOLDER_API_KEY = "your_openai_api_key_here"


class ConfigurationError(ReviewConfidenceError):
    """Raised when the remote model credential is not configured."""

    def __init__(self, api_key_env: str) -> None:
        self.api_key_env = api_key_env
        self.instructions = f"Please set {api_key_env} in the environment or .env file"
        super().__init__(f"Failed to configure remote model: {api_key_env} is not set")


def resolve_api_key(api_key_env: str) -> str | None:
    """Return the credential stored in api_key_env, or None if unset or placeholder."""
    value = os.environ.get(api_key_env, "").strip()
    if not value or value == PLACEHOLDER_API_KEY:
        return None
    return value
