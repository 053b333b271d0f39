"""Error types raised while scoring a review."""

from review_confidence.core.errors import ReviewConfidenceError


class InvalidInputError(ReviewConfidenceError):
    """Raised when a required input field is missing or malformed."""

    def __init__(self, field: str, reason: str = "missing required field") -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid input: {reason}: '{field}'")


class RemoteScoringUnavailable(ReviewConfidenceError):
    """Raised when the remote model cannot produce a usable score.

    Never surfaced to callers: the fallback scorer recovers from it.
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to score review remotely: {reason}", retriable=True)
