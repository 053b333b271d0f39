"""Error types raised by corpus infrastructure."""

from review_confidence.core.errors import ReviewConfidenceError


class CorpusLoadError(ReviewConfidenceError):
    """Raised when the reference corpus file cannot be read at all."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to load reference corpus: {reason}")
