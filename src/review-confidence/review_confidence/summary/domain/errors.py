"""Error types raised while summarising reviews."""

from review_confidence.core.errors import ReviewConfidenceError


class SummaryUnavailable(ReviewConfidenceError):
    """Raised when the remote model cannot produce a summary."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to summarise reviews: {reason}", retriable=True)
