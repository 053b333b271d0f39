"""Base exception class for all review-confidence errors."""


class ReviewConfidenceError(Exception):
    """Base class for all review-confidence errors."""

    def __init__(self, message: str, retriable: bool = False) -> None:
        super().__init__(message)
        self.retriable = retriable
