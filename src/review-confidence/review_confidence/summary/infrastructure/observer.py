"""Structlog implementation of the SummaryObserver port."""

import structlog


class StructlogSummaryObserver:
    """Delegates summary domain events to structlog.

    Satisfies the SummaryObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def summary_started(self, model: str, review_count: int) -> None:
        self._log.info("summary.started", model=model, review_count=review_count)

    def summary_completed(self, model: str, duration_ms: int) -> None:
        self._log.info("summary.completed", model=model, duration_ms=duration_ms)

    def summary_failed(self, model: str, reason: str) -> None:
        self._log.warning("summary.failed", model=model, reason=reason)

    def summary_fallback_used(self, review_count: int) -> None:
        self._log.info("summary.fallback_used", review_count=review_count)
