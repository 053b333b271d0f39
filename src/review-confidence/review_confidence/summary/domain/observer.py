"""SummaryObserver port: domain events emitted while summarising reviews."""

from typing import Protocol


class SummaryObserver(Protocol):
    def summary_started(self, model: str, review_count: int) -> None: ...

    def summary_completed(self, model: str, duration_ms: int) -> None: ...

    def summary_failed(self, model: str, reason: str) -> None: ...

    def summary_fallback_used(self, review_count: int) -> None: ...
