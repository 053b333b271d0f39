"""ScoringObserver port: domain events emitted while computing a confidence score."""

from typing import Protocol


class ScoringObserver(Protocol):
    """Observer port for scoring domain events.

    Implementations may log to structlog or record for tests.
    """

    def remote_scoring_started(self, model: str) -> None: ...

    def remote_scoring_completed(
        self, model: str, score: int, duration_ms: int
    ) -> None: ...

    def remote_scoring_failed(self, model: str, reason: str) -> None: ...

    def fallback_used(self, reason: str, score: int) -> None: ...

    def scoring_completed(self, score: int, source: str) -> None: ...

    def scoring_input_rejected(self, field: str, reason: str) -> None: ...

    def credentials_missing(self, api_key_env: str) -> None: ...
