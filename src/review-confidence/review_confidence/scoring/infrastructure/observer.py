"""Structlog implementation of the ScoringObserver port."""

import structlog


class StructlogScoringObserver:
    """Delegates scoring domain events to structlog.

    Satisfies the ScoringObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def remote_scoring_started(self, model: str) -> None:
        self._log.info("scoring.remote_started", model=model)

    def remote_scoring_completed(
        self, model: str, score: int, duration_ms: int
    ) -> None:
        self._log.info(
            "scoring.remote_completed",
            model=model,
            score=score,
            duration_ms=duration_ms,
        )

    def remote_scoring_failed(self, model: str, reason: str) -> None:
        self._log.warning("scoring.remote_failed", model=model, reason=reason)

    def fallback_used(self, reason: str, score: int) -> None:
        self._log.info("scoring.fallback_used", reason=reason, score=score)

    def scoring_completed(self, score: int, source: str) -> None:
        self._log.info("scoring.completed", score=score, source=source)

    def scoring_input_rejected(self, field: str, reason: str) -> None:
        self._log.warning("scoring.input_rejected", field=field, reason=reason)

    def credentials_missing(self, api_key_env: str) -> None:
        self._log.error("scoring.credentials_missing", api_key_env=api_key_env)
