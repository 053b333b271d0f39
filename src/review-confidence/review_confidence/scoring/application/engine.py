"""ConfidenceEngine: computes a review's confidence score and its breakdown."""

import asyncio
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from review_confidence.corpus.domain.loader import CorpusLoader
from review_confidence.scoring.domain.breakdown import build_breakdown
from review_confidence.scoring.domain.context import derive_context
from review_confidence.scoring.domain.errors import InvalidInputError
from review_confidence.scoring.domain.inputs import (
    ScoringRequest,
    parse_scoring_request,
)
from review_confidence.scoring.domain.observer import ScoringObserver
from review_confidence.scoring.domain.result import ConfidenceResult
from review_confidence.scoring.domain.scorer import Scorer


class ConfidenceEngine:
    """Orchestrates one confidence-score computation.

    The engine is free of infrastructure dependencies: the scorer, corpus
    loader and observer are injected, and the hosting application owns their
    lifecycle. It holds no per-request state and may be called concurrently.
    """

    def __init__(
        self,
        scorer: Scorer,
        corpus_loader: CorpusLoader,
        corpus_path: Path,
        observer: ScoringObserver,
    ) -> None:
        self._scorer = scorer
        self._corpus_loader = corpus_loader
        self._corpus_path = corpus_path
        self._observer = observer

    async def compute_from_payload(self, payload: Mapping[str, Any]) -> ConfidenceResult:
        """Validate a raw camelCase payload, then compute its confidence score.

        The credential check runs before input validation.

        Raises:
            ConfigurationError: if the remote credential is required but unset.
            InvalidInputError: if a required field is missing or malformed.
            CorpusLoadError: if the reference corpus cannot be read.
        """
        self._scorer.check_configuration()
        try:
            request = parse_scoring_request(payload)
        except InvalidInputError as exc:
            self._observer.scoring_input_rejected(field=exc.field, reason=exc.reason)
            raise
        return await self._compute(request)

    async def compute_confidence(self, request: ScoringRequest) -> ConfidenceResult:
        """Compute the confidence score for an already-validated request."""
        self._scorer.check_configuration()
        return await self._compute(request)

    async def _compute(self, request: ScoringRequest) -> ConfidenceResult:
        # First load reads the file; keep it off the event loop.
        exemplars = await asyncio.to_thread(
            self._corpus_loader.load, self._corpus_path
        )
        context = derive_context(request)
        outcome = await self._scorer.score(request, context, exemplars)

        self._observer.scoring_completed(
            score=outcome.score, source=outcome.source.value
        )
        return ConfidenceResult(
            confidence_score=outcome.score,
            breakdown=build_breakdown(request.review_data, context),
            source=outcome.source,
        )
