"""FallbackScorer: tries a primary scorer and recovers with a secondary one."""

from review_confidence.corpus.domain.exemplar import ReferenceExemplar
from review_confidence.scoring.domain.context import DerivedContext
from review_confidence.scoring.domain.inputs import ScoringRequest
from review_confidence.scoring.domain.observer import ScoringObserver
from review_confidence.scoring.domain.result import ScoreOutcome
from review_confidence.scoring.domain.scorer import Scorer
from review_confidence.scoring.domain.errors import RemoteScoringUnavailable


class FallbackScorer:
    """Satisfies the Scorer protocol by composing two scorers.

    The primary score is returned unchanged when it succeeds; the fallback
    replaces it entirely (no blending) when the primary raises
    RemoteScoringUnavailable. Any other error propagates.
    """

    def __init__(
        self, primary: Scorer, fallback: Scorer, observer: ScoringObserver
    ) -> None:
        self._primary = primary
        self._fallback = fallback
        self._observer = observer

    def check_configuration(self) -> None:
        self._primary.check_configuration()
        self._fallback.check_configuration()

    async def score(
        self,
        request: ScoringRequest,
        context: DerivedContext,
        exemplars: list[ReferenceExemplar],
    ) -> ScoreOutcome:
        try:
            return await self._primary.score(request, context, exemplars)
        except RemoteScoringUnavailable as exc:
            outcome = await self._fallback.score(request, context, exemplars)
            self._observer.fallback_used(reason=exc.reason, score=outcome.score)
            return outcome
