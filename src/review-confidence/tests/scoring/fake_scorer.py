"""FakeScorer: in-memory Scorer implementation for use in tests."""

from review_confidence.corpus.domain.exemplar import ReferenceExemplar
from review_confidence.scoring.domain.context import DerivedContext
from review_confidence.scoring.domain.inputs import ScoringRequest
from review_confidence.scoring.domain.result import ScoreOutcome, ScoreSource
from review_confidence.scoring.domain.errors import RemoteScoringUnavailable


class FakeScorer:
    """Satisfies the Scorer protocol.

    Returns a canned outcome, or raises the configured error from score()
    or check_configuration().
    """

    def __init__(
        self,
        outcome: ScoreOutcome | None = None,
        error: Exception | None = None,
        configuration_error: Exception | None = None,
    ) -> None:
        self._outcome = outcome or ScoreOutcome(score=77, source=ScoreSource.REMOTE)
        self._error = error
        self._configuration_error = configuration_error
        self.calls: list[tuple[ScoringRequest, DerivedContext, list[ReferenceExemplar]]] = []
        self.configuration_checks = 0

    def check_configuration(self) -> None:
        self.configuration_checks += 1
        if self._configuration_error is not None:
            raise self._configuration_error

    async def score(
        self,
        request: ScoringRequest,
        context: DerivedContext,
        exemplars: list[ReferenceExemplar],
    ) -> ScoreOutcome:
        self.calls.append((request, context, exemplars))
        if self._error is not None:
            raise self._error
        return self._outcome


def unavailable(reason: str = "connection refused") -> RemoteScoringUnavailable:
    return RemoteScoringUnavailable(reason=reason)
