"""LocalHeuristicScorer: the deterministic, network-free scorer."""

from review_confidence.corpus.domain.exemplar import ReferenceExemplar
from review_confidence.scoring.domain.context import DerivedContext
from review_confidence.scoring.domain.heuristics import fallback_score
from review_confidence.scoring.domain.inputs import ScoringRequest
from review_confidence.scoring.domain.result import ScoreOutcome, ScoreSource


class LocalHeuristicScorer:
    """Satisfies the Scorer protocol using only the local rubric.

    The exemplars are accepted for interface compatibility and ignored.
    """

    def check_configuration(self) -> None:
        return None

    async def score(
        self,
        request: ScoringRequest,
        context: DerivedContext,
        exemplars: list[ReferenceExemplar],
    ) -> ScoreOutcome:
        return ScoreOutcome(
            score=fallback_score(request.review_data, context),
            source=ScoreSource.FALLBACK,
        )
