"""Scorer Protocol: structural interface for all confidence scorers."""

from typing import Protocol

from review_confidence.corpus.domain.exemplar import ReferenceExemplar
from review_confidence.scoring.domain.context import DerivedContext
from review_confidence.scoring.domain.inputs import ScoringRequest
from review_confidence.scoring.domain.result import ScoreOutcome


class Scorer(Protocol):
    """Structural interface satisfied by the remote, local and fallback scorers."""

    def check_configuration(self) -> None: ...

    async def score(
        self,
        request: ScoringRequest,
        context: DerivedContext,
        exemplars: list[ReferenceExemplar],
    ) -> ScoreOutcome: ...
