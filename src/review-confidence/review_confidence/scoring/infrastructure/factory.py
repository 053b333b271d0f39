"""Builds the production scorer: LiteLLM first, local heuristic as fallback."""

import litellm

from review_confidence.config.domain.scorer import ScorerConfig
from review_confidence.scoring.application.fallback import FallbackScorer
from review_confidence.scoring.domain.local import LocalHeuristicScorer
from review_confidence.scoring.domain.observer import ScoringObserver
from review_confidence.scoring.domain.scorer import Scorer
from review_confidence.scoring.infrastructure.litellm import LiteLLMRemoteScorer


def create_scorer(config: ScorerConfig, observer: ScoringObserver) -> Scorer:
    """Compose the remote scorer with the local heuristic behind one Scorer."""
    litellm.suppress_debug_info = True
    return FallbackScorer(
        primary=LiteLLMRemoteScorer(config=config, observer=observer),
        fallback=LocalHeuristicScorer(),
        observer=observer,
    )
