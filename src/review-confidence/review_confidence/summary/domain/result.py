"""ReviewSummary: a short prose summary of a restaurant's reviews."""

from review_confidence.core.wire import WireModel
from review_confidence.scoring.domain.result import ScoreSource


class ReviewSummary(WireModel):
    summary: str
    review_count: int
    average_rating: str
    source: ScoreSource
