"""ConfidenceResult: the score plus a breakdown of the facts behind it."""

from enum import StrEnum

from pydantic import BaseModel, Field

from review_confidence.core.wire import WireModel


class ScoreSource(StrEnum):
    REMOTE = "remote"
    FALLBACK = "fallback"


class ScoreOutcome(BaseModel, frozen=True):
    """A score together with the scorer branch that produced it."""

    score: int = Field(ge=0, le=100)
    source: ScoreSource


class CoreRubric(WireModel):
    context_matching: str = "0-60 points (60% of base score)"
    detail_level: str = "0-40 points (40% of base score)"


class BonusRubric(WireModel):
    spending_context: str = "0-15 bonus points"
    preference_match: str = "0-10 bonus points"
    rating_consistency: str = "0-10 bonus points"


class ScoringSystem(WireModel):
    core: CoreRubric = Field(default_factory=CoreRubric)
    bonus: BonusRubric = Field(default_factory=BonusRubric)


class ContextMatch(WireModel):
    order_items: str
    review_text: str
    match_quality: str


class DetailLevel(WireModel):
    character_count: int
    level: str


class SpendingContext(WireModel):
    expected: int
    actual: float
    ratio: float
    bonus: str


class PreferenceMatch(WireModel):
    matched: bool
    user_preferences: str
    restaurant_cuisine: str | None


class RatingConsistency(WireModel):
    overall: int
    food_quality: int
    service: int
    atmosphere: int
    value: int


class ConfidenceBreakdown(WireModel):
    scoring_system: ScoringSystem = Field(default_factory=ScoringSystem)
    context_match: ContextMatch
    detail_level: DetailLevel
    spending_context: SpendingContext
    preference_match: PreferenceMatch
    rating_consistency: RatingConsistency


class ConfidenceResult(WireModel):
    """Immutable result of one confidence-score computation.

    Serialise with ``model_dump(by_alias=True)`` for the camelCase wire shape.
    """

    confidence_score: int = Field(ge=0, le=100)
    breakdown: ConfidenceBreakdown
    source: ScoreSource
