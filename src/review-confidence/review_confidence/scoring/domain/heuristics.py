"""Deterministic rubric used by the local fallback scorer and the breakdown.

Base score = context matching (0-60) + detail level (0-40).
Bonus = spending (0-15) + preference (0-10) + rating consistency (0-10).
The final score is the sum clamped to [0, 100].
"""

import statistics

from review_confidence.scoring.domain.context import DerivedContext
from review_confidence.scoring.domain.inputs import ReviewInput

MIN_SCORE = 0
MAX_SCORE = 100

# Checked in order; the first keyword present in both order and review wins.
CONTEXT_KEYWORDS: tuple[str, ...] = ("pizza", "sushi", "pasta", "burger")
GENERIC_FOOD_WORDS: tuple[str, ...] = ("food", "meal", "dish")

HIGH_CONTEXT_POINTS = 50
PARTIAL_CONTEXT_POINTS = 30
LOW_CONTEXT_POINTS = 10

# (minimum characters, points, label), highest bucket first.
DETAIL_BUCKETS: tuple[tuple[int, int, str], ...] = (
    (100, 35, "Very Detailed"),
    (50, 25, "Medium"),
    (20, 15, "Basic"),
)
SHORT_DETAIL_POINTS = 5
SHORT_DETAIL_LABEL = "Short"

ABOVE_EXPECTED_RATIO = 1.2
EXPECTED_RANGE_FLOOR = 0.8

PREFERENCE_MATCH_POINTS = 8


def context_match_points(order_items: str, review: str) -> int:
    order_lower = order_items.lower()
    review_lower = review.lower()
    for keyword in CONTEXT_KEYWORDS:
        if keyword in order_lower and keyword in review_lower:
            return HIGH_CONTEXT_POINTS
    if any(word in review_lower for word in GENERIC_FOOD_WORDS):
        return PARTIAL_CONTEXT_POINTS
    return LOW_CONTEXT_POINTS


def context_match_label(order_items: str, review: str) -> str:
    # Only the pizza check feeds the label, unlike context_match_points.
    if "pizza" in order_items.lower() and "pizza" in review.lower():
        return "High"
    return "Partial"


def detail_points(review: str) -> int:
    length = len(review)
    for minimum, points, _ in DETAIL_BUCKETS:
        if length >= minimum:
            return points
    return SHORT_DETAIL_POINTS


def detail_label(review: str) -> str:
    length = len(review)
    for minimum, _, label in DETAIL_BUCKETS:
        if length >= minimum:
            return label
    return SHORT_DETAIL_LABEL


def spending_points(ratio: float) -> int:
    if ratio > ABOVE_EXPECTED_RATIO:
        return 8
    if ratio >= EXPECTED_RANGE_FLOOR:
        return 5
    return 2


def spending_label(ratio: float) -> str:
    if ratio > ABOVE_EXPECTED_RATIO:
        return "Above Expected"
    if ratio >= EXPECTED_RANGE_FLOOR:
        return "Expected Range"
    return "Below Expected"


def preference_points(cuisine_match: bool) -> int:
    return PREFERENCE_MATCH_POINTS if cuisine_match else 0


def rating_variance(ratings: list[int]) -> float:
    """Population variance of the ratings around their mean."""
    return float(statistics.pvariance(ratings))


def consistency_points(variance: float) -> int:
    if variance <= 1:
        return 8
    if variance <= 2:
        return 5
    return 2


def clamp_score(score: int) -> int:
    return max(MIN_SCORE, min(MAX_SCORE, score))


def fallback_score(review: ReviewInput, context: DerivedContext) -> int:
    """Compute the full rubric score for one review in its context."""
    base = context_match_points(context.order_items, review.review) + detail_points(
        review.review
    )
    bonus = (
        spending_points(context.spending_ratio)
        + preference_points(context.cuisine_match)
        + consistency_points(rating_variance(review.sub_ratings))
    )
    return clamp_score(base + bonus)
