"""Builds the ConfidenceBreakdown reported alongside every score."""

from review_confidence.scoring.domain import heuristics
from review_confidence.scoring.domain.context import DerivedContext
from review_confidence.scoring.domain.inputs import ReviewInput
from review_confidence.scoring.domain.result import (
    ConfidenceBreakdown,
    ContextMatch,
    DetailLevel,
    PreferenceMatch,
    RatingConsistency,
    SpendingContext,
)


def build_breakdown(review: ReviewInput, context: DerivedContext) -> ConfidenceBreakdown:
    """Describe the inputs to the rubric, independent of which scorer ran."""
    return ConfidenceBreakdown(
        context_match=ContextMatch(
            order_items=context.order_items,
            review_text=review.review,
            match_quality=heuristics.context_match_label(
                context.order_items, review.review
            ),
        ),
        detail_level=DetailLevel(
            character_count=len(review.review),
            level=heuristics.detail_label(review.review),
        ),
        spending_context=SpendingContext(
            expected=context.expected_spending,
            actual=context.actual_spending,
            ratio=context.spending_ratio,
            bonus=heuristics.spending_label(context.spending_ratio),
        ),
        preference_match=PreferenceMatch(
            matched=context.cuisine_match,
            user_preferences=", ".join(context.user_preferences),
            restaurant_cuisine=context.restaurant_cuisine,
        ),
        rating_consistency=RatingConsistency(
            overall=review.rating,
            food_quality=review.food_quality,
            service=review.service,
            atmosphere=review.atmosphere,
            value=review.value,
        ),
    )
