"""Prompt construction for the remote confidence scorer."""

from review_confidence.corpus.domain.exemplar import ReferenceExemplar
from review_confidence.scoring.domain.context import DerivedContext
from review_confidence.scoring.domain.inputs import ReviewInput

SYSTEM_PROMPT = (
    "You are an expert food review analyst. Calculate confidence scores based on "
    "the given criteria. Respond with only the final score number."
)

_RUBRIC = """\
CONFIDENCE SCORING CRITERIA:

CORE SCORING (Base 100 points):
1. CONTEXT MATCHING (60% of base score = 60 points):
   - Does the review text match the ordered items? (0-60 points)
   - If reviewing pizza but ordered sushi, deduct heavily (0-20 points)
   - If reviewing the actual ordered items, give high points (40-60 points)
   - Partial context match gets medium points (20-40 points)

2. DETAIL LEVEL (40% of base score = 40 points):
   - More detailed reviews get higher confidence (0-40 points)
   - Reference these examples for scoring:
{exemplars}
   - Very detailed reviews (100+ chars): 30-40 points
   - Medium detail (50-100 chars): 20-30 points
   - Basic reviews (20-50 chars): 10-20 points
   - Very short reviews (<20 chars): 0-10 points

BONUS POINTS (Additional to base 100):
3. SPENDING CONTEXT (Bonus: +0 to +15 points):
   - If spending is above expected (ratio > 1.2), add 5-10 points
   - If spending matches expected (0.8-1.2), add 2-5 points
   - If spending is below expected (ratio < 0.8), add 0-2 points

4. PREFERENCE MATCH (Bonus: +0 to +10 points):
   - If user preferences match restaurant cuisine, add 5-10 points
   - If no match, no penalty (0 points)

5. RATING CONSISTENCY (Bonus: +0 to +10 points):
   - Check if individual ratings align with overall rating
   - If all ratings are similar, add 5-10 points
   - If ratings are inconsistent, add 0-5 points

CALCULATION:
- Base score = Context Matching (0-60) + Detail Level (0-40)
- Bonus points = Spending Context (0-15) + Preference Match (0-10) + Rating Consistency (0-10)
- Final score = Base score + Bonus points (capped at 100)
- Round to nearest integer

Provide ONLY the final confidence score as a number (0-100), no explanation needed."""


def build_user_prompt(
    review: ReviewInput,
    context: DerivedContext,
    exemplars: list[ReferenceExemplar],
    max_exemplars: int,
) -> str:
    """Render the scoring prompt with at most max_exemplars reference reviews."""
    exemplar_lines = "\n".join(
        f'   - "{exemplar.text}" (Score: {exemplar.score})'
        for exemplar in exemplars[:max_exemplars]
    )
    return (
        "You are an expert food review analyst. Calculate a confidence score "
        "(0-100) for this food review based on the following criteria:\n\n"
        "REVIEW DATA:\n"
        f'- Review Text: "{review.review}"\n'
        f"- Overall Rating: {review.rating}/5\n"
        f"- Food Quality: {review.food_quality}/5\n"
        f"- Service: {review.service}/5\n"
        f"- Atmosphere: {review.atmosphere}/5\n"
        f"- Value: {review.value}/5\n\n"
        "ORDER CONTEXT:\n"
        f"- Ordered Items: {context.order_items}\n"
        f"- Restaurant Cuisine: {context.restaurant_cuisine or ''}\n"
        f"- User Preferences: {', '.join(context.user_preferences)}\n"
        f"- Expected Spending: ${context.expected_spending}\n"
        f"- Actual Spending: ${_amount(context.actual_spending)}\n"
        f"- Spending Ratio: {context.spending_ratio:.2f}\n\n"
        + _RUBRIC.format(exemplars=exemplar_lines)
    )


def _amount(value: float) -> str:
    """Render an order total in full: whole amounts without a trailing ".0"."""
    if value.is_integer():
        return str(int(value))
    return repr(value)
