"""DerivedContext: facts computed once from a ScoringRequest and shared by every scorer."""

from pydantic import BaseModel

from review_confidence.scoring.domain.inputs import ScoringRequest

# Flat per-person USD baseline for each price tier.
_EXPECTED_SPENDING: dict[str, int] = {
    "budget": 10,
    "moderate": 20,
    "premium": 35,
    "luxury": 20,
}
_DEFAULT_EXPECTED_SPENDING = 20

_PRICE_SYMBOLS: dict[str, str] = {
    "$": "budget",
    "$$": "moderate",
    "$$$": "premium",
    "$$$$": "luxury",
}


class DerivedContext(BaseModel, frozen=True):
    order_items: str
    restaurant_cuisine: str | None
    user_preferences: list[str]
    expected_spending: int
    actual_spending: float
    spending_ratio: float
    cuisine_match: bool


def expected_spending(price_range: str | None) -> int:
    """Return the per-person baseline for a price tier token or $-symbol."""
    if price_range is None:
        return _DEFAULT_EXPECTED_SPENDING
    token = price_range.strip().lower()
    tier = _PRICE_SYMBOLS.get(token, token)
    return _EXPECTED_SPENDING.get(tier, _DEFAULT_EXPECTED_SPENDING)


def cuisine_matches(preferences: list[str], cuisine: str | None) -> bool:
    if cuisine is None:
        return False
    wanted = cuisine.lower()
    return any(pref.lower() == wanted for pref in preferences)


def derive_context(request: ScoringRequest) -> DerivedContext:
    order = request.order_data
    restaurant = request.restaurant_data
    preferences = request.user_data.cuisine_preferences
    expected = expected_spending(restaurant.price_range)

    return DerivedContext(
        order_items=", ".join(item.name for item in order.items),
        restaurant_cuisine=restaurant.cuisine,
        user_preferences=list(preferences),
        expected_spending=expected,
        actual_spending=order.total,
        spending_ratio=order.total / expected,
        cuisine_match=cuisine_matches(preferences, restaurant.cuisine),
    )
