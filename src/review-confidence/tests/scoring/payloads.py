"""Builders for raw scoring payloads and validated requests used across tests."""

from typing import Any

from review_confidence.scoring.domain.inputs import ScoringRequest


def make_payload(
    review: str = "Amazing pizza, crust was perfect and toppings fresh and delicious tonight",
    ratings: tuple[int, int, int, int, int] = (4, 4, 4, 4, 4),
    items: list[str] | None = None,
    total: float = 20.0,
    preferences: list[str] | None = None,
    cuisine: str | None = "Italian",
    price_range: str | None = "moderate",
) -> dict[str, Any]:
    rating, food_quality, service, atmosphere, value = ratings
    return {
        "reviewData": {
            "review": review,
            "rating": rating,
            "foodQuality": food_quality,
            "service": service,
            "atmosphere": atmosphere,
            "value": value,
        },
        "orderData": {
            "items": [
                {"name": name, "quantity": 1, "price": 10.0}
                for name in (items if items is not None else ["Pizza"])
            ],
            "total": total,
        },
        "userData": {
            "selectedCategories": preferences if preferences is not None else [],
        },
        "restaurantData": {"cuisine": cuisine, "priceRange": price_range},
    }


def make_request(**kwargs: Any) -> ScoringRequest:
    return ScoringRequest.model_validate(make_payload(**kwargs))
