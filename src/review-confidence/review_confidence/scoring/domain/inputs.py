"""Scoring inputs: the review submission and its order, user and restaurant context."""

from collections.abc import Mapping
from typing import Any

from pydantic import Field, ValidationError

from review_confidence.core.wire import WireModel
from review_confidence.scoring.domain.errors import InvalidInputError


class ReviewInput(WireModel):
    review: str = Field(min_length=1)
    rating: int = Field(ge=1, le=5)
    food_quality: int = Field(ge=1, le=5)
    service: int = Field(ge=1, le=5)
    atmosphere: int = Field(ge=1, le=5)
    value: int = Field(ge=1, le=5)

    @property
    def sub_ratings(self) -> list[int]:
        """The four category ratings, excluding the overall rating."""
        return [self.food_quality, self.service, self.atmosphere, self.value]


class OrderItem(WireModel):
    name: str


class OrderContext(WireModel):
    items: list[OrderItem] = Field(default_factory=list)
    total: float = Field(ge=0)


class UserContext(WireModel):
    selected_categories: list[str] = Field(default_factory=list)
    preferences: list[str] = Field(default_factory=list)

    @property
    def cuisine_preferences(self) -> list[str]:
        """The first non-empty of selectedCategories and preferences."""
        return self.selected_categories or self.preferences


class RestaurantContext(WireModel):
    cuisine: str | None = None
    price_range: str | None = None


class ScoringRequest(WireModel):
    """Everything the engine needs for one confidence-score computation."""

    review_data: ReviewInput
    order_data: OrderContext
    user_data: UserContext
    restaurant_data: RestaurantContext


def parse_scoring_request(payload: Mapping[str, Any]) -> ScoringRequest:
    """
    Validate a raw camelCase payload into a ScoringRequest.

    Raises:
        InvalidInputError: naming the first offending field, dotted from the
            payload root (e.g. ``reviewData.foodQuality``).
    """
    try:
        return ScoringRequest.model_validate(payload)
    except ValidationError as exc:
        raise _to_invalid_input(exc) from exc


def _to_invalid_input(exc: ValidationError) -> InvalidInputError:
    first = exc.errors()[0]
    field = ".".join(str(part) for part in first["loc"]) or "payload"
    if first["type"] == "missing" and len(first["loc"]) == 1:
        return InvalidInputError(field=field, reason="Missing required data")
    if first["type"] == "missing":
        return InvalidInputError(field=field)
    return InvalidInputError(field=field, reason=first["msg"])
