"""Summary inputs: the stored reviews of one restaurant."""

from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from pydantic import Field, ValidationError

from review_confidence.core.wire import WireModel
from review_confidence.scoring.domain.errors import InvalidInputError


class ReviewRecord(WireModel):
    rating: int = Field(ge=1, le=5)
    review: str = ""
    food_quality: int | None = None
    service: int | None = None
    atmosphere: int | None = None
    value: int | None = None
    order_total: float | None = None
    confidence_score: int | None = None


class SummaryRequest(WireModel):
    reviews: list[ReviewRecord] = Field(min_length=1)
    restaurant_name: str = ""

    @property
    def average_rating(self) -> float:
        return sum(r.rating for r in self.reviews) / len(self.reviews)

    @property
    def average_rating_text(self) -> str:
        return one_decimal(self.average_rating)


def one_decimal(value: float) -> str:
    """Format value with one decimal place, rounding ties away from zero.

    Rounds the exact binary value of the float, so 2.25 gives "2.3" while
    1.15 (stored as 1.1499...) gives "1.1".
    """
    return str(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def parse_summary_request(payload: Mapping[str, Any]) -> SummaryRequest:
    """
    Raises:
        InvalidInputError: if reviews is missing or empty, or a record is malformed.
    """
    if not payload.get("reviews"):
        raise InvalidInputError(field="reviews", reason="no reviews provided")
    try:
        return SummaryRequest.model_validate(payload)
    except ValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or "payload"
        raise InvalidInputError(field=field, reason=first["msg"]) from exc
