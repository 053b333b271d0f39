"""ReviewSummaryService: summarises a restaurant's reviews with a templated fallback."""

from collections.abc import Mapping
from typing import Any

from review_confidence.scoring.domain.result import ScoreSource
from review_confidence.summary.domain.inputs import SummaryRequest, parse_summary_request
from review_confidence.summary.domain.observer import SummaryObserver
from review_confidence.summary.domain.result import ReviewSummary
from review_confidence.summary.domain.summarizer import Summarizer
from review_confidence.summary.domain.errors import SummaryUnavailable


class ReviewSummaryService:
    def __init__(self, summarizer: Summarizer, observer: SummaryObserver) -> None:
        self._summarizer = summarizer
        self._observer = observer

    async def summarize_payload(self, payload: Mapping[str, Any]) -> ReviewSummary:
        """
        Raises:
            InvalidInputError: if no reviews are provided.
            ConfigurationError: if the remote credential is unset.
        """
        request = parse_summary_request(payload)
        self._summarizer.check_configuration()
        return await self.summarize(request)

    async def summarize(self, request: SummaryRequest) -> ReviewSummary:
        average = request.average_rating_text
        try:
            text = await self._summarizer.summarize(request)
            source = ScoreSource.REMOTE
        except SummaryUnavailable:
            text = fallback_summary(request)
            source = ScoreSource.FALLBACK
            self._observer.summary_fallback_used(review_count=len(request.reviews))

        return ReviewSummary(
            summary=text,
            review_count=len(request.reviews),
            average_rating=average,
            source=source,
        )


def fallback_summary(request: SummaryRequest) -> str:
    count = len(request.reviews)
    return (
        f"Based on {count} customer reviews, {request.restaurant_name} has received "
        f"an average rating of {request.average_rating_text} out of 5 stars. "
        "Customers have shared their experiences across various aspects including "
        "food quality, service, atmosphere, and value for money. The reviews provide "
        "valuable insights into what you can expect when dining at this establishment."
    )
