"""Tests for ReviewSummaryService."""

from typing import Any

import pytest

from review_confidence.core.credentials import ConfigurationError
from review_confidence.scoring.domain.errors import InvalidInputError
from review_confidence.scoring.domain.result import ScoreSource
from review_confidence.summary.application.service import ReviewSummaryService
from review_confidence.summary.domain.errors import SummaryUnavailable
from tests.summary.fakes import FakeSummarizer, FakeSummaryObserver


def _payload(ratings: list[int] | None = None, name: str = "Italian Villa") -> dict[str, Any]:
    return {
        "restaurantName": name,
        "reviews": [
            {"rating": r, "review": f"review {i}", "foodQuality": r}
            for i, r in enumerate(ratings if ratings is not None else [4, 5, 3])
        ],
    }


def _make(summarizer: FakeSummarizer) -> tuple[ReviewSummaryService, FakeSummaryObserver]:
    observer = FakeSummaryObserver()
    return ReviewSummaryService(summarizer=summarizer, observer=observer), observer


class TestSummarizeSuccess:
    async def test_returns_remote_summary(self) -> None:
        service, observer = _make(FakeSummarizer(text="Great spot."))

        summary = await service.summarize_payload(_payload())

        assert summary.summary == "Great spot."
        assert summary.review_count == 3
        assert summary.average_rating == "4.0"
        assert summary.source == ScoreSource.REMOTE
        assert observer.fallbacks == []

    async def test_average_has_one_decimal(self) -> None:
        service, _ = _make(FakeSummarizer())

        summary = await service.summarize_payload(_payload(ratings=[4, 5]))

        assert summary.average_rating == "4.5"

    async def test_quarter_average_rounds_up(self) -> None:
        service, _ = _make(FakeSummarizer(error=SummaryUnavailable(reason="down")))

        summary = await service.summarize_payload(_payload(ratings=[2, 2, 3, 2]))

        assert summary.average_rating == "2.3"
        assert "average rating of 2.3 out of 5 stars" in summary.summary

    async def test_wire_shape(self) -> None:
        service, _ = _make(FakeSummarizer())

        data = (await service.summarize_payload(_payload())).model_dump(
            mode="json", by_alias=True
        )

        assert set(data) == {"summary", "reviewCount", "averageRating", "source"}


class TestSummarizeFallback:
    async def test_unavailable_model_yields_templated_summary(self) -> None:
        service, observer = _make(FakeSummarizer(error=SummaryUnavailable(reason="down")))

        summary = await service.summarize_payload(_payload(ratings=[5, 4]))

        assert summary.summary.startswith(
            "Based on 2 customer reviews, Italian Villa has received an average "
            "rating of 4.5 out of 5 stars."
        )
        assert summary.source == ScoreSource.FALLBACK
        assert observer.fallbacks == [2]


class TestSummarizeErrors:
    @pytest.mark.parametrize("payload", [{}, {"reviews": []}, {"reviews": None}])
    async def test_no_reviews(self, payload: dict[str, Any]) -> None:
        service, _ = _make(FakeSummarizer())

        with pytest.raises(InvalidInputError) as exc_info:
            await service.summarize_payload(payload)

        assert exc_info.value.field == "reviews"

    async def test_missing_credential(self) -> None:
        service, _ = _make(
            FakeSummarizer(configuration_error=ConfigurationError("OPENAI_API_KEY"))
        )

        with pytest.raises(ConfigurationError):
            await service.summarize_payload(_payload())

    async def test_reviews_are_validated_before_credentials(self) -> None:
        service, _ = _make(
            FakeSummarizer(configuration_error=ConfigurationError("OPENAI_API_KEY"))
        )

        with pytest.raises(InvalidInputError):
            await service.summarize_payload({"reviews": []})
