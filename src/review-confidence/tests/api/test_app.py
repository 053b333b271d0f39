"""Tests for the FastAPI application."""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from review_confidence.api.app import create_app
from review_confidence.core.credentials import ConfigurationError
from review_confidence.core.errors import ReviewConfidenceError
from review_confidence.corpus.infrastructure.errors import CorpusLoadError
from review_confidence.scoring.application.engine import ConfidenceEngine
from review_confidence.summary.application.service import ReviewSummaryService
from tests.corpus.fake_loader import FakeCorpusLoader
from tests.scoring.fake_observer import FakeScoringObserver
from tests.scoring.fake_scorer import FakeScorer
from tests.scoring.payloads import make_payload
from tests.summary.fakes import FakeSummarizer, FakeSummaryObserver

_CONFIDENCE = "/api/reviews/calculate-confidence"
_SUMMARY = "/api/reviews/summary"


def _client(
    scorer: FakeScorer | None = None,
    loader: FakeCorpusLoader | None = None,
    summarizer: FakeSummarizer | None = None,
) -> TestClient:
    engine = ConfidenceEngine(
        scorer=scorer or FakeScorer(),
        corpus_loader=loader or FakeCorpusLoader(),
        corpus_path=Path("reviews.txt"),
        observer=FakeScoringObserver(),
    )
    service = ReviewSummaryService(
        summarizer=summarizer or FakeSummarizer(), observer=FakeSummaryObserver()
    )
    return TestClient(create_app(engine=engine, summary_service=service))


class TestHealth:
    def test_health(self) -> None:
        response = _client().get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


class TestCalculateConfidence:
    def test_success(self) -> None:
        response = _client().post(_CONFIDENCE, json=make_payload())

        assert response.status_code == 200
        body = response.json()
        assert body["confidenceScore"] == 77
        assert body["source"] == "remote"
        assert set(body["breakdown"]) >= {
            "scoringSystem",
            "contextMatch",
            "detailLevel",
            "spendingContext",
            "preferenceMatch",
            "ratingConsistency",
        }

    def test_missing_section_is_bad_request(self) -> None:
        payload = make_payload()
        del payload["orderData"]

        response = _client().post(_CONFIDENCE, json=payload)

        assert response.status_code == 400
        assert response.json()["field"] == "orderData"

    def test_missing_credential_returns_instructions(self) -> None:
        scorer = FakeScorer(configuration_error=ConfigurationError("OPENAI_API_KEY"))

        response = _client(scorer=scorer).post(_CONFIDENCE, json=make_payload())

        assert response.status_code == 500
        body = response.json()
        assert "OPENAI_API_KEY" in body["message"]
        assert body["instructions"]

    def test_unreadable_corpus(self) -> None:
        loader = FakeCorpusLoader(error=CorpusLoadError(reason="permission denied"))

        response = _client(loader=loader).post(_CONFIDENCE, json=make_payload())

        assert response.status_code == 500
        assert "permission denied" in response.json()["message"]

    def test_unexpected_error_is_internal(self) -> None:
        scorer = FakeScorer(error=ReviewConfidenceError("Failed to score: boom"))

        response = _client(scorer=scorer).post(_CONFIDENCE, json=make_payload())

        assert response.status_code == 500
        assert response.json() == {
            "message": "Internal server error",
            "error": "Failed to score: boom",
        }

    @pytest.mark.parametrize("body", ["[1, 2]", "\"text\"", "null", "{not json"])
    def test_body_that_is_not_an_object_is_bad_request(self, body: str) -> None:
        response = _client().post(
            _CONFIDENCE, content=body, headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400
        assert response.json()["field"] == "payload"
        assert response.json()["message"].startswith("Invalid input")

    def test_unknown_path_is_not_found(self) -> None:
        assert _client().get("/favicon.ico").status_code == 404

    def test_get_not_allowed(self) -> None:
        assert _client().get(_CONFIDENCE).status_code == 405


class TestSummary:
    def test_success(self) -> None:
        response = _client().post(
            _SUMMARY,
            json={"restaurantName": "Trattoria", "reviews": [{"rating": 4}]},
        )

        assert response.status_code == 200
        assert response.json() == {
            "summary": "Diners love the pizza.",
            "reviewCount": 1,
            "averageRating": "4.0",
            "source": "remote",
        }

    @pytest.mark.parametrize("payload", [{}, {"reviews": []}])
    def test_no_reviews(self, payload: dict) -> None:
        response = _client().post(_SUMMARY, json=payload)

        assert response.status_code == 400
        assert response.json()["field"] == "reviews"
