"""Tests for the remote scoring prompt."""

from review_confidence.corpus.domain.exemplar import ReferenceExemplar
from review_confidence.scoring.domain.context import derive_context
from review_confidence.scoring.infrastructure.prompt import build_user_prompt
from tests.scoring.payloads import make_request


def _prompt(max_exemplars: int = 20, exemplar_count: int = 3, **kwargs: object) -> str:
    request = make_request(**kwargs)  # type: ignore[arg-type]
    exemplars = [
        ReferenceExemplar(text=f"exemplar number {i}", score=i)
        for i in range(exemplar_count)
    ]
    return build_user_prompt(
        review=request.review_data,
        context=derive_context(request),
        exemplars=exemplars,
        max_exemplars=max_exemplars,
    )


class TestBuildUserPrompt:
    def test_embeds_review_and_ratings(self) -> None:
        prompt = _prompt(review="Crispy crust", ratings=(5, 4, 3, 2, 1))

        assert '- Review Text: "Crispy crust"' in prompt
        assert "- Overall Rating: 5/5" in prompt
        assert "- Food Quality: 4/5" in prompt
        assert "- Value: 1/5" in prompt

    def test_embeds_order_context(self) -> None:
        prompt = _prompt(
            items=["Margherita Pizza"],
            total=18.0,
            price_range="$$",
            preferences=["italian", "thai"],
        )

        assert "- Ordered Items: Margherita Pizza" in prompt
        assert "- Restaurant Cuisine: Italian" in prompt
        assert "- User Preferences: italian, thai" in prompt
        assert "- Expected Spending: $20" in prompt
        assert "- Actual Spending: $18" in prompt

    def test_ratio_has_two_decimals(self) -> None:
        prompt = _prompt(total=18.0, price_range="moderate")

        assert "- Spending Ratio: 0.90" in prompt

    def test_limits_exemplars(self) -> None:
        prompt = _prompt(max_exemplars=20, exemplar_count=25)

        assert '"exemplar number 19" (Score: 19)' in prompt
        assert "exemplar number 20" not in prompt

    def test_asks_for_bare_number(self) -> None:
        assert "Provide ONLY the final confidence score as a number (0-100)" in _prompt()


class TestActualSpending:
    def test_large_total_keeps_every_digit(self) -> None:
        prompt = _prompt(total=12345.67)

        assert "- Actual Spending: $12345.67\n" in prompt

    def test_million_total_is_not_exponent_form(self) -> None:
        prompt = _prompt(total=1_000_000.0)

        assert "- Actual Spending: $1000000\n" in prompt

    def test_cents_are_kept(self) -> None:
        prompt = _prompt(total=18.5)

        assert "- Actual Spending: $18.5\n" in prompt
