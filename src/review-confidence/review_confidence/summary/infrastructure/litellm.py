"""LiteLLMSummarizer: asks a language model for a one-paragraph review summary."""

import asyncio
import json
import time

import litellm

from review_confidence.config.domain.scorer import SummarizerConfig
from review_confidence.core.credentials import ConfigurationError, resolve_api_key
from review_confidence.summary.domain.inputs import SummaryRequest
from review_confidence.summary.domain.observer import SummaryObserver
from review_confidence.summary.domain.errors import SummaryUnavailable

_SYSTEM_PROMPT = (
    "You are a helpful food review analyst. Analyze customer reviews and provide "
    "clear, balanced summaries that help potential customers understand what to "
    "expect from a restaurant."
)

_PROMPT_TEMPLATE = """\
Analyze the following customer reviews for {restaurant_name} and provide a \
concise, helpful summary that gives potential customers a clear understanding \
of what to expect. Focus on:

1. Overall performance and strengths
2. Common themes in customer feedback
3. What customers consistently praise
4. Any areas that could be improved
5. Value for money assessment
6. Atmosphere and service quality
7. Food quality highlights

Reviews data:
{reviews_json}

Please provide a 1 paragraph summary that is:
- Informative but not too long
- Balanced and fair
- Helpful for decision-making
- Written in a friendly, conversational tone
- Focused on what customers can expect

Format the response as a clean summary without any markdown formatting or \
bullet points."""


def build_summary_prompt(request: SummaryRequest) -> str:
    records = [r.model_dump(by_alias=True) for r in request.reviews]
    return _PROMPT_TEMPLATE.format(
        restaurant_name=request.restaurant_name,
        reviews_json=json.dumps(records, indent=2),
    )


class LiteLLMSummarizer:
    """Summarizer that delegates to an LLM via LiteLLM."""

    def __init__(self, config: SummarizerConfig, observer: SummaryObserver) -> None:
        self._config = config
        self._observer = observer

    def check_configuration(self) -> None:
        """
        Raises:
            ConfigurationError: if the credential environment variable is unset.
        """
        if resolve_api_key(self._config.api_key_env) is None:
            raise ConfigurationError(api_key_env=self._config.api_key_env)

    async def summarize(self, request: SummaryRequest) -> str:
        """
        Raises:
            SummaryUnavailable: if the call fails, times out, or returns no text.
        """
        model = self._config.model
        self._observer.summary_started(model=model, review_count=len(request.reviews))

        start = time.monotonic()
        try:
            response = await asyncio.wait_for(
                litellm.acompletion(
                    model=model,
                    api_key=resolve_api_key(self._config.api_key_env),
                    temperature=self._config.temperature,
                    max_tokens=self._config.max_tokens,
                    timeout=self._config.timeout_seconds,
                    messages=[
                        {"role": "system", "content": _SYSTEM_PROMPT},
                        {"role": "user", "content": build_summary_prompt(request)},
                    ],
                ),
                timeout=self._config.timeout_seconds,
            )
            summary = (response.choices[0].message.content or "").strip()
        except TimeoutError as exc:
            raise self._fail(
                f"no response within {self._config.timeout_seconds}s"
            ) from exc
        except Exception as exc:
            raise self._fail(str(exc)) from exc

        if not summary:
            raise self._fail("empty summary")

        self._observer.summary_completed(
            model=model, duration_ms=int((time.monotonic() - start) * 1000)
        )
        return summary

    def _fail(self, reason: str) -> SummaryUnavailable:
        self._observer.summary_failed(model=self._config.model, reason=reason)
        return SummaryUnavailable(reason=reason)
