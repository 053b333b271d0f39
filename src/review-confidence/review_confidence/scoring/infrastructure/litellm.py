"""LiteLLMRemoteScorer: asks a language model for a bare 0-100 confidence score."""

import asyncio
import time

import litellm

from review_confidence.config.domain.scorer import ScorerConfig
from review_confidence.core.credentials import ConfigurationError, resolve_api_key
from review_confidence.core.numbers import parse_leading_int
from review_confidence.corpus.domain.exemplar import ReferenceExemplar
from review_confidence.scoring.domain.context import DerivedContext
from review_confidence.scoring.domain.heuristics import MAX_SCORE, MIN_SCORE
from review_confidence.scoring.domain.inputs import ScoringRequest
from review_confidence.scoring.domain.observer import ScoringObserver
from review_confidence.scoring.domain.result import ScoreOutcome, ScoreSource
from review_confidence.scoring.domain.errors import RemoteScoringUnavailable
from review_confidence.scoring.infrastructure.prompt import (
    SYSTEM_PROMPT,
    build_user_prompt,
)


class LiteLLMRemoteScorer:
    """Scorer that delegates to an LLM via LiteLLM.

    One instance is shared by the hosting application; it holds no
    per-request state. Every remote failure is raised as
    RemoteScoringUnavailable so that a FallbackScorer can recover from it.
    """

    def __init__(self, config: ScorerConfig, observer: ScoringObserver) -> None:
        self._config = config
        self._observer = observer

    def check_configuration(self) -> None:
        """
        Raises:
            ConfigurationError: if the credential is unset and credentials are
                required by config.
        """
        if resolve_api_key(self._config.api_key_env) is not None:
            return
        if self._config.require_credentials:
            self._observer.credentials_missing(api_key_env=self._config.api_key_env)
            raise ConfigurationError(api_key_env=self._config.api_key_env)

    async def score(
        self,
        request: ScoringRequest,
        context: DerivedContext,
        exemplars: list[ReferenceExemplar],
    ) -> ScoreOutcome:
        """Invoke the remote model once and return its score.

        Raises:
            RemoteScoringUnavailable: if the credential is missing, the call
                fails or times out, or the reply is not an integer in [0, 100].
        """
        model = self._config.model
        api_key = resolve_api_key(self._config.api_key_env)
        if api_key is None:
            raise self._fail(f"{self._config.api_key_env} is not set")

        self._observer.remote_scoring_started(model=model)
        user_message = build_user_prompt(
            review=request.review_data,
            context=context,
            exemplars=exemplars,
            max_exemplars=self._config.max_exemplars,
        )

        start = time.monotonic()
        try:
            response = await asyncio.wait_for(
                litellm.acompletion(
                    model=model,
                    api_key=api_key,
                    temperature=self._config.temperature,
                    max_tokens=self._config.max_tokens,
                    timeout=self._config.timeout_seconds,
                    messages=[
                        {"role": "system", "content": SYSTEM_PROMPT},
                        {"role": "user", "content": user_message},
                    ],
                ),
                timeout=self._config.timeout_seconds,
            )
        except TimeoutError as exc:
            raise self._fail(
                f"no response within {self._config.timeout_seconds}s"
            ) from exc
        except Exception as exc:
            raise self._fail(str(exc)) from exc

        duration_ms = int((time.monotonic() - start) * 1000)

        raw_content = _reply_text(response)
        score = parse_leading_int(raw_content)
        if score is None:
            raise self._fail(f"reply is not a number: {raw_content!r}")
        if not MIN_SCORE <= score <= MAX_SCORE:
            raise self._fail(f"reply out of range: {score}")

        self._observer.remote_scoring_completed(
            model=model, score=score, duration_ms=duration_ms
        )
        return ScoreOutcome(score=score, source=ScoreSource.REMOTE)

    def _fail(self, reason: str) -> RemoteScoringUnavailable:
        self._observer.remote_scoring_failed(model=self._config.model, reason=reason)
        return RemoteScoringUnavailable(reason=reason)


def _reply_text(response: object) -> str:
    try:
        content = response.choices[0].message.content  # type: ignore[attr-defined]
    except (AttributeError, IndexError):
        return ""
    return (content or "").strip()
