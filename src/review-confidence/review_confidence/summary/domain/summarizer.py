"""Summarizer Protocol: structural interface for review summary generators."""

from typing import Protocol

from review_confidence.summary.domain.inputs import SummaryRequest


class Summarizer(Protocol):
    def check_configuration(self) -> None: ...

    async def summarize(self, request: SummaryRequest) -> str: ...
