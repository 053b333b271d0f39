"""Structlog implementation of the CorpusObserver port."""

import structlog


class StructlogCorpusObserver:
    """Delegates corpus domain events to structlog.

    Satisfies the CorpusObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def corpus_loading_started(self, path: str) -> None:
        self._log.info("corpus.loading_started", path=path)

    def corpus_line_skipped(self, path: str, line_number: int) -> None:
        self._log.debug("corpus.line_skipped", path=path, line_number=line_number)

    def corpus_loading_completed(
        self, path: str, total_exemplars: int, skipped_lines: int
    ) -> None:
        self._log.info(
            "corpus.loading_completed",
            path=path,
            total_exemplars=total_exemplars,
            skipped_lines=skipped_lines,
        )

    def corpus_loading_failed(self, path: str, reason: str) -> None:
        self._log.error("corpus.loading_failed", path=path, reason=reason)

    def corpus_cache_hit(self, path: str) -> None:
        self._log.debug("corpus.cache_hit", path=path)
