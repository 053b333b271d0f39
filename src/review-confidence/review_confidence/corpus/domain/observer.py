"""Observer port for the corpus domain: defines events in domain language."""

from typing import Protocol


class CorpusObserver(Protocol):
    def corpus_loading_started(self, path: str) -> None: ...

    def corpus_line_skipped(self, path: str, line_number: int) -> None: ...

    def corpus_loading_completed(
        self, path: str, total_exemplars: int, skipped_lines: int
    ) -> None: ...

    def corpus_loading_failed(self, path: str, reason: str) -> None: ...

    def corpus_cache_hit(self, path: str) -> None: ...
