"""FakeCorpusLoader: returns canned exemplars without touching the filesystem."""

import threading
from pathlib import Path

from review_confidence.corpus.domain.exemplar import ReferenceExemplar

_DEFAULT_EXEMPLARS = [
    ReferenceExemplar(text="Great food", score=20),
    ReferenceExemplar(text="Good pizza love it", score=35),
]


class FakeCorpusLoader:
    def __init__(
        self,
        exemplars: list[ReferenceExemplar] | None = None,
        error: Exception | None = None,
    ) -> None:
        self._exemplars = exemplars if exemplars is not None else _DEFAULT_EXEMPLARS
        self._error = error
        self.paths_loaded: list[Path] = []
        self.loading_threads: list[int] = []

    def load(self, path: Path) -> list[ReferenceExemplar]:
        self.paths_loaded.append(path)
        self.loading_threads.append(threading.get_ident())
        if self._error is not None:
            raise self._error
        return list(self._exemplars)
