"""Text corpus loader: reads "text,score" lines into ReferenceExemplar objects."""

from pathlib import Path

from review_confidence.core.numbers import parse_leading_int
from review_confidence.corpus.domain.exemplar import ReferenceExemplar
from review_confidence.corpus.domain.observer import CorpusObserver
from review_confidence.corpus.infrastructure.errors import CorpusLoadError


class TextCorpusLoader:
    """Loads a line-oriented "text,score" corpus and caches it per path.

    The loader is meant to be owned by the hosting application so that the
    cache lives for the whole process. Malformed lines are skipped, not
    reported as errors.
    """

    def __init__(self, observer: CorpusObserver) -> None:
        self._observer = observer
        self._cache: dict[Path, list[ReferenceExemplar]] = {}

    def load(self, path: Path) -> list[ReferenceExemplar]:
        """
        Return every well-formed exemplar in the file at path, in file order.

        Raises:
            CorpusLoadError: if the file is missing or cannot be decoded.
        """
        key = path.resolve()
        cached = self._cache.get(key)
        if cached is not None:
            self._observer.corpus_cache_hit(path=str(path))
            return list(cached)

        path_str = str(path)
        self._observer.corpus_loading_started(path=path_str)

        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            reason = f"{type(exc).__name__}: {path_str}"
            self._observer.corpus_loading_failed(path=path_str, reason=reason)
            raise CorpusLoadError(reason=reason) from exc

        exemplars: list[ReferenceExemplar] = []
        skipped = 0
        for line_number, line in enumerate(text.splitlines(), start=1):
            if not line.strip():
                continue
            exemplar = _parse_line(line)
            if exemplar is None:
                skipped += 1
                self._observer.corpus_line_skipped(
                    path=path_str, line_number=line_number
                )
                continue
            exemplars.append(exemplar)

        self._cache[key] = exemplars
        self._observer.corpus_loading_completed(
            path=path_str,
            total_exemplars=len(exemplars),
            skipped_lines=skipped,
        )
        return list(exemplars)


def _parse_line(line: str) -> ReferenceExemplar | None:
    """Split on the last comma so that commas inside the review text survive."""
    text, sep, raw_score = line.rpartition(",")
    if not sep:
        return None
    text = text.strip()
    score = parse_leading_int(raw_score)
    if not text or score is None:
        return None
    return ReferenceExemplar(text=text, score=score)
