"""CorpusLoader Protocol: structural interface for loading reference exemplars."""

from pathlib import Path
from typing import Protocol

from review_confidence.corpus.domain.exemplar import ReferenceExemplar


class CorpusLoader(Protocol):
    """Loads the ordered list of ReferenceExemplar objects stored at path."""

    def load(self, path: Path) -> list[ReferenceExemplar]: ...
