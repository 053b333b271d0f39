"""Reference corpus configuration model."""

from pathlib import Path

from pydantic import BaseModel


class CorpusConfig(BaseModel, frozen=True):
    path: Path = Path("./data/reviews.txt")
