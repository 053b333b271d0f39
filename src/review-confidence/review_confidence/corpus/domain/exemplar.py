"""ReferenceExemplar: one scored review used as an anchor in the scoring prompt."""

from pydantic import BaseModel


class ReferenceExemplar(BaseModel, frozen=True):
    """Immutable (text, score) pair from the reference corpus."""

    text: str
    score: int
