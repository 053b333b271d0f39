"""Top-level AppConfig aggregate: the root configuration object."""

from pydantic import BaseModel, Field

from review_confidence.config.domain.corpus import CorpusConfig
from review_confidence.config.domain.scorer import ScorerConfig, SummarizerConfig
from review_confidence.config.domain.server import ServerConfig


class AppConfig(BaseModel, frozen=True):
    """Root configuration aggregate for the review-confidence service.

    Every section has defaults so the service can run without a config file.
    """

    name: str = Field(default="review-confidence", min_length=1)
    version: str = Field(default="1", min_length=1)
    scorer: ScorerConfig = Field(default_factory=ScorerConfig)
    summarizer: SummarizerConfig = Field(default_factory=SummarizerConfig)
    corpus: CorpusConfig = Field(default_factory=CorpusConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
