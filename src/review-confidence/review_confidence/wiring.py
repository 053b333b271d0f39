"""Composition root: builds the engine and summary service from an AppConfig."""

from review_confidence.config.domain.config import AppConfig
from review_confidence.corpus.infrastructure.observer import StructlogCorpusObserver
from review_confidence.corpus.infrastructure.text_loader import TextCorpusLoader
from review_confidence.scoring.application.engine import ConfidenceEngine
from review_confidence.scoring.infrastructure.factory import create_scorer
from review_confidence.scoring.infrastructure.observer import StructlogScoringObserver
from review_confidence.summary.application.service import ReviewSummaryService
from review_confidence.summary.infrastructure.litellm import LiteLLMSummarizer
from review_confidence.summary.infrastructure.observer import StructlogSummaryObserver


def build_engine(config: AppConfig) -> ConfidenceEngine:
    observer = StructlogScoringObserver()
    return ConfidenceEngine(
        scorer=create_scorer(config=config.scorer, observer=observer),
        corpus_loader=TextCorpusLoader(observer=StructlogCorpusObserver()),
        corpus_path=config.corpus.path,
        observer=observer,
    )


def build_summary_service(config: AppConfig) -> ReviewSummaryService:
    observer = StructlogSummaryObserver()
    return ReviewSummaryService(
        summarizer=LiteLLMSummarizer(config=config.summarizer, observer=observer),
        observer=observer,
    )
