"""Remote scorer and summarizer configuration models."""

from pydantic import BaseModel, Field


class ScorerConfig(BaseModel, frozen=True):
    model: str = "gpt-4o-mini"
    temperature: float = Field(default=0.1, ge=0.0)
    max_tokens: int = Field(default=10, ge=1)
    timeout_seconds: float = Field(default=5.0, gt=0.0)
    api_key_env: str = Field(default="OPENAI_API_KEY", min_length=1)
    max_exemplars: int = Field(default=20, ge=0)
    require_credentials: bool = True


class SummarizerConfig(BaseModel, frozen=True):
    model: str = "gpt-4o-mini"
    temperature: float = Field(default=0.7, ge=0.0)
    max_tokens: int = Field(default=500, ge=1)
    timeout_seconds: float = Field(default=20.0, gt=0.0)
    api_key_env: str = Field(default="OPENAI_API_KEY", min_length=1)
