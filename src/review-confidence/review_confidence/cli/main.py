"""CLI entrypoint for review-confidence: typer app with score, summarize and serve."""

import asyncio
import json
import sys
from pathlib import Path
from typing import Any

import structlog
import typer
import uvicorn
from dotenv import load_dotenv
from rich.console import Console

from review_confidence.api.app import create_app
from review_confidence.config.domain.config import AppConfig
from review_confidence.config.infrastructure.observer import StructlogConfigObserver
from review_confidence.config.infrastructure.yaml_loader import YamlConfigLoader
from review_confidence.core.errors import ReviewConfidenceError
from review_confidence.wiring import build_engine, build_summary_service

app = typer.Typer(add_completion=False)
_console = Console()

_CONFIG_OPTION = typer.Option(
    None, "--config", "-c", help="Path to service config YAML (defaults if omitted)"
)
_LOG_FORMAT_OPTION = typer.Option(
    "console", "--log-format", help="Log format: 'console' or 'json'"
)


def _configure_structlog(log_format: str) -> None:
    """Configure structlog based on the requested format.

    Logs go to stderr so that command output on stdout stays valid JSON.
    """
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(0),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _load_config(config_path: Path | None) -> AppConfig:
    loader = YamlConfigLoader(observer=StructlogConfigObserver())
    return loader.load(path=config_path)


def _read_payload(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        typer.echo(f"Failed to read payload: file not found: {path}")
        raise typer.Exit(code=1) from exc
    except json.JSONDecodeError as exc:
        typer.echo(f"Failed to read payload: invalid JSON: {exc}")
        raise typer.Exit(code=1) from exc


def _require_object(payload: Any) -> dict[str, Any]:
    if not isinstance(payload, dict):
        typer.echo("Failed to read payload: top-level JSON value must be an object")
        raise typer.Exit(code=1)
    return payload


@app.callback()
def main() -> None:
    """Review confidence scoring service."""
    load_dotenv()


@app.command()
def score(
    payload_path: Path = typer.Argument(
        ..., help="JSON file with reviewData, orderData, userData, restaurantData"
    ),
    config_path: Path | None = _CONFIG_OPTION,
    log_format: str = _LOG_FORMAT_OPTION,
) -> None:
    """Compute the confidence score for one review payload."""
    _configure_structlog(log_format=log_format)
    payload = _require_object(_read_payload(payload_path))
    try:
        engine = build_engine(_load_config(config_path))
        result = asyncio.run(engine.compute_from_payload(payload))
    except ReviewConfidenceError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1) from exc

    _console.print_json(
        data=result.model_dump(mode="json", by_alias=True), highlight=False
    )


@app.command()
def summarize(
    payload_path: Path = typer.Argument(
        ..., help="JSON file with reviews and restaurantName"
    ),
    config_path: Path | None = _CONFIG_OPTION,
    log_format: str = _LOG_FORMAT_OPTION,
) -> None:
    """Summarise a restaurant's reviews."""
    _configure_structlog(log_format=log_format)
    payload = _require_object(_read_payload(payload_path))
    try:
        service = build_summary_service(_load_config(config_path))
        summary = asyncio.run(service.summarize_payload(payload))
    except ReviewConfidenceError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1) from exc

    _console.print_json(
        data=summary.model_dump(mode="json", by_alias=True), highlight=False
    )


@app.command()
def serve(
    config_path: Path | None = _CONFIG_OPTION,
    host: str | None = typer.Option(None, "--host", help="Bind address"),
    port: int | None = typer.Option(None, "--port", help="Bind port"),
    log_format: str = _LOG_FORMAT_OPTION,
) -> None:
    """Run the HTTP API with uvicorn."""
    _configure_structlog(log_format=log_format)
    try:
        config = _load_config(config_path)
    except ReviewConfidenceError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1) from exc

    uvicorn.run(
        create_app(config=config),
        host=host or config.server.host,
        port=port or config.server.port,
    )


if __name__ == "__main__":
    app()
