"""Structlog implementation of the ConfigObserver port."""

import structlog


class StructlogConfigObserver:
    """Delegates config domain events to structlog.

    Satisfies the ConfigObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_loaded(self, name: str, version: str) -> None:
        self._log.info("config.loaded", name=name, version=version)

    def config_defaults_used(self) -> None:
        self._log.info("config.defaults_used")

    def config_scorer_temperature_warning(self, temperature: float) -> None:
        self._log.warning(
            "config.scorer_temperature_warning",
            temperature=temperature,
            message="Scorer temperature well above zero may produce unstable scores",
        )
