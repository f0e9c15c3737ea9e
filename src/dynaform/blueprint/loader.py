"""Config Loader - fetches the blueprint document once per process."""

from typing import Protocol

from ..core.errors import ConfigFetchError, ConfigurationError
from ..core.logging_config import get_logger
from ..monitoring.metrics import metrics_collector
from .models import Blueprint

logger = get_logger(__name__)


class BlueprintSource(Protocol):
    def fetch_blueprint(self) -> Blueprint:
        ...


class BlueprintLoader:
    """
    Loads the blueprint once and keeps it.

    A failed load is not cached, so the caller may call ``load`` again.
    No retry happens here.
    """

    def __init__(self, source: BlueprintSource) -> None:
        self.source = source
        self._blueprint: Blueprint | None = None

    @property
    def loaded(self) -> bool:
        return self._blueprint is not None

    def load(self) -> Blueprint:
        """
        Return the blueprint, fetching it on the first successful call.

        Raises:
            ConfigFetchError: Fetch or parse failed
            ConfigurationError: Blueprint declares a malformed rule
        """
        if self._blueprint is not None:
            return self._blueprint

        try:
            blueprint = self.source.fetch_blueprint()
        except (ConfigFetchError, ConfigurationError):
            metrics_collector.record_blueprint_fetch("error")
            logger.error("blueprint_load_failed", exc_info=True)
            raise

        metrics_collector.record_blueprint_fetch("success")
        logger.info("blueprint_loaded", blocks=len(blueprint.blueprint))
        self._blueprint = blueprint
        return blueprint
