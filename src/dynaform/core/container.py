"""Dependency Injection Container."""

from injector import Injector, Module, provider, singleton

from ..blueprint.loader import BlueprintLoader
from ..clients.form import FormClient
from .config import Settings, get_settings


class CoreModule(Module):
    """Core dependencies."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings

    @singleton
    @provider
    def provide_settings(self) -> Settings:
        """Provide application settings."""
        return self.settings or get_settings()

    @singleton
    @provider
    def provide_form_client(self, settings: Settings) -> FormClient:
        """Provide the HTTP client for blueprint fetch and submission."""
        return FormClient(
            settings.config_url,
            submit_url=settings.effective_submit_url,
            timeout=settings.request_timeout,
        )

    @singleton
    @provider
    def provide_blueprint_loader(self, client: FormClient) -> BlueprintLoader:
        """Provide the process-wide blueprint loader."""
        return BlueprintLoader(client)


def create_container(settings: Settings | None = None) -> Injector:
    """Create configured injector."""
    return Injector([CoreModule(settings)])
