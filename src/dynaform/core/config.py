"""Configuration Management."""

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_CONFIG_URL = "https://9fd21a03-38a1-4e35-9cea-a97bcfc00f4b.mock.pstmn.io/reg"


class Settings(BaseSettings):
    """Application settings from environment."""

    model_config = SettingsConfigDict(
        env_prefix="DYNAFORM_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra environment variables
    )

    # Endpoints
    config_url: str = Field(default=DEFAULT_CONFIG_URL, description="Blueprint document URL")
    submit_url: str | None = Field(
        default=None, description="Submission URL (defaults to config_url)"
    )

    # Transport
    request_timeout: float = Field(default=10.0, gt=0, description="HTTP request timeout")

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    json_logs: bool = Field(default=False, description="Use JSON log format")

    @property
    def effective_submit_url(self) -> str:
        """URL the filled-in form is POSTed to."""
        return self.submit_url or self.config_url


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
