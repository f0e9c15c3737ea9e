"""Form Endpoint Client"""

from typing import Any

import httpx

from ..blueprint.models import Blueprint
from ..blueprint.parser import BlueprintParser
from ..core.errors import ConfigFetchError, SubmissionError
from ..core.json import safe_json_dumps
from ..core.logging_config import get_logger

logger = get_logger(__name__)

JSON_HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}


class FormClient:
    """
    HTTP collaborator of the form engine.
    Fetches the blueprint document and POSTs filled-in form state.
    Every call makes exactly one request; retrying is left to the caller.
    """

    def __init__(
        self,
        config_url: str,
        submit_url: str | None = None,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize form client.

        Args:
            config_url: URL of the blueprint document
            submit_url: URL the form is POSTed to (defaults to config_url)
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests, proxies)
        """
        self.config_url = config_url
        self.submit_url = submit_url or config_url
        self.timeout = timeout
        self._client = httpx.Client(timeout=timeout, transport=transport)
        self._parser = BlueprintParser()

        logger.info("client_init", config_url=self.config_url, submit_url=self.submit_url)

    def fetch_blueprint(self) -> Blueprint:
        """
        GET the blueprint document and parse it.

        Returns:
            Parsed Blueprint

        Raises:
            ConfigFetchError: Transport failure, non-2xx status or unparseable body
            ConfigurationError: Blueprint declares a malformed rule
        """
        try:
            response = self._client.get(self.config_url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning("fetch_http_status", status=e.response.status_code)
            raise ConfigFetchError(
                f"Blueprint fetch returned HTTP {e.response.status_code}", e
            ) from e
        except httpx.HTTPError as e:
            logger.warning("fetch_http_error", error=str(e))
            raise ConfigFetchError(f"Blueprint fetch failed: {e}", e) from e

        return self._parser.parse(response.content)

    def submit(self, payload: dict[str, Any]) -> httpx.Response:
        """
        POST the form state as JSON, once.

        Args:
            payload: FormState mapping ({field_name: value})

        Returns:
            The 2xx response

        Raises:
            SubmissionError: Transport failure, timeout or non-2xx status
        """
        try:
            response = self._client.post(
                self.submit_url,
                content=safe_json_dumps(payload),
                headers=JSON_HEADERS,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.warning("submit_http_status", status=status)
            raise SubmissionError(f"Submission rejected with HTTP {status}", status) from e
        except httpx.HTTPError as e:
            logger.warning("submit_http_error", error=str(e))
            raise SubmissionError(f"Submission failed: {e}") from e

        logger.info("submit_ok", status=response.status_code, fields=len(payload))
        return response

    def close(self) -> None:
        """Close HTTP client"""
        self._client.close()

    def __enter__(self) -> "FormClient":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
