"""Blueprint Parser - JSON to Blueprint with validation."""

from typing import Any

from pydantic import ValidationError as PydanticValidationError

from ..core.errors import ConfigFetchError, ConfigurationError
from ..core.json import JSONParseError, decode_json
from ..core.logging_config import get_logger
from .models import INVALID_REGEXP, Blueprint
from .traversal import iter_field_elements

logger = get_logger(__name__)


class BlueprintParser:
    """Parses blueprint documents into an immutable Blueprint."""

    def parse(self, content: bytes | str | dict[str, Any]) -> Blueprint:
        """
        Parse a blueprint document.

        Args:
            content: Raw JSON bytes/text, or an already decoded mapping

        Returns:
            Parsed Blueprint

        Raises:
            ConfigFetchError: If the document is not JSON or does not match the schema
            ConfigurationError: If a rule is malformed (e.g. invalid regular expression)
        """
        if isinstance(content, (bytes, str)):
            try:
                document = decode_json(content)
            except JSONParseError as e:
                logger.error("json_parse_failed", error=str(e))
                raise ConfigFetchError(f"Blueprint is not valid JSON: {e}", e) from e
        else:
            document = content

        if not isinstance(document, dict):
            logger.error("invalid_format", type=type(document).__name__)
            raise ConfigFetchError("Invalid blueprint format: expected JSON object")

        try:
            blueprint = Blueprint.model_validate(document)
        except PydanticValidationError as e:
            config_errors = [err for err in e.errors() if err["type"] == INVALID_REGEXP]
            if config_errors:
                logger.error("invalid_rule", errors=len(config_errors))
                raise ConfigurationError(config_errors[0]["msg"]) from e
            logger.error("schema_mismatch", errors=e.error_count())
            raise ConfigFetchError(f"Blueprint does not match schema: {e}", e) from e

        self._warn_duplicate_names(blueprint)

        logger.info("blueprint_parsed", blocks=len(blueprint.blueprint))
        return blueprint

    def _warn_duplicate_names(self, blueprint: Blueprint) -> None:
        """Duplicated names silently share one state slot; make it visible."""
        seen: set[str] = set()
        for element in iter_field_elements(blueprint):
            if element.name in seen:
                logger.warning("duplicate_field_name", name=element.name)
            seen.add(element.name)


def parse_blueprint(content: bytes | str | dict[str, Any]) -> Blueprint:
    """
    Convenience function to parse blueprint content

    Args:
        content: Blueprint JSON bytes, string or decoded mapping

    Returns:
        Blueprint
    """
    parser = BlueprintParser()
    return parser.parse(content)
