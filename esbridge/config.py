"""Connector settings consumed by the resource parser."""

from typing import Optional

import pydantic
from pydantic import BaseModel, Field

from esbridge.exceptions import ConfigValidationError
from esbridge.resource import InlineQuery
from esbridge.utils.config_loader import load_yaml_with_env
from esbridge.utils.logging import logger
from esbridge.utils.strings import has_text


class ConnectorSettings(BaseModel):
    """
    Target resource and query settings.

    Keys can be given in the connector's dotted form or by field name:

    ```yaml
    esbridge:
      es.resource: "logs-{@timestamp|yyyy.MM.dd}/event"
      es.resource.read: "logs-*/event"
      es.query: "?q=status:error"
    ```
    """

    model_config = {"populate_by_name": True, "extra": "ignore", "frozen": True}

    resource: Optional[str] = Field(
        default=None, alias="es.resource", description="Default [collection]/[kind] target"
    )
    resource_read: Optional[str] = Field(
        default=None, alias="es.resource.read", description="Target used when reading"
    )
    resource_write: Optional[str] = Field(
        default=None, alias="es.resource.write", description="Target used when writing"
    )
    query: Optional[str] = Field(default=None, alias="es.query", description="Read query")

    def _resource_key(self, read: bool) -> str:
        key = "resource_read" if read else "resource_write"
        return key if has_text(getattr(self, key)) else "resource"

    def resource_for(self, read: bool) -> Optional[str]:
        """Return the raw resource for the read or write context."""
        return getattr(self, self._resource_key(read))

    def with_inline_query(self, inline_query: InlineQuery, read: bool) -> "ConnectorSettings":
        """Return a copy persisting an inline query pulled out of the resource.

        The key that supplied the resource for this context receives the
        shortened resource; ``query`` receives the extracted query.
        """
        key = self._resource_key(read)
        logger.debug(
            "Persisting inline query",
            key=key,
            resource=inline_query.resource,
            query=inline_query.query,
        )
        return self.model_copy(update={key: inline_query.resource, "query": inline_query.query})


def load_settings(
    path: str, env: Optional[str] = None, section: str = "esbridge"
) -> ConnectorSettings:
    """Load connector settings from a YAML file.

    Args:
        path: Path to YAML file
        env: Environment override to apply (see load_yaml_with_env)
        section: Top-level key holding the settings; the whole document is
            used when the key is absent

    Returns:
        Validated ConnectorSettings

    Raises:
        ConfigValidationError: If the settings do not validate
    """
    data = load_yaml_with_env(path, env=env)
    raw = data.get(section, data)
    if not isinstance(raw, dict):
        raise ConfigValidationError(f"'{section}' must be a mapping", file=path)

    try:
        return ConnectorSettings.model_validate(raw)
    except pydantic.ValidationError as e:
        logger.error("Invalid connector settings", path=path, error=str(e))
        raise ConfigValidationError(str(e), file=path) from e
