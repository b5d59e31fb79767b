"""esbridge - target resource parsing for search backend connectors."""

__version__ = "0.3.0"

from esbridge.exceptions import (
    ConfigValidationError,
    ConflictingQueryError,
    EsBridgeException,
    InvalidCollectionCaseError,
    MalformedResourceError,
    ResourceError,
)
from esbridge.resource import InlineQuery, Resource, extract_inline_query, parse_resource

__all__ = [
    "Resource",
    "InlineQuery",
    "parse_resource",
    "extract_inline_query",
    "EsBridgeException",
    "ConfigValidationError",
    "ResourceError",
    "MalformedResourceError",
    "ConflictingQueryError",
    "InvalidCollectionCaseError",
    "__version__",
]


# Settings pull in pydantic; load them on first use
def __getattr__(name):
    if name == "ConnectorSettings":
        from esbridge.config import ConnectorSettings

        return ConnectorSettings
    if name == "load_settings":
        from esbridge.config import load_settings

        return load_settings
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
