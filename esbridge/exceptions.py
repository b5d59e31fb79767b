"""Custom exceptions for esbridge."""

from typing import List, Optional

EXPECTED_SHAPE = "[collection]/[kind]"


class EsBridgeException(Exception):
    """Base exception for all esbridge errors."""

    pass


class ConfigValidationError(EsBridgeException):
    """Configuration validation failed."""

    def __init__(self, message: str, file: Optional[str] = None, line: Optional[int] = None):
        self.message = message
        self.file = file
        self.line = line
        super().__init__(self._format_error())

    def _format_error(self) -> str:
        """Format error message with location info."""
        parts = ["Configuration validation error"]
        if self.file:
            parts.append(f"\n  File: {self.file}")
        if self.line:
            parts.append(f"\n  Line: {self.line}")
        parts.append(f"\n  Error: {self.message}")
        return "".join(parts)


class ResourceError(EsBridgeException):
    """The configured resource string cannot be turned into a target address."""

    def __init__(self, resource: Optional[str], reason: str, suggestions: Optional[List[str]] = None):
        self.resource = resource
        self.reason = reason
        self.suggestions = suggestions or []
        super().__init__(self._format_error())

    def _format_error(self) -> str:
        """Format resource error with suggestions."""
        parts = [
            f"[X] Invalid resource [{self.resource}]",
            f"\n  Reason: {self.reason}",
        ]

        if self.suggestions:
            parts.append("\n\n  Suggestions:")
            for i, suggestion in enumerate(self.suggestions, 1):
                parts.append(f"\n    {i}. {suggestion}")

        return "".join(parts)


class MalformedResourceError(ResourceError):
    """Resource is missing, blank or not of the form [collection]/[kind]."""

    def __init__(self, resource: Optional[str], reason: Optional[str] = None):
        super().__init__(
            resource,
            reason or f"invalid resource given; expecting {EXPECTED_SHAPE}",
            suggestions=[f"Use the form {EXPECTED_SHAPE}, e.g. 'logs/event'"],
        )


class ConflictingQueryError(ResourceError):
    """A query was given both inline in the resource and through the query setting."""

    def __init__(self, resource: str, query: str):
        self.query = query
        super().__init__(
            resource,
            "Cannot specify a query in the target resource and through es.query",
            suggestions=[
                "Remove the '?...' suffix from the resource",
                f"Or unset es.query (currently '{query}')",
            ],
        )


class InvalidCollectionCaseError(ResourceError):
    """Literal part of the collection name contains uppercase characters."""

    def __init__(self, resource: str, collection: str):
        self.collection = collection
        super().__init__(
            resource,
            f"Invalid collection [{collection}] - needs to be lowercase",
            suggestions=["Use only lowercase characters outside of a '{...}' placeholder"],
        )
