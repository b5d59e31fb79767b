"""Target resource ([collection]/[kind]) parsing and endpoint paths."""

from dataclasses import dataclass, field
from typing import Callable, Optional

from esbridge.exceptions import (
    EXPECTED_SHAPE,
    ConflictingQueryError,
    InvalidCollectionCaseError,
    MalformedResourceError,
)
from esbridge.utils.logging import logger
from esbridge.utils.strings import has_text, is_lower_case, sanitize_resource


@dataclass(frozen=True)
class InlineQuery:
    """Query found inside a legacy resource string such as ``logs/event/_search?q=x``.

    Attributes:
        resource: Resource string left after dropping the query and the
            segment before it (``logs/event``).
        query: Query suffix, starting with ``?`` (``?q=x``).
    """

    resource: str
    query: str


@dataclass(frozen=True)
class Resource:
    """Validated target address in the search backend.

    Attributes:
        collection: Collection (index) name, lowercase outside a ``{...}`` placeholder.
        kind: Document kind (type) name.
        combined: ``collection/kind``.
        bulk_path: Bulk write endpoint, ``/_bulk`` when the address is templated.
        refresh_path: Refresh endpoint, ``/_refresh`` when the collection is templated.
        inline_query: Query extracted from the raw resource string, if any.
    """

    collection: str
    kind: str
    combined: str
    bulk_path: str
    refresh_path: str
    inline_query: Optional[InlineQuery] = field(default=None, compare=False)

    def mapping_path(self) -> str:
        return f"{self.combined}/_mapping"

    def alias_path(self) -> str:
        return f"{self.collection}/_aliases"

    def __str__(self) -> str:
        return self.combined

    @classmethod
    def parse(
        cls,
        raw: Optional[str],
        query: Optional[str] = None,
        on_inline_query: Optional[Callable[[InlineQuery], None]] = None,
    ) -> "Resource":
        """Alias of parse_resource."""
        return parse_resource(raw, query=query, on_inline_query=on_inline_query)

    @classmethod
    def from_settings(cls, settings, read: bool = True) -> "Resource":
        """Build the resource for the read or write context of ConnectorSettings.

        An inline query found here is only reported on ``inline_query``; use
        ``settings.with_inline_query`` to persist it.
        """
        context = "read" if read else "write"
        logger.debug("Resolving resource from settings", context=context)
        return parse_resource(settings.resource_for(read), query=settings.query)


def extract_inline_query(raw: str, query: Optional[str] = None) -> Optional[InlineQuery]:
    """Pull a legacy inline query out of a raw resource string.

    Only a ``?`` after the first character triggers extraction. The text
    before ``?`` is then cut at its last ``/``, dropping the segment that
    preceded the query (``a/b/_search?q=1`` becomes ``a/b``).

    Args:
        raw: Raw resource string
        query: Query configured separately from the resource

    Returns:
        The extracted InlineQuery, or None when the resource is used as-is

    Raises:
        ConflictingQueryError: If the resource carries a query and ``query`` is set
        MalformedResourceError: If there is no kind segment before the query
    """
    if "?" not in raw and "&" not in raw:
        return None

    if has_text(query):
        logger.error("Query specified twice", resource=raw, query=query)
        raise ConflictingQueryError(raw, query)

    index = raw.find("?")
    if index > 0:
        found_query = raw[index:]
        shortened = raw[:index]
        index = shortened.rfind("/")
        if index < 0 or index >= len(shortened) - 1:
            logger.error("No kind segment before inline query", resource=raw, query=found_query)
            raise MalformedResourceError(raw)
        return InlineQuery(resource=shortened[:index], query=found_query)

    return None


def _literal_collection(collection: str) -> str:
    """Remove the first ``{...}`` span, if ``}`` follows ``{``."""
    start = collection.find("{")
    end = collection.find("}")
    if start >= 0 and end > start:
        return collection[:start] + collection[end + 1 :]
    return collection


def parse_resource(
    raw: Optional[str],
    query: Optional[str] = None,
    on_inline_query: Optional[Callable[[InlineQuery], None]] = None,
) -> Resource:
    """Parse and validate a raw ``[collection]/[kind]`` resource string.

    Args:
        raw: Resource string as configured by the user
        query: Query configured separately from the resource
        on_inline_query: Called with the InlineQuery when one is extracted

    Returns:
        Immutable Resource

    Raises:
        MalformedResourceError: If the resource is blank or not [collection]/[kind]
        ConflictingQueryError: If a query is given inline and through ``query``
        InvalidCollectionCaseError: If the collection has uppercase literal characters
    """
    logger.debug("Parsing resource", resource=raw)

    if not has_text(raw):
        logger.error("Blank resource", resource=raw)
        raise MalformedResourceError(raw)

    resource = raw
    inline_query = extract_inline_query(raw, query)
    if inline_query is not None:
        logger.debug(
            "Extracted inline query",
            resource=inline_query.resource,
            query=inline_query.query,
        )
        resource = inline_query.resource
        if on_inline_query is not None:
            on_inline_query(inline_query)

    res = sanitize_resource(resource)

    slash = res.find("/")
    if slash < 0 or slash == len(res) - 1:
        logger.error("Resource is not [collection]/[kind]", resource=raw, sanitized=res)
        raise MalformedResourceError(raw)

    collection = res[:slash]
    kind = res[slash + 1 :]

    if not has_text(collection):
        logger.error("No collection found", resource=raw, sanitized=res)
        raise MalformedResourceError(raw, f"No collection found; expecting {EXPECTED_SHAPE}")
    if not has_text(kind):
        logger.error("No kind found", resource=raw, sanitized=res)
        raise MalformedResourceError(raw, f"No kind found; expecting {EXPECTED_SHAPE}")

    if not is_lower_case(_literal_collection(collection)):
        logger.error("Collection is not lowercase", resource=raw, collection=collection)
        raise InvalidCollectionCaseError(raw, collection)

    combined = f"{collection}/{kind}"
    bulk_path = "/_bulk" if "{" in combined else f"{combined}/_bulk"
    refresh_path = "/_refresh" if "{" in collection else f"{collection}/_refresh"

    logger.debug("Resolved resource", resource=combined, bulk=bulk_path, refresh=refresh_path)

    return Resource(
        collection=collection,
        kind=kind,
        combined=combined,
        bulk_path=bulk_path,
        refresh_path=refresh_path,
        inline_query=inline_query,
    )
