"""String helpers shared by the resource parser."""

import string
from typing import Optional

# Characters that never survive into a URL path segment (outside of placeholders)
INVALID_PATH_CHARS = frozenset('\\"<>|#')
TRAILING_CHARS = "/" + string.whitespace


def has_text(value: Optional[str]) -> bool:
    """Return True if value is not None and contains a non-whitespace character."""
    return value is not None and len(value.strip()) > 0


def is_lower_case(value: str) -> bool:
    """Return True if no character in value is uppercase.

    Digits and punctuation do not count, so ``"my--idx-2"`` is lowercase.
    """
    return not any(ch.isupper() for ch in value)


def sanitize_resource(value: str) -> str:
    """Normalize a raw resource string.

    Drops whitespace and path-hostile characters outside of ``{...}``
    placeholder spans, then removes one leading slash and every trailing
    slash or whitespace. Placeholder contents (e.g. ``{@timestamp|yyyy.MM.dd}``)
    are kept verbatim.

    Args:
        value: Raw resource string

    Returns:
        Sanitized resource string
    """
    out = []
    depth = 0
    for ch in value:
        if ch == "{":
            depth += 1
        elif ch == "}" and depth:
            depth -= 1
        elif not depth and (ch.isspace() or ch in INVALID_PATH_CHARS):
            continue
        out.append(ch)

    res = "".join(out).strip()
    if res.startswith("/"):
        res = res[1:]
    return res.rstrip(TRAILING_CHARS)
