"""Safe identifier generation and parsing."""

import re
import uuid

_HEX32 = r"[0-9a-fA-F]{32}"
_HYPHENATED = r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
_UUID_RE = re.compile(
    rf"(?:{_HEX32}|{_HYPHENATED}|\{{{_HYPHENATED}\}}|urn:uuid:{_HYPHENATED})"
)


def new_safe_id() -> uuid.UUID:
    """Return a new random UUID v4."""
    return uuid.uuid4()


def parse_safe_id(raw: str) -> uuid.UUID:
    """Parse a caller-supplied identifier string.

    Accepts the simple (32 hex digits), hyphenated, braced and ``urn:uuid:``
    forms. Anything else, surrounding whitespace included, raises ``ValueError``.
    """
    if not isinstance(raw, str):
        raise ValueError(f"identifier must be a string, got {type(raw).__name__}")
    if not _UUID_RE.fullmatch(raw):
        raise ValueError(f"badly formed identifier: {raw!r}")
    return uuid.UUID(raw)
