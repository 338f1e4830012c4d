"""Content codec — converts between stored section payload text and a mapping.

Both directions are failure-isolating: a broken payload degrades to an
empty mapping (and therefore to the kind's defaults) instead of failing
page composition.
"""

import json
import logging
from typing import Any

logger = logging.getLogger(__name__)

EMPTY_ENCODING = "{}"


def decode(raw: str | bytes | None) -> dict[str, Any]:
    """Parse stored content text into a mapping, returning {} on any failure."""
    if raw is None or raw == "" or raw == b"":
        return {}
    try:
        value = json.loads(raw)
    except (TypeError, ValueError, RecursionError) as exc:
        logger.warning("Failed to decode section content: %s", exc)
        return {}

    if not isinstance(value, dict):
        logger.warning(
            "Section content is a JSON %s, expected an object — using defaults",
            type(value).__name__,
        )
        return {}
    return value


def encode(value: Any) -> str:
    """Serialize a mapping to compact JSON text, returning "{}" if it cannot be encoded."""
    try:
        return json.dumps(
            value,
            ensure_ascii=False,
            allow_nan=False,
            separators=(",", ":"),
        )
    except (TypeError, ValueError, RecursionError) as exc:
        logger.warning("Failed to encode section content: %s", exc)
        return EMPTY_ENCODING
