from __future__ import annotations

import json
import logging
from typing import Any, Optional, TypeVar

from .repository import Decoder

logger = logging.getLogger(__name__)

T = TypeVar("T")

_DECODE_ERRORS = (ValueError, TypeError, KeyError, AttributeError)


def dumps(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def loads_or_default(key: str, payload: Optional[str], default: T, decoder: Optional[Decoder]) -> T:
    """Shape a raw payload, treating any corruption as an absent key."""
    if payload is None:
        return default
    try:
        value = json.loads(payload)
        return decoder(value) if decoder else value
    except _DECODE_ERRORS:
        # json.JSONDecodeError is a ValueError
        logger.warning("Stored value for %r is unreadable, using default", key, exc_info=True)
        return default
