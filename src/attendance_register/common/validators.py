from __future__ import annotations

import re
from typing import Optional

from ..core.constants import MOBILE_MIN_LENGTH

_DIGITS_ONLY = re.compile(r"^[0-9]+$")

INVALID_MOBILE_MESSAGE = f"Invalid mobile number (numbers only, min {MOBILE_MIN_LENGTH} digits)"


def clean_text(value: Optional[str]) -> str:
    return (value or "").strip()


def non_empty_error(value: Optional[str], message: str) -> Optional[str]:
    """Return ``message`` when the value is blank, else None."""
    if not clean_text(value):
        return message
    return None


def is_valid_mobile(value: str, *, min_length: int = MOBILE_MIN_LENGTH) -> bool:
    return bool(_DIGITS_ONLY.match(value)) and len(value) >= min_length


def mobile_error(value: Optional[str], required_message: str) -> Optional[str]:
    value = clean_text(value)
    if not value:
        return required_message
    if not is_valid_mobile(value):
        return INVALID_MOBILE_MESSAGE
    return None
