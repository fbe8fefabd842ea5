from __future__ import annotations

import re
from typing import Optional

from .rules import (
    AU_COUNTRY_CODE,
    BATCH_PHONE_DEFAULT_COUNTRY,
    BATCH_PHONE_MAX_DIGITS,
    BATCH_PHONE_MIN_DIGITS,
    PHONE_FORMATTING,
    PHONE_PATTERN,
)

_NON_DIGITS = re.compile(r"[^0-9]")


def _strip_formatting(phone: str) -> str:
    return PHONE_FORMATTING.sub("", phone)


def validate_phone(phone: str) -> bool:
    """True for 7 to 15 digits with no leading zero and an optional leading "+"."""
    return bool(PHONE_PATTERN.fullmatch(_strip_formatting(phone)))


def normalize_phone(phone: str) -> str:
    """
    E.164-like form: "+" followed by the digits as written.

    No country code is assumed, so "1234567890" becomes "+1234567890".
    The only fix-up is the Australian trunk zero: "+61 0..." loses the "0".
    """
    if not phone:
        return ""

    digits = _strip_formatting(phone)
    if digits.startswith("+"):
        digits = digits[1:]

    if digits.startswith(AU_COUNTRY_CODE + "0"):
        digits = AU_COUNTRY_CODE + digits[len(AU_COUNTRY_CODE) + 1:]

    return "+" + digits


def normalize_batch_phone(phone: str) -> Optional[str]:
    """
    Phone rule used by batch processing.

    Keeps digits only and accepts 10 to 15 of them. Ten-digit numbers are
    treated as North American and get "+1"; longer ones are assumed to carry
    their country code already. Returns None when the count is out of range.
    """
    digits = _NON_DIGITS.sub("", phone or "")
    if not (BATCH_PHONE_MIN_DIGITS <= len(digits) <= BATCH_PHONE_MAX_DIGITS):
        return None

    if len(digits) == BATCH_PHONE_MIN_DIGITS:
        return f"+{BATCH_PHONE_DEFAULT_COUNTRY}{digits}"

    return f"+{digits}"
