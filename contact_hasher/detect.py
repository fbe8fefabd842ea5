from __future__ import annotations

from enum import Enum
from typing import Callable

from .emails import validate_email
from .models import ValidationResult
from .rules import PHONE_LIKE_PATTERN


class ValueType(str, Enum):
    EMAIL = "email"
    PHONE = "phone"
    UNKNOWN = "unknown"


def detect_value_type(
    value: str,
    validate: Callable[[str], ValidationResult] = validate_email,
) -> ValueType:
    """
    Classify a raw batch value.

    Email wins over phone, so a string valid as both is reported as email.
    Anything made only of digits, "+", whitespace, "-" and parentheses is
    a phone candidate; digit counts are checked later by the normalizer.
    """
    trimmed = value.strip()

    if validate(trimmed).is_valid:
        return ValueType.EMAIL

    if PHONE_LIKE_PATTERN.fullmatch(trimmed):
        return ValueType.PHONE

    return ValueType.UNKNOWN
