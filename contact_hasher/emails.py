"""
Email validation and canonicalization.

Dot removal and plus-tag truncation follow Gmail's addressing rules but are
applied to every domain.
"""

from __future__ import annotations

import re

from .models import NormalizationOptions, ValidationResult
from .rules import EMAIL_INVALID_MESSAGE, EMAIL_PATTERN, EMAIL_REQUIRED_MESSAGE

DEFAULT_OPTIONS = NormalizationOptions()

_WHITESPACE = re.compile(r"\s+")


def validate_email(email: str) -> ValidationResult:
    if not email:
        return ValidationResult(is_valid=False, error=EMAIL_REQUIRED_MESSAGE)

    if not EMAIL_PATTERN.fullmatch(email):
        return ValidationResult(is_valid=False, error=EMAIL_INVALID_MESSAGE)

    return ValidationResult(is_valid=True)


def normalize_email(email: str, options: NormalizationOptions = DEFAULT_OPTIONS) -> str:
    """
    Canonical form of an email address.

    Steps, in order:
    - strip all whitespace (anywhere, not only at the ends)
    - lowercase
    - split on "@"; without a domain the string is returned as is
    - drop every "." from the local part
    - truncate the local part at its first "+"

    Empty input returns "" without raising.
    """
    if not email:
        return ""

    normalized = email

    if options.remove_whitespace:
        normalized = _WHITESPACE.sub("", normalized)

    if options.convert_to_lowercase:
        normalized = normalized.lower()

    parts = normalized.split("@")
    local_part = parts[0]
    domain = parts[1] if len(parts) > 1 else ""

    if domain:
        if options.remove_dots:
            local_part = local_part.replace(".", "")

        if options.remove_plus_sign:
            local_part = local_part.split("+", 1)[0]

        normalized = f"{local_part}@{domain}"

    return normalized
