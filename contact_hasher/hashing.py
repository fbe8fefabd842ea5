from __future__ import annotations

import base64
import hashlib

from .models import HashResult


def _digest(value: str) -> bytes:
    return hashlib.sha256(value.encode("utf-8")).digest()


def sha256_hex(value: str) -> str:
    """SHA-256 of ``value`` as 64 lowercase hex characters, or "" for empty input."""
    if not value:
        return ""
    return _digest(value).hex()


def base64_digest(value: str) -> str:
    """
    Base64 of the raw SHA-256 digest bytes (not of the hex string).

    A 32-byte digest always encodes to 44 characters ending in one "=".
    """
    if not value:
        return ""
    return base64.b64encode(_digest(value)).decode("ascii")


def hash_value(normalized: str) -> HashResult:
    if not normalized:
        return HashResult()

    return HashResult(
        normalized_value=normalized,
        sha256_hash=sha256_hex(normalized),
        base64_hash=base64_digest(normalized),
    )
