"""
Batch normalization of uploaded contact lists.

Responsibilities:
- decode uploaded bytes to text (encoding detection + newline normalization)
- classify each line as email, phone or unknown
- normalize and hash accepted values, count the rest as skipped
- enforce the record ceiling
- serialize results back to CSV for download
"""

from __future__ import annotations

import csv
import io
import logging
from typing import Optional, Protocol

from charset_normalizer import from_bytes

from .config import Config
from .detect import ValueType, detect_value_type
from .emails import normalize_email, validate_email
from .errors import BatchLimitExceeded, BatchProcessingError
from .hashing import base64_digest, sha256_hex
from .models import ProcessedData, ProcessedRow, ValidationResult
from .phones import normalize_batch_phone
from .rules import BATCH_ERROR_PREFIX, BATCH_HEADERS, EXPORT_DELIMITER, MAX_RECORDS

logger = logging.getLogger(__name__)

UTF8_BOM = b"\xef\xbb\xbf"


class EmailRules(Protocol):
    def validate(self, value: str) -> ValidationResult: ...

    def normalize(self, value: str) -> str: ...


class PhoneRules(Protocol):
    def normalize(self, value: str) -> Optional[str]: ...


class StandardEmailRules:
    def validate(self, value: str) -> ValidationResult:
        return validate_email(value)

    def normalize(self, value: str) -> str:
        return normalize_email(value)


class BatchPhoneRules:
    def normalize(self, value: str) -> Optional[str]:
        return normalize_batch_phone(value)


STANDARD_EMAIL_RULES = StandardEmailRules()
BATCH_PHONE_RULES = BatchPhoneRules()


def _normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def _decode_replacing(raw: bytes, encoding: str, reason: str) -> str:
    logger.warning("%s, replacing invalid bytes", reason)
    return raw.decode(encoding, errors="replace")


def decode_csv_bytes(raw: bytes) -> str:
    """
    Decode an uploaded file to text.

    Rules:
    - A UTF-8 BOM means UTF-8: the BOM is dropped and detection is skipped,
      so one stray byte cannot turn the BOM into text glued to the first record.
    - Otherwise detect encoding best-effort via charset-normalizer.
    - Input that cannot be classified or decoded becomes UTF-8 with
      replacement characters, and a warning is logged.
    - CRLF and lone CR become LF.
    """
    if not raw:
        return ""

    if raw.startswith(UTF8_BOM):
        try:
            text = raw.decode("utf-8-sig")
        except UnicodeDecodeError:
            text = _decode_replacing(raw, "utf-8-sig", "Upload starts with a UTF-8 BOM but is not valid UTF-8")
        return _normalize_newlines(text)

    match = from_bytes(raw).best()
    if match is None:
        return _normalize_newlines(_decode_replacing(raw, "utf-8", "Could not detect upload encoding"))

    decode_used = match.encoding
    try:
        text = raw.decode(decode_used)
    except (UnicodeDecodeError, LookupError):
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError:
            text = _decode_replacing(raw, "utf-8", f"Could not decode upload as {decode_used} or utf-8")

    return _normalize_newlines(text)


def _normalize_candidate(
    candidate: str,
    value_type: ValueType,
    email_rules: EmailRules,
    phone_rules: PhoneRules,
) -> Optional[str]:
    if value_type is ValueType.EMAIL:
        if email_rules.validate(candidate).is_valid:
            return email_rules.normalize(candidate)
        return None

    if value_type is ValueType.PHONE:
        return phone_rules.normalize(candidate)

    return None


def _process_lines(
    contents: str,
    email_rules: EmailRules,
    phone_rules: PhoneRules,
) -> ProcessedData:
    lines = [line.strip() for line in contents.split("\n")]
    lines = [line for line in lines if line]

    if len(lines) > MAX_RECORDS:
        raise BatchLimitExceeded(MAX_RECORDS)

    rows = []
    skipped = 0

    for index, line in enumerate(lines, start=1):
        candidate = line.split(",", 1)[0]
        if not candidate:
            continue

        value_type = detect_value_type(candidate, email_rules.validate)
        normalized = _normalize_candidate(candidate, value_type, email_rules, phone_rules)

        if normalized:
            rows.append(ProcessedRow(
                original=candidate,
                normalized=normalized,
                sha256=sha256_hex(normalized),
                base64=base64_digest(normalized),
            ))
        else:
            skipped += 1
            if Config.LOG_VALUES:
                logger.debug("Skipped line %d (%s): %r", index, value_type.value, candidate)
            else:
                logger.debug("Skipped line %d (%s)", index, value_type.value)

    return ProcessedData(headers=list(BATCH_HEADERS), rows=rows, skipped_rows=skipped)


def process_batch(
    contents: str,
    email_rules: EmailRules = STANDARD_EMAIL_RULES,
    phone_rules: PhoneRules = BATCH_PHONE_RULES,
) -> ProcessedData:
    """
    Normalize and hash the first column of every non-blank line.

    Raises BatchLimitExceeded above MAX_RECORDS non-blank lines; any other
    failure is re-raised as BatchProcessingError. Lines that cannot be
    normalized are counted in ``skipped_rows``, never raised.
    """
    try:
        data = _process_lines(contents, email_rules, phone_rules)
    except BatchLimitExceeded:
        logger.warning("Batch rejected: more than %d records", MAX_RECORDS)
        raise
    except Exception as e:
        raise BatchProcessingError(f"{BATCH_ERROR_PREFIX}{e}") from e

    logger.info("Batch processed: %d rows, %d skipped", len(data.rows), data.skipped_rows)
    return data


def export_csv(data: ProcessedData) -> str:
    """Headers plus one line per row; values containing commas are quoted."""
    outp = io.StringIO(newline="")
    writer = csv.writer(outp, delimiter=EXPORT_DELIMITER, lineterminator="\n")

    writer.writerow(data.headers)
    for row in data.rows:
        writer.writerow([row.original, row.normalized, row.sha256, row.base64])

    return outp.getvalue()
