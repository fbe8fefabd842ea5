"""
Deterministic normalization rules.

Patterns, limits and user-facing messages live here so the behavior of the
pipeline is visible in one place.
"""

import re

# --- Email ---
EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
EMAIL_REQUIRED_MESSAGE = "Email address is required"
EMAIL_INVALID_MESSAGE = "Please enter a valid email address"
EMAIL_FALLBACK_MESSAGE = "Invalid email address"

# --- Phone ---
PHONE_FORMATTING = re.compile(r"[\s\-()]")
PHONE_PATTERN = re.compile(r"\+?[1-9][0-9]{6,14}")
PHONE_ERROR_MESSAGE = (
    "Please enter a phone number in the E.164 format, which is the "
    "international phone number format that ensures global uniqueness."
)
# Australian numbers are often written with the trunk prefix kept: +61 0...
AU_COUNTRY_CODE = "61"

# Batch path only: digits-count heuristic with +1 for ten-digit numbers.
BATCH_PHONE_MIN_DIGITS = 10
BATCH_PHONE_MAX_DIGITS = 15
BATCH_PHONE_DEFAULT_COUNTRY = "1"

# --- Detection ---
PHONE_LIKE_PATTERN = re.compile(r"[+0-9\s\-()]+")

# --- Batch ---
MAX_RECORDS = 10000
BATCH_HEADERS = ("Input", "Normalized", "SHA256", "Base64")
BATCH_ERROR_PREFIX = "Error processing CSV file: "
EXPORT_FILENAME = "processed_data.csv"
EXPORT_DELIMITER = ","
