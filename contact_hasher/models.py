from __future__ import annotations

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class ValidationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    is_valid: bool
    error: Optional[str] = None


class NormalizationOptions(BaseModel):
    """Which email transformation steps apply. Every step is on by default."""

    model_config = ConfigDict(frozen=True)

    remove_whitespace: bool = True
    convert_to_lowercase: bool = True
    remove_dots: bool = True
    remove_plus_sign: bool = True


class HashResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    normalized_value: str = ""
    sha256_hash: str = ""
    base64_hash: str = ""


class ProcessedRow(BaseModel):
    model_config = ConfigDict(frozen=True)

    original: str
    normalized: str
    sha256: str
    base64: str


class ProcessedData(BaseModel):
    model_config = ConfigDict(frozen=True)

    headers: List[str]
    rows: List[ProcessedRow] = Field(default_factory=list)
    skipped_rows: int = 0


class ProcessorState(BaseModel):
    """Input, last error and last result of a single-value processor."""

    model_config = ConfigDict(frozen=True)

    input: str = ""
    error: str = ""
    result: HashResult = Field(default_factory=HashResult)


# --- API envelopes ---

class ValueRequest(BaseModel):
    value: str = Field(min_length=1, examples=["Test.User+news@Example.com"])


class HashResponse(BaseModel):
    input: str
    normalized_value: str
    sha256_hash: str
    base64_hash: str


class BatchResponse(BaseModel):
    filename: Optional[str] = None
    headers: List[str]
    rows: List[ProcessedRow] = Field(default_factory=list)
    skipped_rows: int = 0
    processed_rows: int = 0


class ErrorResponse(BaseModel):
    detail: str


class HealthResponse(BaseModel):
    ok: bool = True
