"""
Single-value processors.

A ProcessorState holds what a form would show: the current input, the last
error and the last successful result. Every function returns a new state;
the caller owns it and decides where it lives.
"""

from __future__ import annotations

from .emails import normalize_email, validate_email
from .hashing import hash_value
from .models import ProcessorState
from .phones import normalize_phone, validate_phone
from .rules import EMAIL_FALLBACK_MESSAGE, PHONE_ERROR_MESSAGE


def with_input(state: ProcessorState, value: str) -> ProcessorState:
    return state.model_copy(update={"input": value})


def clear_state() -> ProcessorState:
    return ProcessorState()


def process_email(state: ProcessorState) -> ProcessorState:
    """Validate, normalize and hash ``state.input``. A failed validation keeps the previous result."""
    if not state.input:
        return state

    validation = validate_email(state.input)
    if not validation.is_valid:
        return state.model_copy(update={"error": validation.error or EMAIL_FALLBACK_MESSAGE})

    result = hash_value(normalize_email(state.input))
    return state.model_copy(update={"error": "", "result": result})


def process_phone(state: ProcessorState) -> ProcessorState:
    if not state.input:
        return state

    if not validate_phone(state.input):
        return state.model_copy(update={"error": PHONE_ERROR_MESSAGE})

    result = hash_value(normalize_phone(state.input))
    return state.model_copy(update={"error": "", "result": result})
