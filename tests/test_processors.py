from contact_hasher.hashing import sha256_hex
from contact_hasher.models import HashResult, ProcessorState
from contact_hasher.processors import clear_state, process_email, process_phone, with_input


def test_process_email():
    state = process_email(ProcessorState(input="Test.User@Example.com"))

    assert state.error == ""
    assert state.result.normalized_value == "testuser@example.com"
    assert state.result.sha256_hash == sha256_hex("testuser@example.com")
    assert len(state.result.base64_hash) == 44

def test_process_email_empty_input_is_noop():
    state = ProcessorState()
    assert process_email(state) == state

def test_process_email_invalid_keeps_previous_result():
    state = process_email(ProcessorState(input="test@example.com"))
    previous = state.result

    state = process_email(with_input(state, "invalid"))

    assert state.error == "Please enter a valid email address"
    assert state.result == previous
    assert state.input == "invalid"

def test_process_email_success_clears_error():
    state = process_email(ProcessorState(input="invalid"))
    assert state.error

    state = process_email(with_input(state, "test@example.com"))
    assert state.error == ""
    assert state.result.normalized_value == "test@example.com"

def test_process_does_not_mutate_state():
    original = ProcessorState(input="test@example.com")
    process_email(original)

    assert original.result == HashResult()

def test_process_phone():
    state = process_phone(ProcessorState(input="+1 (234) 567-8901"))

    assert state.error == ""
    assert state.result.normalized_value == "+12345678901"
    assert state.result.sha256_hash == sha256_hex("+12345678901")

def test_process_phone_invalid():
    state = process_phone(ProcessorState(input="0123456789"))

    assert state.error.startswith("Please enter a phone number in the E.164 format")
    assert state.result == HashResult()

def test_process_phone_empty_input_is_noop():
    state = ProcessorState(error="stale")
    assert process_phone(state) == state

def test_clear_state():
    state = process_phone(ProcessorState(input="+12345678901"))
    cleared = clear_state()

    assert cleared.input == ""
    assert cleared.error == ""
    assert cleared.result == HashResult()
    assert state.result.normalized_value == "+12345678901"
