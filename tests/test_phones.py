from contact_hasher.phones import normalize_batch_phone, normalize_phone, validate_phone


def test_validate_phone_accepts_e164_like_numbers():
    assert validate_phone("+12345678901")
    assert validate_phone("+1 (234) 567-8901")
    assert validate_phone("1234567")
    assert validate_phone("+123456789012345")

def test_validate_phone_rejects_leading_zero():
    assert validate_phone("0123456789") is False
    assert validate_phone("+0123456789") is False

def test_validate_phone_rejects_bad_lengths():
    assert validate_phone("123") is False
    assert validate_phone("123456") is False
    assert validate_phone("+1234567890123456") is False

def test_validate_phone_rejects_letters_and_dots():
    assert validate_phone("+1 234 CALL NOW") is False
    assert validate_phone("123.456.7890") is False
    assert validate_phone("") is False

def test_normalize_phone_strips_formatting():
    assert normalize_phone("+1 (234) 567-8901") == "+12345678901"

def test_normalize_phone_does_not_assume_country_code():
    assert normalize_phone("1234567890") == "+1234567890"
    assert normalize_phone("44 1234 56789") == "+44123456789"

def test_normalize_phone_strips_australian_trunk_zero():
    assert normalize_phone("+610212345678") == "+61212345678"
    assert normalize_phone("+61 0412 345 678") == "+61412345678"

def test_normalize_phone_trunk_zero_fixup_is_australia_only():
    assert normalize_phone("+4402071234567") == "+4402071234567"
    assert normalize_phone("+61412345678") == "+61412345678"

def test_normalize_phone_empty():
    assert normalize_phone("") == ""

def test_normalize_phone_is_idempotent():
    once = normalize_phone("+61 (02) 1234-5678")
    assert normalize_phone(once) == once

def test_normalize_batch_phone_prefixes_ten_digit_numbers():
    assert normalize_batch_phone("1234567890") == "+11234567890"
    assert normalize_batch_phone("(123) 456-7890") == "+11234567890"
    assert normalize_batch_phone("123-456-7890") == "+11234567890"

def test_normalize_batch_phone_international():
    assert normalize_batch_phone("+44123456789") == "+44123456789"
    assert normalize_batch_phone("44 1234 56789") == "+44123456789"
    assert normalize_batch_phone("+123456789012345") == "+123456789012345"

def test_normalize_batch_phone_rejects_out_of_range():
    assert normalize_batch_phone("123") is None
    assert normalize_batch_phone("1234567890123456") is None
    assert normalize_batch_phone("invalid") is None
    assert normalize_batch_phone("") is None

def test_normalize_batch_phone_is_idempotent():
    once = normalize_batch_phone("(123) 456-7890")
    assert normalize_batch_phone(once) == once
