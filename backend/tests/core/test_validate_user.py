"""User Validation — tests for pure parsing, normalization and field rules.

Tests cover:
    - parse_age accepts ints, integral floats, digit strings; rejects everything else
    - parse_user_id accepts bounded ASCII decimal digits only
    - full validation collects all violations in name → email → age order
    - partial validation checks only present fields and rejects present-but-empty
"""

import pytest

from user_api.core.domain_types import UserField
from user_api.core.validate_user import (
    AGE_OUT_OF_RANGE, EMAIL_INVALID, NAME_EMPTY, NAME_REQUIRED,
    normalize_email, normalize_name, parse_age, parse_user_id,
    validate_user, validate_user_patch,
)


# ─── parse_age ───────────────────────────────────────────────────

@pytest.mark.parametrize("value, expected", [
    (30, 30),
    (0, 0),
    (-5, -5),
    (42.0, 42),
    ("27", 27),
    ("  27 ", 27),
    ("+3", 3),
])
def test_parse_age_accepts_integers(value, expected):
    assert parse_age(value) == expected


@pytest.mark.parametrize("value", [
    None, True, False, 29.5, "", "abc", "12abc", "1.5", [30], {"age": 30},
    "\uff13\uff10", "\u0663\u0660", "1" * 5000, "-" + "9" * 5000,
])
def test_parse_age_rejects_non_integers(value):
    assert parse_age(value) is None


# ─── parse_user_id ───────────────────────────────────────────────

def test_parse_user_id_accepts_digits():
    assert parse_user_id("42") == 42


@pytest.mark.parametrize("raw", [
    "abc", "-1", "1.5", "", "1e3", "\u0661", "\uff11", "1" * 5000,
])
def test_parse_user_id_rejects_non_digits(raw):
    assert parse_user_id(raw) is None


# ─── normalization ───────────────────────────────────────────────

def test_normalize_name_trims():
    assert normalize_name("  Bob  ") == "Bob"


def test_normalize_email_trims_and_lowercases():
    assert normalize_email("  BOB@X.COM  ") == "bob@x.com"


# ─── full validation ─────────────────────────────────────────────

def test_full_validation_accepts_valid_user():
    assert validate_user("Alice", "alice@example.com", 30) == []


def test_full_validation_collects_all_errors_in_order():
    errors = validate_user("", "bademail", 200)
    assert errors == [NAME_REQUIRED, EMAIL_INVALID, AGE_OUT_OF_RANGE]


def test_full_validation_requires_every_field():
    errors = validate_user()
    assert errors == [NAME_REQUIRED, EMAIL_INVALID, AGE_OUT_OF_RANGE]


def test_full_validation_rejects_whitespace_name():
    assert validate_user("   ", "a@b.com", 20) == [NAME_REQUIRED]


def test_full_validation_rejects_non_string_name_and_email():
    errors = validate_user(123, 456, 20)
    assert errors == [NAME_REQUIRED, EMAIL_INVALID]


@pytest.mark.parametrize("age", [1, 120, "60"])
def test_full_validation_accepts_age_bounds(age):
    assert validate_user("A", "a@b.com", age) == []


@pytest.mark.parametrize("age", [0, 121, -1, 29.5, True, "old"])
def test_full_validation_rejects_bad_age(age):
    assert validate_user("A", "a@b.com", age) == [AGE_OUT_OF_RANGE]


# ─── partial validation ──────────────────────────────────────────

def test_partial_validation_ignores_absent_fields():
    errors = validate_user(
        name="New", partial=True, present=frozenset({UserField.NAME}),
    )
    assert errors == []


def test_partial_validation_uses_empty_name_message():
    errors = validate_user(
        name="  ", partial=True, present=frozenset({UserField.NAME}),
    )
    assert errors == [NAME_EMPTY]


def test_patch_validation_with_no_fields_is_empty():
    assert validate_user_patch({}) == []


def test_patch_validation_ignores_unknown_keys():
    assert validate_user_patch({"nickname": ""}) == []


def test_patch_validation_rejects_present_but_falsy_values():
    errors = validate_user_patch({"name": "", "email": "", "age": 0})
    assert errors == [NAME_EMPTY, EMAIL_INVALID, AGE_OUT_OF_RANGE]


def test_patch_validation_rejects_explicit_nulls():
    errors = validate_user_patch({"name": None, "age": None})
    assert errors == [NAME_EMPTY, AGE_OUT_OF_RANGE]


def test_patch_validation_checks_only_present_fields():
    assert validate_user_patch({"email": "bad"}) == [EMAIL_INVALID]
