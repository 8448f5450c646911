"""User Validation — pure parsing, normalization and rule checks for user fields.

Invariants:
    - validate_user collects ALL violations, ordered name → email → age
    - parse_age and parse_user_id are total: typed value or None, never a default
    - Only bounded runs of ASCII digits are converted; Unicode digits are rejected
    - Pure functions: no store access, no IO

Design Decisions:
    - bool rejected as age even though bool subclasses int: JSON true is not a number
    - Partial validation rejects present-but-empty values ("present means
      validated"); an empty name in a patch is a violation, not a no-op
"""

import re
from collections.abc import Mapping
from typing import Any

from user_api.core.domain_types import MAX_AGE, MIN_AGE, UserField

NAME_REQUIRED = "Name is required"
NAME_EMPTY = "Name cannot be empty"
EMAIL_INVALID = "Valid email is required"
AGE_OUT_OF_RANGE = f"Age must be between {MIN_AGE} and {MAX_AGE}"

# ASCII digits only, bounded so int() never hits the str-conversion digit limit
_INTEGER_TEXT = re.compile(r"[+-]?[0-9]{1,6}")
_ID_TEXT = re.compile(r"[0-9]{1,18}")


# ─── Parsing ─────────────────────────────────────────────────────

def parse_age(value: Any) -> int | None:
    """Parse an age candidate into an int, or None when it is not an integer."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        text = value.strip()
        return int(text) if _INTEGER_TEXT.fullmatch(text) else None
    return None


def parse_user_id(raw: str) -> int | None:
    """Parse a path segment into a user id. Non-digit text yields None."""
    text = raw.strip()
    return int(text) if _ID_TEXT.fullmatch(text) else None


# ─── Normalization ───────────────────────────────────────────────

def normalize_name(name: str) -> str:
    return name.strip()


def normalize_email(email: str) -> str:
    return email.strip().lower()


# ─── Field Rules ─────────────────────────────────────────────────

def _name_ok(name: Any) -> bool:
    return isinstance(name, str) and bool(normalize_name(name))


def _email_ok(email: Any) -> bool:
    return isinstance(email, str) and "@" in email


def _age_ok(age: Any) -> bool:
    parsed = parse_age(age)
    return parsed is not None and MIN_AGE <= parsed <= MAX_AGE


# ─── Validation ──────────────────────────────────────────────────

def validate_user(
    name: Any = None,
    email: Any = None,
    age: Any = None,
    partial: bool = False,
    present: frozenset[UserField] = frozenset(UserField),
) -> list[str]:
    """Return every violation for the candidate fields, empty if acceptable.

    Full validation checks all three fields. Partial validation checks only
    the fields named in `present`.
    """
    errors: list[str] = []
    checked = present if partial else frozenset(UserField)

    if UserField.NAME in checked and not _name_ok(name):
        errors.append(NAME_EMPTY if partial else NAME_REQUIRED)
    if UserField.EMAIL in checked and not _email_ok(email):
        errors.append(EMAIL_INVALID)
    if UserField.AGE in checked and not _age_ok(age):
        errors.append(AGE_OUT_OF_RANGE)

    return errors


def validate_user_patch(updates: Mapping[str, Any]) -> list[str]:
    """Partial validation over a sparse update mapping. Unknown keys ignored."""
    present = frozenset(f for f in UserField if f.value in updates)
    return validate_user(
        updates.get(UserField.NAME.value),
        updates.get(UserField.EMAIL.value),
        updates.get(UserField.AGE.value),
        partial=True,
        present=present,
    )
