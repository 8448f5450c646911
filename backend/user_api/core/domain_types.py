"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId wraps int — ids are store-assigned, never parsed from bodies
    - Age is bounded MIN_AGE–MAX_AGE (inclusive)
    - Result kinds encoded as an Enum — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)


# ─── Value Bounds ────────────────────────────────────────────────

MIN_AGE: int = 1
MAX_AGE: int = 120


# ─── Enums ───────────────────────────────────────────────────────

class ResultKind(str, Enum):
    """Outcome of a store operation — one per failure taxonomy entry."""
    OK = "ok"
    NOT_FOUND = "not_found"
    VALIDATION = "validation"
    CONFLICT = "conflict"


class UserField(str, Enum):
    """Mutable record fields, in validation-message order."""
    NAME = "name"
    EMAIL = "email"
    AGE = "age"
