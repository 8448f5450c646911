"""User Store — in-memory user table with validation, uniqueness and id allocation.

Invariants:
    - Live ids are pairwise distinct; live normalized emails are pairwise distinct
    - _next_id is strictly greater than every id ever assigned (no reuse after delete)
    - Every operation returns a StoreResult — expected failures never raise
    - A failed create/replace/patch leaves the collection untouched
    - Returned users are copies; the store alone owns live records
    - One lock guards collection + counter for the whole of each operation

Design Decisions:
    - Explicitly constructed object over module-level state: one store per app,
      fresh store per test (dependency injection through app.state)
    - dict keyed by id: insertion order == creation order, O(1) lookup
    - threading.Lock over asyncio.Lock: operations never await, and FastAPI may
      run sync dependencies on worker threads
"""

import logging
import threading
from collections.abc import Iterable, Mapping
from dataclasses import asdict, dataclass, replace
from typing import Any

from user_api.core.domain_types import UserField, UserId
from user_api.core.store_results import (
    Conflict, Invalid, NotFound, Ok, StoreResult,
)
from user_api.core.validate_user import (
    normalize_email, normalize_name, parse_age,
    validate_user, validate_user_patch,
)

logger = logging.getLogger(__name__)


@dataclass
class User:
    """A live user record."""
    id: UserId
    name: str
    email: str
    age: int

    def to_dict(self) -> dict:
        return asdict(self)


DEFAULT_SEED_USERS: tuple[User, ...] = (
    User(UserId(1), "John Doe", "john@example.com", 30),
    User(UserId(2), "Jane Smith", "jane@example.com", 25),
    User(UserId(3), "Bob Johnson", "bob@example.com", 35),
)


class UserStore:
    """Owns the live user collection and the id-allocation counter."""

    def __init__(self, seed: Iterable[User] = DEFAULT_SEED_USERS) -> None:
        self._lock = threading.Lock()
        self._users: dict[UserId, User] = {}
        for user in seed:
            if user.id in self._users:
                raise ValueError(f"Duplicate seed id {user.id}")
            self._users[user.id] = replace(user)
        self._next_id = max(self._users, default=0) + 1

    @property
    def next_id(self) -> int:
        return self._next_id

    # ─── Queries ─────────────────────────────────────────────────

    def email_taken(self, email: str, exclude_id: int | None = None) -> bool:
        """True if a live user other than exclude_id owns the normalized email."""
        with self._lock:
            return self._email_taken(email, exclude_id)

    def list_users(self) -> StoreResult:
        with self._lock:
            return Ok([replace(u) for u in self._users.values()])

    def get_user(self, user_id: int) -> StoreResult:
        with self._lock:
            user = self._users.get(UserId(user_id))
            if user is None:
                return NotFound(UserId(user_id))
            return Ok(replace(user))

    # ─── Mutations ───────────────────────────────────────────────

    def create_user(self, name: Any, email: Any, age: Any) -> StoreResult:
        """Validate, normalize, check uniqueness, then insert with a fresh id."""
        errors = validate_user(name, email, age)
        if errors:
            return Invalid(tuple(errors))

        with self._lock:
            clean_email = normalize_email(email)
            if self._email_taken(clean_email, None):
                return Conflict(clean_email)

            user = User(
                id=UserId(self._next_id),
                name=normalize_name(name),
                email=clean_email,
                age=parse_age(age),
            )
            self._users[user.id] = user
            self._next_id += 1

        logger.info("User created", extra={"user_id": user.id})
        return Ok(replace(user))

    def replace_user(
        self, user_id: int, name: Any, email: Any, age: Any,
    ) -> StoreResult:
        """Full update: all three fields required and valid."""
        with self._lock:
            user = self._users.get(UserId(user_id))
            if user is None:
                return NotFound(UserId(user_id))

            errors = validate_user(name, email, age)
            if errors:
                return Invalid(tuple(errors))

            clean_email = normalize_email(email)
            if self._email_taken(clean_email, user.id):
                return Conflict(clean_email)

            user.name = normalize_name(name)
            user.email = clean_email
            user.age = parse_age(age)
            updated = replace(user)

        logger.info("User replaced", extra={"user_id": updated.id})
        return Ok(updated)

    def patch_user(self, user_id: int, updates: Mapping[str, Any]) -> StoreResult:
        """Partial update: only fields present in `updates` are validated and applied."""
        with self._lock:
            user = self._users.get(UserId(user_id))
            if user is None:
                return NotFound(UserId(user_id))

            errors = validate_user_patch(updates)
            if errors:
                return Invalid(tuple(errors))

            clean_email = None
            if UserField.EMAIL.value in updates:
                clean_email = normalize_email(updates[UserField.EMAIL.value])
                if (
                    clean_email != user.email
                    and self._email_taken(clean_email, user.id)
                ):
                    return Conflict(clean_email)

            if UserField.NAME.value in updates:
                user.name = normalize_name(updates[UserField.NAME.value])
            if clean_email is not None:
                user.email = clean_email
            if UserField.AGE.value in updates:
                user.age = parse_age(updates[UserField.AGE.value])
            updated = replace(user)

        logger.info(
            "User patched",
            extra={"user_id": updated.id, "fields": sorted(
                f.value for f in UserField if f.value in updates
            )},
        )
        return Ok(updated)

    def delete_user(self, user_id: int) -> StoreResult:
        """Remove the user; its id is retired and never reallocated."""
        with self._lock:
            user = self._users.pop(UserId(user_id), None)
        if user is None:
            return NotFound(UserId(user_id))

        logger.info("User deleted", extra={"user_id": user.id})
        return Ok(replace(user))

    # ─── Internals (caller holds the lock) ───────────────────────

    def _email_taken(self, email: str, exclude_id: int | None) -> bool:
        candidate = normalize_email(email)
        return any(
            u.email == candidate and u.id != exclude_id
            for u in self._users.values()
        )
