"""User Schemas — Pydantic models for the users API boundary.

Invariants:
    - UserPayload accepts any JSON value per field: rules are enforced by the store,
      so every violation is reported together instead of failing at parse time
    - Field presence for PATCH comes from model_fields_set (absent != null)
    - Unknown body keys are ignored
    - Success envelopes always carry success=True; message omitted when None

Design Decisions:
    - Any-typed fields over strict types: keeps a single source of validation
      messages (core.validate_user)
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict

from user_api.core.user_store import User


class UserPayload(BaseModel):
    """Raw candidate values from a create/replace/patch body."""
    model_config = ConfigDict(extra="ignore")

    name: Any = None
    email: Any = None
    age: Any = None

    def present_fields(self) -> dict[str, Any]:
        """Only the fields the client actually sent (PATCH semantics)."""
        return {key: getattr(self, key) for key in self.model_fields_set}


class UserResponse(BaseModel):
    """Public user representation."""
    id: int
    name: str
    email: str
    age: int

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(**user.to_dict())


class Envelope(BaseModel):
    """Common response envelope."""
    success: bool = True
    message: str | None = None


class UserEnvelope(Envelope):
    data: UserResponse


class UserListEnvelope(Envelope):
    count: int
    data: list[UserResponse]


class HealthEnvelope(Envelope):
    timestamp: datetime
