"""Users — CRUD routes over the in-memory UserStore.

Invariants:
    - Every handler makes exactly one store call
    - Failed StoreResults are raised as UserApiError subclasses; global handlers
      render them (404 / 400 / 409)
    - Non-numeric path ids behave exactly like unknown ids (404 User not found)
    - Malformed JSON never reaches the store (RequestValidationError → 400)

Design Decisions:
    - Path id taken as str and parsed by core.parse_user_id: an unparsable id is
      a missing resource, not a malformed request
    - Missing body treated as an empty object so the store reports field violations
"""

import logging

from fastapi import APIRouter, Depends, Request, status

from user_api.api.dependencies import get_user_store
from user_api.core.errors import ErrorContext, UserNotFoundError, error_from_result
from user_api.core.store_results import Ok, StoreResult
from user_api.core.user_store import UserStore
from user_api.core.validate_user import parse_user_id
from user_api.schemas.user import (
    UserEnvelope, UserListEnvelope, UserPayload, UserResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/users", tags=["users"])


def _unwrap(result: StoreResult, request: Request):
    """Return the Ok payload or raise the matching UserApiError."""
    if isinstance(result, Ok):
        return result.value
    raise error_from_result(result, ErrorContext(path=request.url.path))


def _user_id_or_404(raw_id: str, request: Request) -> int:
    user_id = parse_user_id(raw_id)
    if user_id is None:
        raise UserNotFoundError(context=ErrorContext(path=request.url.path))
    return user_id


@router.get("", response_model=UserListEnvelope, response_model_exclude_none=True)
async def list_users(store: UserStore = Depends(get_user_store)):
    """List all users in creation order."""
    result = store.list_users()
    users = result.value
    return UserListEnvelope(
        count=len(users), data=[UserResponse.from_user(u) for u in users],
    )


@router.get(
    "/{user_id}", response_model=UserEnvelope, response_model_exclude_none=True,
)
async def get_user(
    user_id: str, request: Request, store: UserStore = Depends(get_user_store),
):
    """Get a single user."""
    user = _unwrap(store.get_user(_user_id_or_404(user_id, request)), request)
    return UserEnvelope(data=UserResponse.from_user(user))


@router.post(
    "", response_model=UserEnvelope, response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_user(
    request: Request,
    body: UserPayload | None = None,
    store: UserStore = Depends(get_user_store),
):
    """Create a user. All fields required."""
    body = body or UserPayload()
    user = _unwrap(store.create_user(body.name, body.email, body.age), request)
    return UserEnvelope(
        message="User created successfully", data=UserResponse.from_user(user),
    )


@router.put(
    "/{user_id}", response_model=UserEnvelope, response_model_exclude_none=True,
)
async def replace_user(
    user_id: str,
    request: Request,
    body: UserPayload | None = None,
    store: UserStore = Depends(get_user_store),
):
    """Full update. All fields required."""
    uid = _user_id_or_404(user_id, request)
    body = body or UserPayload()
    user = _unwrap(
        store.replace_user(uid, body.name, body.email, body.age), request,
    )
    return UserEnvelope(
        message="User updated successfully", data=UserResponse.from_user(user),
    )


@router.patch(
    "/{user_id}", response_model=UserEnvelope, response_model_exclude_none=True,
)
async def patch_user(
    user_id: str,
    request: Request,
    body: UserPayload | None = None,
    store: UserStore = Depends(get_user_store),
):
    """Partial update. Only the fields sent are validated and applied."""
    uid = _user_id_or_404(user_id, request)
    updates = body.present_fields() if body else {}
    user = _unwrap(store.patch_user(uid, updates), request)
    return UserEnvelope(
        message="User updated successfully", data=UserResponse.from_user(user),
    )


@router.delete(
    "/{user_id}", response_model=UserEnvelope, response_model_exclude_none=True,
)
async def delete_user(
    user_id: str, request: Request, store: UserStore = Depends(get_user_store),
):
    """Delete a user. Its id is never reused."""
    user = _unwrap(store.delete_user(_user_id_or_404(user_id, request)), request)
    return UserEnvelope(
        message="User deleted successfully", data=UserResponse.from_user(user),
    )
