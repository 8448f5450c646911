"""Dependencies — FastAPI providers for app-scoped objects.

Invariants:
    - The UserStore is created by create_app and lives on app.state
    - Routes never construct a store themselves
"""

from fastapi import Request

from user_api.core.user_store import UserStore


def get_user_store(request: Request) -> UserStore:
    return request.app.state.user_store
