"""
Shared FastAPI dependencies.

The user store is created by ``create_app`` and kept on
``app.state``; handlers receive it through ``get_user_store`` instead
of importing a module‑level instance.
"""

from fastapi import Request

from users_api.app.services.user_service import UserStore


def get_user_store(request: Request) -> UserStore:
    """Return the store owned by the running application."""
    return request.app.state.user_store
