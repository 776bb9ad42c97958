"""
User endpoints for API v1.

Thin HTTP mapping over ``UserStore``.  Store exceptions become
``HTTPException`` responses: a missing user is 404 and a policy‑denied
user is 403.  Updating a missing user is not an error; the handler
returns the store's ``{"error_message": ...}`` payload with status 200.
"""

from typing import List, Optional, Union

from fastapi import APIRouter, Depends, HTTPException, status

from users_api.app.api.deps import get_user_store
from users_api.app.schemas.user import (
    DeleteConfirmation,
    User,
    UserCreateWithoutId,
    UserUpdate,
    UserUpdateError,
)
from users_api.app.services.user_service import (
    UserAccessForbiddenError,
    UserNotFoundError,
    UserStore,
)


router = APIRouter()


@router.get("", response_model=List[User])
async def get_users(store: UserStore = Depends(get_user_store)) -> List[User]:
    """Return the full list of users in insertion order."""
    return store.list()


@router.get("/{user_id}", response_model=User)
async def find_user_by_id(user_id: str, store: UserStore = Depends(get_user_store)) -> User:
    """Return a single user.

    Responds 404 if no user has ``user_id`` and 403 if the user exists
    but may not be read.
    """
    try:
        return store.get_by_id(user_id)
    except UserNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except UserAccessForbiddenError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))


@router.post("", response_model=User, status_code=status.HTTP_201_CREATED)
async def create_user(body: User, store: UserStore = Depends(get_user_store)) -> User:
    """Add a user with a caller‑supplied id.

    Example body::

        {"id": "4", "name": "David", "email": "david@gmail.com"}
    """
    return store.create_with_id(body)


@router.post("/create-without-id", response_model=User, status_code=status.HTTP_201_CREATED)
async def create_user_without_id(
    body: UserCreateWithoutId,
    store: UserStore = Depends(get_user_store),
) -> User:
    """Add a user whose id is generated from the current number of users."""
    return store.create_auto_id(body)


@router.delete("/{user_id}", response_model=DeleteConfirmation)
async def delete_user(user_id: str, store: UserStore = Depends(get_user_store)) -> DeleteConfirmation:
    """Delete every user with ``user_id``; 404 if there is none."""
    try:
        return store.delete_by_id(user_id)
    except UserNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.put("/{user_id}", response_model=Union[User, UserUpdateError])
async def update_user(
    user_id: str,
    changes: Optional[UserUpdate] = None,
    store: UserStore = Depends(get_user_store),
) -> Union[User, UserUpdateError]:
    """Merge the supplied fields over an existing user.

    The body may be omitted, which leaves the user unchanged.
    """
    return store.update_by_id(user_id, changes.changes() if changes is not None else {})
