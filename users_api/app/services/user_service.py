"""
In‑memory user store.

``UserStore`` owns an ordered list of ``User`` records and implements
the CRUD operations exposed by the ``/users`` endpoints.  The list is
volatile: every store starts from the same three seeded users and
nothing is written to disk.

A few behaviours are deliberately kept as they are observed by
clients:

* Reading user ``"1"`` is refused by the access policy even though the
  record exists.  The existence check runs first, so a missing id is
  always reported as not found.
* Creating a user with an explicit id does not check for collisions.
  Deleting an id removes every record carrying it.
* Ids assigned on create‑without‑id are ``len(records) + 1``, so they can
  repeat after a delete.
* Updating a missing user returns a ``UserUpdateError`` payload rather
  than raising.

The store performs no locking; callers must not use one instance from
several threads at once.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Mapping, Optional, Union

from users_api.app.schemas.user import (
    DeleteConfirmation,
    User,
    UserCreateWithoutId,
    UserUpdateError,
)
from users_api.app.services.access_policy import ACCESS_POLICY, AccessRule, is_access_forbidden


logger = logging.getLogger(__name__)


SEED_USERS = (
    {"id": "1", "name": "Alice", "email": "alice@gmail.com"},
    {"id": "2", "name": "Bob", "email": "bob@gmail.com"},
    {"id": "3", "name": "Charlie", "email": "charlie@gmail.com"},
)


class UserNotFoundError(LookupError):
    """Raised when no record carries the requested id."""

    def __init__(self, user_id: str) -> None:
        self.user_id = user_id
        super().__init__(f"User with id {user_id} not found")


class UserAccessForbiddenError(PermissionError):
    """Raised when the record exists but the access policy denies it."""

    def __init__(self, user_id: str) -> None:
        self.user_id = user_id
        super().__init__("Access to this user is forbidden")


class UserStore:
    """Ordered, in‑memory collection of users.

    Parameters
    ----------
    seed : Optional[Iterable[Mapping[str, str]]]
        Records loaded on construction and on :meth:`reset`.  Defaults
        to ``SEED_USERS``.
    policy : Optional[Mapping[str, AccessRule]]
        Access rules consulted by :meth:`get_by_id`.  Defaults to
        ``ACCESS_POLICY``.
    """

    def __init__(
        self,
        seed: Optional[Iterable[Mapping[str, str]]] = None,
        policy: Optional[Mapping[str, AccessRule]] = None,
    ) -> None:
        self._seed = tuple(dict(record) for record in (SEED_USERS if seed is None else seed))
        self._policy = ACCESS_POLICY if policy is None else policy
        self._users: List[User] = []
        self.reset()

    def __len__(self) -> int:
        return len(self._users)

    def reset(self) -> None:
        """Drop every record and reload the seed."""
        self._users = [User(**record) for record in self._seed]
        logger.debug("User store reset to %d seeded users", len(self._users))

    def list(self) -> List[User]:
        """Return all users in insertion order."""
        return list(self._users)

    def _find(self, user_id: str) -> Optional[User]:
        return next((user for user in self._users if user.id == user_id), None)

    def get_by_id(self, user_id: str) -> User:
        """Return the first user with ``user_id``.

        Raises ``UserNotFoundError`` if there is none, then
        ``UserAccessForbiddenError`` if the policy denies the id.
        """
        user = self._find(user_id)
        if user is None:
            logger.warning("Lookup of missing user %s", user_id)
            raise UserNotFoundError(user_id)
        if is_access_forbidden(user.id, self._policy):
            logger.warning("Access to user %s denied by policy", user_id)
            raise UserAccessForbiddenError(user_id)
        return user

    def create_with_id(self, new_user: User) -> User:
        """Append ``new_user`` as given and return the first user with its id.

        No uniqueness check is made, so the returned record may be an
        older one sharing the same id.
        """
        self._users.append(new_user)
        logger.info("Created user %s", new_user.id)
        return self._find(new_user.id)

    def create_auto_id(self, data: UserCreateWithoutId) -> User:
        """Append a user whose id is the current record count plus one."""
        user = User(id=str(len(self._users) + 1), name=data.name, email=data.email)
        self._users.append(user)
        logger.info("Created user %s with generated id", user.id)
        return user

    def delete_by_id(self, user_id: str) -> DeleteConfirmation:
        """Remove every user with ``user_id``.

        Raises ``UserNotFoundError`` if no user has that id.
        """
        if self._find(user_id) is None:
            logger.warning("Delete of missing user %s", user_id)
            raise UserNotFoundError(user_id)
        before = len(self._users)
        self._users = [user for user in self._users if user.id != user_id]
        logger.info("Deleted %d user(s) with id %s", before - len(self._users), user_id)
        return DeleteConfirmation()

    def update_by_id(self, user_id: str, changes: Mapping[str, Any]) -> Union[User, UserUpdateError]:
        """Shallow‑merge ``changes`` over the first user with ``user_id``.

        The merged record keeps its position in the list.  Keys that are
        not user fields are ignored.  When the user does not exist a
        ``UserUpdateError`` is returned instead of raising.
        """
        position = next(
            (index for index, user in enumerate(self._users) if user.id == user_id),
            None,
        )
        if position is None:
            logger.warning("Update of missing user %s", user_id)
            return UserUpdateError()
        updates = {key: value for key, value in changes.items() if key in User.model_fields}
        updated = self._users[position].model_copy(update=updates)
        self._users[position] = updated
        logger.info("Updated user %s (%s)", user_id, ", ".join(sorted(updates)) or "no fields")
        return updated
