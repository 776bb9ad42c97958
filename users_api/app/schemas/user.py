"""
Pydantic models for user data.

``User`` is both the stored record and the body accepted when a client
creates a user with an explicit id.  ``UserUpdate`` carries a partial
set of fields for the shallow merge performed on update.  The two
envelope models describe the non‑record results returned by the store.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """A user record as stored and returned by the API."""

    id: str = Field(..., examples=["4"])
    name: str = Field(..., examples=["David"])
    # Free‑form; no format check is applied on create or update.
    email: str = Field(..., examples=["david@gmail.com"])


class UserCreateWithoutId(BaseModel):
    """Schema for creating a user whose id is assigned by the store."""

    name: str = Field(..., examples=["Dana"])
    email: str = Field(..., examples=["dana@gmail.com"])


class UserUpdate(BaseModel):
    """Schema for updating an existing user.

    All fields are optional; only provided values are merged over the
    stored record.  Supplying ``id`` renames the record.  Numbers are
    accepted and stored as their string form.
    """

    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None

    def changes(self) -> Dict[str, Any]:
        """Return the fields the client actually sent, ignoring nulls."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


class UserUpdateError(BaseModel):
    """Payload returned by update when the target user does not exist.

    This is a regular (HTTP 200) response body, not an error status.
    """

    model_config = ConfigDict(extra="forbid")

    error_message: str = "User not found"


class DeleteConfirmation(BaseModel):
    """Confirmation returned after a successful delete."""

    message: str = "User deleted successfully"
