"""
Top‑level router for version 1 of the API.

Aggregates resource routers under a unified prefix.  Include new
routers here as resources are added.
"""

from fastapi import APIRouter

from .endpoints import users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
