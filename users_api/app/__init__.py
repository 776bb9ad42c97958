"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Schemas, the in‑memory user store and the HTTP routers
live in separate subpackages; routers are grouped under
``api/<version>/``.
"""

from .main import app, create_app  # noqa: F401
