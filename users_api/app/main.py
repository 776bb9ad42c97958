"""
Main entrypoint for the Users API.

This module assembles the FastAPI application, sets up logging, creates
the in‑memory user store and includes versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn users_api.app.main:app --reload

Tests build their own application around an isolated store by calling
``create_app(store=UserStore())``.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .core.config import Settings, settings
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router
from .services.user_service import UserStore


def create_app(store: Optional[UserStore] = None, config: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[UserStore]
        Store served by the application.  A freshly seeded store is
        created when omitted.
    config : Optional[Settings]
        Settings to build the app from.  Defaults to the module's
        environment-derived ``settings``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    config = config if config is not None else settings
    # Initialise logging before anything else so that the store and
    # routers can safely log messages.
    setup_logging(config)

    app = FastAPI(title=config.project_name, version=config.api_version, debug=config.debug)
    app.state.user_store = store if store is not None else UserStore()

    app.include_router(v1_router, prefix=config.api_prefix)

    logging.getLogger(__name__).info(
        "Users API ready with %d users", len(app.state.user_store)
    )
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
