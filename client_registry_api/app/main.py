"""
Main entrypoint for the Client Registry API.

This module assembles the FastAPI application, sets up logging,
installs the plain‑text error handlers and includes the versioned
router.  The ``create_app`` function builds and configures the app,
which is then instantiated at module import time as ``app``, so the
service can be run with uvicorn or another ASGI server, e.g.::

    uvicorn client_registry_api.app.main:app --reload

Each app owns one :class:`ClientStore`, kept on ``app.state``.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.store import ClientStore

logger = logging.getLogger(__name__)


def create_app(store: Optional[ClientStore] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[ClientStore]
        Collection served by the app.  When omitted, a store is built
        from ``settings.seed_file`` if one is configured, otherwise an
        empty store is used.
    settings : Optional[Settings]
        Configuration; defaults to the module‑level settings read from
        the environment.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)

    if store is None:
        if settings.seed_file:
            store = ClientStore.from_file(settings.seed_file)
            logger.info("Loaded %d clients from %s", len(store), settings.seed_file)
        else:
            store = ClientStore()

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.client_store = store
    register_exception_handlers(app)

    # ``api_prefix`` is empty by default, which serves ``/clients``.
    app.include_router(v1_router, prefix=settings.api_prefix.rstrip("/"))

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
