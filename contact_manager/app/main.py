"""
Main entrypoint for the Contact Manager web application.

This module assembles the FastAPI application: logging, the contact
store and service, session and method override middleware, the page
routers, static files and exception handlers.  ``create_app`` builds
and configures the app, which is then instantiated at module import
time as ``app``, e.g.::

    uvicorn contact_manager.app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.sessions import SessionMiddleware

from .api.router import router
from .core.config import Settings, settings as default_settings
from .core.db import ContactStore
from .core.errors import StoreError
from .core.logging_config import setup_logging
from .core.middleware import MethodOverrideMiddleware
from .core.templates import STATIC_DIR
from .services.contact_service import ContactService


logger = logging.getLogger(__name__)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # Unknown paths and known paths with an unsupported method both fall
    # through to the catch-all page.
    if exc.status_code in (404, 405):
        return PlainTextResponse("Page not found", status_code=404)
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


async def store_error_handler(request: Request, exc: StoreError):
    logger.error("Store failure on %s %s: %s", request.method, request.url.path, exc)
    return PlainTextResponse("Internal Server Error", status_code=500)


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use instead of the module level ``settings``
        (tests pass a temporary database here).

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.  The contact store
        is opened when the application starts and closed when it
        shuts down.
    """
    cfg = app_settings or default_settings
    # Initialise logging before anything else so that startup can log.
    setup_logging(cfg.log_level, cfg.log_file)

    store = ContactStore(cfg.database_url)
    service = ContactService(store)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        store.open()
        try:
            yield
        finally:
            store.close()

    app = FastAPI(
        title=cfg.project_name,
        version=cfg.version,
        debug=cfg.debug,
        lifespan=lifespan,
    )
    app.state.settings = cfg
    app.state.contact_service = service

    # Middleware added last runs first: the method is rewritten before
    # the session is loaded and before routing.
    app.add_middleware(
        SessionMiddleware,
        secret_key=cfg.secret_key,
        session_cookie=cfg.session_cookie,
        max_age=cfg.session_max_age,
    )
    app.add_middleware(MethodOverrideMiddleware)

    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
    app.include_router(router)

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(StoreError, store_error_handler)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
