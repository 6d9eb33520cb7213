"""
Application factory for the MaraSondu WRUAs Forum API.

``create_app`` wires configuration, logging, the database handle, error
handlers, the ``/api`` routers and the ``/uploads`` static mount into a
FastAPI instance.  There is no module-level app: run it with uvicorn's
factory mode::

    uvicorn wrua_forum_api.app.main:create_app --factory --reload

or through ``run.py`` at the project root.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles

from .api.router import router as api_router
from .core.config import Settings, resolve_path
from .core.db import Database
from .core.errors import ForumError, forum_error_response, register_exception_handlers
from .core.logging_config import setup_logging
from .core.security import authenticate_token, bearer_token, requires_admin

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings : Settings, optional
        Configuration to use.  Read from the environment when omitted.

    Returns
    -------
    FastAPI
        The configured application.  The database schema is brought up
        to date when the application starts.
    """
    settings = settings or Settings.from_env()
    # Logging first so everything below can log.
    setup_logging(settings.log_level, settings.log_file or None)

    db = Database(settings.database_url)
    upload_dir = resolve_path(settings.upload_dir)
    upload_dir.mkdir(parents=True, exist_ok=True)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        db.init_db()
        logger.info("Database ready at %s", db.path)
        yield

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.db = db
    app.state.upload_dir = upload_dir

    register_exception_handlers(app)

    # Guarded before routing so unknown admin paths and methods answer 401/403 too.
    @app.middleware("http")
    async def admin_guard(request: Request, call_next):
        if requires_admin(request.url.path):
            token = bearer_token(request.headers.get("Authorization"))
            try:
                request.state.admin = authenticate_token(token, settings.secret_key)
            except ForumError as exc:
                return forum_error_response(exc)
        return await call_next(request)

    app.include_router(api_router, prefix="/api")
    app.mount("/uploads", StaticFiles(directory=str(upload_dir)), name="uploads")
    return app
