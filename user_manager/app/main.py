"""
Main entrypoint for the user management screen.

This module assembles the FastAPI application, sets up logging and
includes the page and versioned routers.  The ``create_app`` function
builds and configures the app, which is then instantiated at module
import time as ``app``, e.g.::

    uvicorn user_manager.app.main:app --reload

Each application owns one :class:`UserTableService`, i.e. one screen
state shared by every browser that opens it.
"""

from typing import Optional

from fastapi import FastAPI

from users_api import UsersAPI

from .api.v1.endpoints import page
from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .services.user_table_service import UserTableService


def create_app(
    settings: Optional[Settings] = None,
    api: Optional[UsersAPI] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use; defaults to the environment-derived
        module-level settings.
    api : Optional[UsersAPI]
        Client for the remote users resource.  Built from ``settings``
        when omitted; tests pass a fake here.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)

    if api is None:
        api = UsersAPI(
            base_url=settings.users_api_base_url,
            api_key=settings.users_api_token,
            timeout=settings.users_api_timeout,
        )

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.user_table = UserTableService(api)

    app.include_router(page.router, tags=["page"])
    app.include_router(v1_router, prefix="/api/v1")

    @app.get("/health", tags=["health"])
    async def health() -> dict:
        return {"status": "ok"}

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
