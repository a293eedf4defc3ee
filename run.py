"""Entry point for the user management web screen.

Serves ``user_manager.app.main:app`` with Uvicorn.  Host and port are
read from the ``APP_HOST`` and ``APP_PORT`` environment variables
(defaults ``0.0.0.0`` and ``8000``); the remote API is configured with
``USERS_API_BASE_URL``.

Usage:
    python run.py
"""
import logging

from uvicorn import Config, Server

from user_manager.app.core.config import settings
from user_manager.app.main import app


def main() -> None:
    """Run the web screen until interrupted."""
    config = Config(
        app=app,
        host=settings.app_host,
        port=settings.app_port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info(
        "Serving %s on %s:%d against %s",
        settings.project_name,
        settings.app_host,
        settings.app_port,
        settings.users_api_base_url,
    )
    server.run()


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass
