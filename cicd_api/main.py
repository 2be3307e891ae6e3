"""FastAPI app entrypoint."""

import logging
import os
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from cicd_api.api import api_router
from cicd_api.core.clock import ProcessClock
from cicd_api.core.config import Settings, get_settings
from cicd_api.core.errors import install_error_handlers
from cicd_api.db.users import UserStore

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def mount_static(app: FastAPI, static_dir: Optional[str]) -> None:
    """Serve ``static_dir`` under /static if it exists."""
    if not static_dir:
        return
    if os.path.isdir(static_dir):
        app.mount("/static", StaticFiles(directory=static_dir), name="static")
        logger.info(f"Static files mounted from {static_dir}")
    else:
        logger.warning(f"Static directory not found at: {static_dir}")


def create_app(
    settings: Optional[Settings] = None,
    clock: Optional[ProcessClock] = None,
    users: Optional[UserStore] = None,
) -> FastAPI:
    """
    Build the API application.

    Args:
        settings: Runtime settings; defaults to the cached environment settings
        clock: Uptime source; a fresh clock starts now when omitted
        users: User store; defaults to the fixed record set

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.APP_NAME,
        description="Minimal API demonstrating a CI/CD pipeline",
        version=settings.APP_VERSION,
        redirect_slashes=False,
        **settings.docs_urls()
    )

    app.state.settings = settings
    app.state.clock = clock if clock is not None else ProcessClock()
    app.state.users = users if users is not None else UserStore()

    install_error_handlers(app)
    app.include_router(api_router)
    mount_static(app, settings.STATIC_DIR)

    logger.info(f"{settings.APP_NAME} {settings.APP_VERSION} created")
    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn."""
    settings = get_settings()
    logger.info(f"Starting server on {settings.HOST}:{settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
