"""Resource API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map unexpected failures → structured JSON responses
    - Database initialized on startup and disposed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - run() reads HOST/PORT from settings so `resource-api` needs no flags
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from resource_api.api.error_handlers import register_error_handlers
from resource_api.api.routes import health, resources
from resource_api.config import get_settings
from resource_api.infrastructure.database import close_db, init_db
from resource_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    await init_db(settings.database_url)
    logger.info("Resource API started")
    yield
    await close_db()
    logger.info("Resource API shutting down")


app = FastAPI(title="Resource API", version="1.0.0", lifespan=lifespan)

# Routes — explicit registration
app.include_router(health.router)
app.include_router(resources.router)

register_error_handlers(app)


def run() -> None:
    """Serve the application with uvicorn."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
