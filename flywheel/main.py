"""FastAPI application - minimal setup with dependency injection."""
import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from flywheel.api.dependencies import init_services
from flywheel.api.errors import register_exception_handlers
from flywheel.api.routes import health, llm, news, strategy
from flywheel.config import app_config

logging.basicConfig(
    level=app_config.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown."""
    logger.info("Starting application...")

    # One pooled client shared by every upstream integration
    client = httpx.AsyncClient(
        timeout=httpx.Timeout(app_config.UPSTREAM_TIMEOUT),
        headers={"User-Agent": app_config.USER_AGENT},
        follow_redirects=True,
    )

    # Initialize services with DI
    init_services(client)

    logger.info("Application started")
    yield

    # Shutdown
    logger.info("Shutting down...")
    await client.aclose()
    logger.info("Shutdown complete")


# Create app
app = FastAPI(
    title="Flywheel API",
    description="Financial chat assistant: news aggregation and trend signals",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Register routes
app.include_router(health.router)
app.include_router(strategy.router)
app.include_router(news.router)
app.include_router(llm.router)
