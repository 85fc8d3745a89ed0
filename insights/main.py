import logging
import sys
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request

from insights.api.router import api_router
from insights.config import settings
from insights.services.github import close_github_client

NOISY_LOGGERS = ("httpx", "httpcore", "hpack", "uvicorn.access")


def setup_logging() -> None:
    """Send application logs to stdout at the configured level."""
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else settings.log_level.upper(),
        format="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    # Per-request HTTP chatter; failed requests are logged by log_requests
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Configure logging on startup; close the shared GitHub client on shutdown."""
    setup_logging()
    if not settings.authenticated:
        logger.warning("GITHUB_TOKEN not set; GitHub allows 60 requests/hour unauthenticated")
    logger.info(f"GitHub Insights API starting (api={settings.github_api_url})")
    yield
    await close_github_client()
    logger.info("GitHub Insights API stopped")


app = FastAPI(
    title="GitHub Insights API",
    description="Cached GitHub repository, activity, contribution and stats aggregates",
    version="0.1.0",
    lifespan=lifespan,
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log failed API requests with their duration."""
    if request.url.path == "/health":
        return await call_next(request)

    started = time.perf_counter()
    response = await call_next(request)

    if response.status_code >= 400:
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            f"{request.method} {request.url.path} → {response.status_code} ({elapsed_ms:.0f}ms)"
        )

    return response


app.include_router(api_router)


@app.get("/health")
async def health_check():
    return {"status": "healthy"}
