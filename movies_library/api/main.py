"""
FastAPI app assembly: logging, lifespan and router wiring.
"""
import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI

# Configure logging
LOG_LEVEL_NAME = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_LEVEL = getattr(logging, LOG_LEVEL_NAME, logging.INFO)
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)
logger.setLevel(LOG_LEVEL)
logger.info("app_startup: log_level=%s", LOG_LEVEL_NAME)

from movies_library.api.movies import router as movies_router
from movies_library.db.database import close_client


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # Client is created lazily by the first request that needs it
    close_client()
    logger.info("app_shutdown: mongo client closed")


app = FastAPI(
    title="Movies Library API",
    description="API for adding, listing, searching, updating and deleting movies.",
    version="1.0.0",
    lifespan=lifespan,
)

# Avoid implicit trailing-slash redirects for predictable URLs
app.router.redirect_slashes = False

app.include_router(movies_router)


@app.get("/health")
def health_check():
    return {"status": "ok", "service": "movies-library"}
