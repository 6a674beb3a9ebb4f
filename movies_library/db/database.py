"""
MongoDB client and database handle management.

Builds the connection URL from environment configuration, caches a single
Motor client per process, and exposes the FastAPI dependency that hands an
explicit database handle to the repository layer.
"""
import logging
import os
from functools import lru_cache
from typing import Optional
from urllib.parse import quote_plus

from motor.motor_asyncio import (
    AsyncIOMotorClient,
    AsyncIOMotorCollection,
    AsyncIOMotorDatabase,
)

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_NAME = "MoviesLibraryDb"
MOVIES_COLLECTION = "movies"


# Connection URL
# Use MONGODB_URL as-is when provided, otherwise build it from the components
def _get_mongo_url() -> str:
    if os.getenv("MONGODB_URL"):
        return os.getenv("MONGODB_URL")

    host = os.getenv("MONGO_HOST")
    port = os.getenv("MONGO_PORT", "27017")
    user = os.getenv("MONGO_USER")
    password = os.getenv("MONGO_PASSWORD")

    missing = []
    if not host: missing.append("MONGO_HOST")
    if user and not password: missing.append("MONGO_PASSWORD")
    if password and not user: missing.append("MONGO_USER")
    if missing:
        raise ValueError(f"Missing required database environment variables: {', '.join(missing)}")

    if user:
        return f"mongodb://{quote_plus(user)}:{quote_plus(password)}@{host}:{port}"
    return f"mongodb://{host}:{port}"


def get_database_name() -> str:
    return os.getenv("MONGO_DB") or DEFAULT_DATABASE_NAME


class MoviesDatabase:
    """Handle on the movies database, passed explicitly to repositories."""

    def __init__(self, client: AsyncIOMotorClient, database_name: Optional[str] = None):
        self.client = client
        self.database_name = database_name or get_database_name()
        self.db: AsyncIOMotorDatabase = client[self.database_name]

    @property
    def movies(self) -> AsyncIOMotorCollection:
        return self.db[MOVIES_COLLECTION]

    async def clear(self) -> None:
        """Drop the whole database. Used by test teardown."""
        logger.info("drop_database: name=%s", self.database_name)
        await self.client.drop_database(self.database_name)


@lru_cache(maxsize=None)
def get_client() -> AsyncIOMotorClient:
    """Return the process-wide Motor client, creating it on first use."""
    url = _get_mongo_url()
    logger.info("mongo_client_init: database=%s", get_database_name())
    return AsyncIOMotorClient(url)


def close_client() -> None:
    """Close the cached client if one was created."""
    if get_client.cache_info().currsize:
        get_client().close()
        get_client.cache_clear()


def get_database() -> MoviesDatabase:
    """Dependency to get the movies database handle."""
    return MoviesDatabase(get_client())
