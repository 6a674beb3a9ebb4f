import os
import shutil
import subprocess
import uuid

import pytest
import pytest_asyncio
from motor.motor_asyncio import AsyncIOMotorClient

from movies_library.controllers.movies import MoviesLibraryController
from movies_library.db.database import MoviesDatabase
from movies_library.db.repositories.movies import MoviesRepository


def _require_docker():
    # Allow explicit skip to avoid failing when docker isn't accessible
    if os.getenv("SKIP_DOCKER_TESTS") == "1":
        pytest.skip("SKIP_DOCKER_TESTS=1")
    if not shutil.which("docker"):
        pytest.skip("Docker CLI is not available; skipping tests that require containers")
    try:
        proc_info = subprocess.run(["docker", "info"], capture_output=True, text=True, timeout=5)
        if proc_info.returncode != 0:
            pytest.skip("Docker daemon is not available; skipping tests that require containers")
    except (OSError, subprocess.SubprocessError):
        pytest.skip("Docker daemon is not available; skipping tests that require containers")


# Session-wide MongoDB test container
@pytest.fixture(scope="session")
def _mongo_url():
    explicit = os.getenv("TEST_MONGODB_URL")
    if explicit:
        yield explicit
        return
    _require_docker()
    from testcontainers.mongodb import MongoDbContainer

    image = os.getenv("TEST_MONGO_IMAGE", "mongo:7")
    with MongoDbContainer(image) as mongo:
        yield mongo.get_connection_url()


# Fresh database per test, dropped at teardown
@pytest_asyncio.fixture
async def movies_db(_mongo_url):
    client = AsyncIOMotorClient(_mongo_url)
    database = MoviesDatabase(client, f"MoviesLibraryTestDb_{uuid.uuid4().hex}")
    try:
        yield database
    finally:
        await database.clear()
        client.close()


@pytest.fixture
def repository(movies_db):
    return MoviesRepository(movies_db.movies)


@pytest.fixture
def controller(repository):
    return MoviesLibraryController(repository)
