import os
import pytest

# Store original environment variables to restore after tests
_original_env = {}
_DB_VARS = ['MONGO_HOST', 'MONGO_PORT', 'MONGO_USER', 'MONGO_PASSWORD', 'MONGO_DB', 'MONGODB_URL']


def _setup_test_env():
    """Set up environment variables needed to build a client during tests"""
    for var in _DB_VARS:
        if var in os.environ:
            _original_env[var] = os.environ[var]

    # Only set test values if MONGODB_URL is not already set
    if not os.getenv("MONGODB_URL"):
        if not os.getenv("MONGO_HOST"):
            os.environ["MONGO_HOST"] = "localhost"
        if not os.getenv("MONGO_PORT"):
            os.environ["MONGO_PORT"] = "27017"


def _restore_env():
    """Restore original environment variables after tests"""
    for var in _DB_VARS:
        if var not in _original_env and var in os.environ:
            del os.environ[var]
    for var, value in _original_env.items():
        os.environ[var] = value
    _original_env.clear()


_setup_test_env()


@pytest.fixture(scope="session", autouse=True)
def _restore_test_env():
    """Restore original environment variables after all tests complete"""
    yield
    _restore_env()
