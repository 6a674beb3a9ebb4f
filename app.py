"""
App assembly entry point.

Re-exports the FastAPI `app` from `movies_library.api.main` so the service
can be started with `uvicorn app:app`.
"""

from movies_library.api.main import app  # noqa: F401
