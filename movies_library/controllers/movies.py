"""
Movies library controller.

Validates requests before delegating to the repository, and turns store
results into domain outcomes (``None`` on an exact-title miss, exceptions
from ``movies_library.exceptions`` otherwise).
"""
from __future__ import annotations

import logging
from typing import List, Optional

from bson import ObjectId
from pydantic import ValidationError

from movies_library.db import schemas
from movies_library.db.repositories.movies import MoviesRepository
from movies_library.exceptions import (
    InvalidTitleError,
    MovieNotFoundError,
    MovieValidationError,
)

logger = logging.getLogger(__name__)


def validate_movie(movie: schemas.Movie) -> None:
    """Raise MovieValidationError listing every constraint ``movie`` violates."""
    errors = []
    try:
        schemas.MovieFields.model_validate(movie.model_dump(exclude={"id"}, exclude_none=True))
    except ValidationError as exc:
        errors.extend(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in exc.errors()
        )
    # ids come back from the store as ObjectId hex strings
    if movie.id is not None and not ObjectId.is_valid(movie.id):
        errors.append(f"id: '{movie.id}' is not a valid ObjectId")
    if errors:
        raise MovieValidationError(errors)


class MoviesLibraryController:
    def __init__(self, repository: MoviesRepository):
        self.repository = repository

    async def add(self, movie: schemas.Movie) -> schemas.Movie:
        try:
            validate_movie(movie)
        except MovieValidationError as exc:
            logger.info("movie_add_rejected: errors=%s", exc.errors)
            raise
        created = await self.repository.insert(movie)
        logger.info("movie_added: id=%s title=%r", created.id, created.title)
        return created

    async def delete(self, title: Optional[str]) -> None:
        """Delete the movie with exactly ``title``.

        Order of checks: argument, then existence, then the delete itself.
        """
        if not title:
            raise InvalidTitleError("Title cannot be null or empty.")
        existing = await self.repository.get_by_title(title)
        if existing is None:
            raise MovieNotFoundError(title)
        await self.repository.delete(title)
        logger.info("movie_deleted: title=%r", title)

    async def get_all(self) -> List[schemas.Movie]:
        return await self.repository.get_all()

    async def get_by_title(self, title: str) -> Optional[schemas.Movie]:
        return await self.repository.get_by_title(title)

    async def search_by_title_fragment(self, fragment: str) -> List[schemas.Movie]:
        return await self.repository.search_by_title_fragment(fragment)

    async def update(self, movie: schemas.Movie) -> schemas.Movie:
        try:
            validate_movie(movie)
        except MovieValidationError as exc:
            logger.info("movie_update_rejected: errors=%s", exc.errors)
            raise
        matched = await self.repository.update(movie)
        if not matched:
            logger.warning("movie_update_no_match: id=%s title=%r", movie.id, movie.title)
        else:
            logger.info("movie_updated: id=%s title=%r", movie.id, movie.title)
        return movie
