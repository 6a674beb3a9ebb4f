"""
API dependency helpers.

Builds the repository and controller for a request from the shared database
handle.
"""
from fastapi import Depends

from movies_library.controllers.movies import MoviesLibraryController
from movies_library.db.database import MoviesDatabase, get_database
from movies_library.db.repositories.movies import MoviesRepository


def get_movies_repository(database: MoviesDatabase = Depends(get_database)) -> MoviesRepository:
    return MoviesRepository(database.movies)


def get_movies_controller(
    repository: MoviesRepository = Depends(get_movies_repository),
) -> MoviesLibraryController:
    return MoviesLibraryController(repository)
