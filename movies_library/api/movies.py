"""
Movies API endpoints.

CRUD and title-fragment search over the movie library. Domain errors from the
controller are translated to HTTP errors here.
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Response, status

from movies_library.api.deps import get_movies_controller
from movies_library.controllers.movies import MoviesLibraryController
from movies_library.db import schemas
from movies_library.exceptions import (
    InvalidTitleError,
    MovieNotFoundError,
    MovieValidationError,
    TitleFragmentNotFoundError,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/movies", tags=["movies"])


def _validation_failed(exc: MovieValidationError) -> HTTPException:
    logger.warning("movie_validation_failed: %s", exc)
    return HTTPException(
        status_code=422,
        detail={"message": "Movie is not valid", "errors": exc.errors},
    )


@router.post("/", response_model=schemas.Movie, status_code=status.HTTP_201_CREATED)
async def add_movie_endpoint(
    movie: schemas.Movie,
    controller: MoviesLibraryController = Depends(get_movies_controller),
):
    # ids are assigned by the store
    movie.id = None
    try:
        return await controller.add(movie)
    except MovieValidationError as exc:
        raise _validation_failed(exc)


@router.get("/", response_model=List[schemas.Movie])
async def get_all_movies_endpoint(
    controller: MoviesLibraryController = Depends(get_movies_controller),
):
    return await controller.get_all()


@router.get("/search", response_model=List[schemas.Movie])
@router.get("/search/", response_model=List[schemas.Movie], include_in_schema=False)
async def search_movies_endpoint(
    fragment: str,
    controller: MoviesLibraryController = Depends(get_movies_controller),
):
    try:
        return await controller.search_by_title_fragment(fragment)
    except TitleFragmentNotFoundError as exc:
        logger.warning("movie_search_no_match: fragment=%r", fragment)
        raise HTTPException(status_code=404, detail=str(exc))


@router.get("/{title}", response_model=schemas.Movie)
async def get_movie_endpoint(
    title: str,
    controller: MoviesLibraryController = Depends(get_movies_controller),
):
    movie = await controller.get_by_title(title)
    if movie is None:
        raise HTTPException(status_code=404, detail="Movie not found")
    return movie


@router.put("/", response_model=schemas.Movie)
async def update_movie_endpoint(
    movie: schemas.Movie,
    controller: MoviesLibraryController = Depends(get_movies_controller),
):
    try:
        return await controller.update(movie)
    except MovieValidationError as exc:
        raise _validation_failed(exc)


async def _delete_movie(title: Optional[str], controller: MoviesLibraryController) -> Response:
    try:
        await controller.delete(title)
    except InvalidTitleError as exc:
        logger.warning("movie_delete_rejected: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc))
    except MovieNotFoundError as exc:
        logger.warning("movie_delete_not_found: title=%r", title)
        raise HTTPException(status_code=404, detail=str(exc))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/", status_code=status.HTTP_204_NO_CONTENT)
async def delete_movie_by_query_endpoint(
    title: Optional[str] = None,
    controller: MoviesLibraryController = Depends(get_movies_controller),
):
    return await _delete_movie(title, controller)


@router.delete("/{title}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_movie_endpoint(
    title: str,
    controller: MoviesLibraryController = Depends(get_movies_controller),
):
    return await _delete_movie(title, controller)
