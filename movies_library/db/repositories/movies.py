"""
Movie repository.

Implements create/read/update/delete and title-fragment search over the
movies collection. Every method is a single call to the store.
"""
from __future__ import annotations

import logging
import re
from typing import Any, Dict, List, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection

from movies_library.db import schemas
from movies_library.exceptions import TitleFragmentNotFoundError

logger = logging.getLogger(__name__)


def _to_document(movie: schemas.Movie) -> Dict[str, Any]:
    return movie.model_dump(exclude={"id"})


def _from_document(doc: Dict[str, Any]) -> schemas.Movie:
    data = dict(doc)
    _id = data.pop("_id", None)
    return schemas.Movie(id=str(_id) if _id is not None else None, **data)


class MoviesRepository:
    """Store access for movie documents.

    The collection handle is injected; the repository holds no other state.
    """

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def insert(self, movie: schemas.Movie) -> schemas.Movie:
        """Insert a new document and write the store-assigned id back onto ``movie``."""
        result = await self.collection.insert_one(_to_document(movie))
        movie.id = str(result.inserted_id)
        logger.debug("movie_insert: id=%s title=%r", movie.id, movie.title)
        return movie

    async def get_all(self) -> List[schemas.Movie]:
        docs = await self.collection.find({}).to_list(length=None)
        return [_from_document(doc) for doc in docs]

    async def get_by_title(self, title: str) -> Optional[schemas.Movie]:
        """Return the first movie whose title matches exactly, or None."""
        doc = await self.collection.find_one({"title": title})
        if doc is None:
            return None
        return _from_document(doc)

    async def search_by_title_fragment(self, fragment: str) -> List[schemas.Movie]:
        """Return every movie whose title contains ``fragment`` (case-sensitive).

        Raises TitleFragmentNotFoundError when nothing matches.
        """
        query = {"title": {"$regex": re.escape(fragment)}}
        docs = await self.collection.find(query).to_list(length=None)
        if not docs:
            raise TitleFragmentNotFoundError(fragment)
        logger.debug("movie_search: fragment=%r matches=%d", fragment, len(docs))
        return [_from_document(doc) for doc in docs]

    async def update(self, movie: schemas.Movie) -> bool:
        """Replace the stored document for ``movie``.

        Matches on the store id when the movie has one, so the title itself can
        change; otherwise matches on the exact title.
        """
        if movie.id:
            query: Dict[str, Any] = {"_id": ObjectId(movie.id)}
        else:
            query = {"title": movie.title}
        result = await self.collection.replace_one(query, _to_document(movie))
        logger.debug("movie_update: query=%s matched=%d", query, result.matched_count)
        return result.matched_count > 0

    async def delete(self, title: str) -> bool:
        result = await self.collection.delete_one({"title": title})
        logger.debug("movie_delete: title=%r deleted=%d", title, result.deleted_count)
        return result.deleted_count > 0
