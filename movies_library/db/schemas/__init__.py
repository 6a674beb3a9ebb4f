"""
Pydantic schemas for movie records.
"""

from .movies import MovieBase, Movie, MovieFields

__all__ = [
    "MovieBase",
    "Movie",
    "MovieFields",
]
