"""
Domain exceptions raised by the controller and repository layers.

The API layer maps each of these to an HTTP status code; nothing below the
router catches them.
"""
from __future__ import annotations

from typing import List


class MoviesLibraryError(Exception):
    """Base class for all movies library errors."""


class MovieValidationError(MoviesLibraryError):
    """A movie is missing required fields or carries out-of-range values."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("Movie is not valid: " + "; ".join(self.errors))


class InvalidTitleError(MoviesLibraryError, ValueError):
    """A title argument was None or empty."""


class MovieNotFoundError(MoviesLibraryError, LookupError):
    """No movie matched the title an operation was asked to act on."""

    def __init__(self, title: str):
        self.title = title
        super().__init__(f"Movie with title '{title}' not found.")


class TitleFragmentNotFoundError(MoviesLibraryError, KeyError):
    """A title fragment search matched no movies."""

    def __init__(self, fragment: str):
        self.fragment = fragment
        super().__init__(f"No movies found with title containing '{fragment}'.")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self.args[0]


__all__ = [
    "InvalidTitleError",
    "MovieNotFoundError",
    "MovieValidationError",
    "MoviesLibraryError",
    "TitleFragmentNotFoundError",
]
