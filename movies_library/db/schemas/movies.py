from typing import Optional

from pydantic import BaseModel, Field, constr


class MovieBase(BaseModel):
    title: Optional[str] = None
    director: Optional[str] = None
    year_released: int = 0
    genre: Optional[str] = None
    duration: int = 0
    rating: float = 0.0


class Movie(MovieBase):
    """A movie record as stored and returned by the library.

    Domain fields are optional so that incomplete records can be handed to the
    controller, which rejects them with ``MovieValidationError``.
    """

    id: Optional[str] = None


class MovieFields(BaseModel):
    """Constraints a movie must satisfy before it is written."""

    title: constr(strip_whitespace=True, min_length=1)
    director: constr(strip_whitespace=True, min_length=1)
    year_released: int = Field(gt=0)
    genre: constr(strip_whitespace=True, min_length=1)
    duration: int = Field(gt=0, description="Running time in minutes")
    rating: float = Field(ge=0, le=10)
