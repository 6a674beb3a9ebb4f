from .movies import MoviesLibraryController, validate_movie

__all__ = ["MoviesLibraryController", "validate_movie"]
