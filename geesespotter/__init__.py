"""A terminal puzzle game: reveal every field without disturbing a goose."""

__version__ = "1.0.0"