"""
API route handlers.
"""

from moviedb.api.routers import movies, system

__all__ = ["movies", "system"]
