"""
API route handlers.
"""

from app.api.routers import movies, credits, stats, system

__all__ = ["movies", "credits", "stats", "system"]
