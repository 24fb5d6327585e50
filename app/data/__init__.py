"""
Dataset loaders for the movie catalog and the credits collection.
"""

from app.data.movie_loader import load_movies, movie_from_record
from app.data.credit_loader import (
    credit_from_document,
    credit_to_document,
    load_credits,
    load_credits_from_collection,
)

__all__ = [
    'load_movies',
    'movie_from_record',
    'credit_from_document',
    'credit_to_document',
    'load_credits',
    'load_credits_from_collection',
]
