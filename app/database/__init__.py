"""
Database module for the movie credits service.

This module provides connection management for the MongoDB document store
that holds the credits collection.
"""

from app.database.connection import MongoManager, get_mongo_manager

__all__ = [
    'MongoManager',
    'get_mongo_manager',
]
