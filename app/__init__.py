"""
Movie Credits Service Application Package.

This package contains the in-memory catalog core, dataset loaders,
the MongoDB connection layer, the HTTP API and shared utilities.
"""

__version__ = "1.0.0"
