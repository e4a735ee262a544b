"""
API Routers module.
"""
from fixture_api.routers import collections, fixtures, health

__all__ = ["collections", "fixtures", "health"]
