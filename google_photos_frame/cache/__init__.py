"""Temporary caches for Google Photos Frame."""

from .cache_manager import CacheManager

__all__ = ["CacheManager"]
