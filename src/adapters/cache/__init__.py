"""Adaptateurs de cache."""

from src.adapters.cache.memory_cache import MemoryCacheService

__all__ = ["MemoryCacheService"]
