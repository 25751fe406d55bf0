"""
Cache mémoire des entités, partagé entre les requêtes.

Pas d'expiration, pas de limite de taille, pas de persistance :
une entrée vit jusqu'à sa suppression explicite ou l'arrêt du processus.
"""

import threading
from typing import Optional, TypeVar
from uuid import UUID

from src.core.ports.cache import ICacheService

T = TypeVar("T")


class MemoryCacheService(ICacheService[T]):
    """
    Cache asynchrone en mémoire indexé par UUID.

    Un verrou protège le dictionnaire : get/set/remove sont sûrs
    depuis plusieurs threads ou requêtes concurrentes. Aucune atomicité
    n'est fournie entre deux opérations.

    Example:
        cache = MemoryCacheService[Content]()
        await cache.set(content.id, content)
        cached = await cache.get(content.id)
    """

    def __init__(self) -> None:
        self._items: dict[UUID, T] = {}
        self._lock = threading.Lock()

    async def get(self, key: UUID) -> Optional[T]:
        with self._lock:
            return self._items.get(key)

    async def set(self, key: UUID, item: T) -> None:
        with self._lock:
            self._items[key] = item

    async def remove(self, key: UUID) -> None:
        with self._lock:
            self._items.pop(key, None)

    async def clear(self) -> None:
        """Supprime toutes les entrées du cache."""
        with self._lock:
            self._items.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._items
