"""
Interface port pour le cache des entités.
"""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar
from uuid import UUID

T = TypeVar("T")


class ICacheService(ABC, Generic[T]):
    """
    Cache clé -> entité, indexé par identifiant.

    Le cache n'est jamais la source de vérité : il est alimenté après
    les lectures et écritures réussies, et invalidé après suppression.
    """

    @abstractmethod
    async def get(self, key: UUID) -> Optional[T]:
        """Retourne l'entité en cache, ou None si absente."""
        ...

    @abstractmethod
    async def set(self, key: UUID, item: T) -> None:
        """Stocke (ou remplace) l'entité associée à la clé."""
        ...

    @abstractmethod
    async def remove(self, key: UUID) -> None:
        """Retire l'entrée associée à la clé (sans effet si absente)."""
        ...
