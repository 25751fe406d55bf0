"""
Interfaces ports pour les repositories.

Interfaces abstraites (ports) définissant les contrats pour la persistance des contenus.
Les implémentations (adaptateurs) fournissent les mécanismes de stockage concrets
(SQL via SQLModel, mocks pour les tests, etc.).
"""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.core.entities.content import Content, ContentDto


class IContentRepository(ABC):
    """
    Interface de stockage des contenus.

    Toutes les méthodes peuvent lever PersistenceError si la base
    de données rejette l'opération.
    """

    @abstractmethod
    def list_all(self) -> list[Content]:
        """Liste tous les contenus persistés."""
        ...

    @abstractmethod
    def get_by_id(self, content_id: UUID) -> Optional[Content]:
        """Récupère un contenu par son ID."""
        ...

    @abstractmethod
    def create(self, dto: ContentDto) -> Content:
        """Crée un contenu et retourne l'entité avec son ID attribué."""
        ...

    @abstractmethod
    def update(self, content_id: UUID, dto: ContentDto) -> Optional[Content]:
        """Remplace les champs modifiables. Retourne None si l'ID est inconnu."""
        ...

    @abstractmethod
    def delete(self, content_id: UUID) -> Optional[UUID]:
        """Supprime un contenu. Retourne l'ID supprimé, ou None si inconnu."""
        ...
