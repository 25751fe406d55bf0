"""
Service de gestion des contenus.

ContentsManager orchestre les operations CRUD du repository et implemente
le filtrage des contenus (titre, genre) apres lecture.

Les appels au repository sont bloquants (SQLModel) : ils sont executes
dans un thread de travail via asyncio.to_thread pour ne jamais bloquer
la boucle d'evenements du serveur.
"""

import asyncio
from typing import Optional
from uuid import UUID

from loguru import logger

from src.core.entities.content import Content, ContentDto
from src.core.ports.repositories import IContentRepository


def _matches_title(content: Content, title: str) -> bool:
    """Le titre contient la sous-chaine, sans tenir compte de la casse."""
    return title.casefold() in content.title.casefold()


def _matches_genre(content: Content, genre: str) -> bool:
    """Au moins un genre est egal au genre demande, sans tenir compte de la casse."""
    wanted = genre.casefold()
    return any(g.casefold() == wanted for g in content.genre_list)


class ContentsManager:
    """
    Service de gestion des contenus.

    Les absences (ID inconnu) sont retournees sous forme de None.
    Les erreurs de persistance (PersistenceError) sont propagees telles
    quelles a l'appelant, sans nouvelle tentative.

    Example:
        manager = ContentsManager(repository=SQLModelContentRepository(engine))
        content = await manager.create(dto)
        found = await manager.get(content.id)
        actions = await manager.get_filtered(genre="action")
    """

    def __init__(self, repository: IContentRepository) -> None:
        """
        Initialise le service.

        Args:
            repository: Repository de persistance des contenus
        """
        self._repository = repository

    async def get_many(self) -> list[Content]:
        """Retourne tous les contenus persistes, sans filtre."""
        return await asyncio.to_thread(self._repository.list_all)

    async def create(self, dto: ContentDto) -> Content:
        """
        Cree un contenu.

        Returns:
            Le contenu cree avec son ID attribue

        Raises:
            PersistenceError: si la base de donnees rejette l'insertion
        """
        content = await asyncio.to_thread(self._repository.create, dto)
        logger.debug("Contenu cree", content_id=str(content.id))
        return content

    async def get(self, content_id: UUID) -> Optional[Content]:
        """Retourne le contenu, ou None si l'ID est inconnu."""
        return await asyncio.to_thread(self._repository.get_by_id, content_id)

    async def update(self, content_id: UUID, dto: ContentDto) -> Optional[Content]:
        """Remplace les champs modifiables. Retourne None si l'ID est inconnu."""
        return await asyncio.to_thread(self._repository.update, content_id, dto)

    async def delete(self, content_id: UUID) -> Optional[UUID]:
        """Supprime le contenu. Retourne l'ID supprime, ou None si inconnu."""
        return await asyncio.to_thread(self._repository.delete, content_id)

    async def get_filtered(
        self, title: Optional[str] = None, genre: Optional[str] = None
    ) -> list[Content]:
        """
        Retourne les contenus filtres par titre et/ou genre.

        Tous les contenus sont lus puis filtres en memoire, dans l'ordre :
        - titre non vide : le titre contient la sous-chaine (insensible a la casse)
        - genre non vide : au moins un genre est egal (insensible a la casse)

        Les deux filtres se combinent en ET. Sans filtre, retourne tout.

        Args:
            title: Sous-chaine recherchee dans le titre (optionnel)
            genre: Genre exact recherche (optionnel)

        Returns:
            Liste des contenus retenus, dans l'ordre de lecture
        """
        contents = await self.get_many()

        if title is not None and title.strip():
            contents = [c for c in contents if _matches_title(c, title)]

        if genre is not None and genre.strip():
            contents = [c for c in contents if _matches_genre(c, genre)]

        return contents
