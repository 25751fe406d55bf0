"""
Entités contenu média.

Entités représentant un contenu du catalogue (film, série, programme)
et le sous-ensemble de champs modifiables accepté en création/mise à jour.
"""

from dataclasses import dataclass, replace
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class ContentDto:
    """
    Champs modifiables d'un contenu.

    Utilisé en entrée des opérations de création et de mise à jour.
    La couche de persistance le convertit en Content (attribution de l'ID).

    Attributs :
        title : Titre du contenu
        subtitle : Sous-titre
        description : Résumé
        image_url : URL de l'affiche
        duration : Durée en minutes
        start_time : Début de diffusion
        end_time : Fin de diffusion (aucune contrainte vis-à-vis de start_time)
        genre_list : Genres, dans l'ordre
    """

    title: str
    subtitle: str
    description: str
    image_url: str
    duration: int
    start_time: datetime
    end_time: datetime
    genre_list: tuple[str, ...] = ()


@dataclass(frozen=True)
class Content:
    """
    Contenu média persisté, identifié par un UUID.

    Immuable : toute modification passe par une mise à jour complète
    via le ContentsManager, qui retourne une nouvelle instance.
    """

    id: UUID
    title: str
    subtitle: str
    description: str
    image_url: str
    duration: int
    start_time: datetime
    end_time: datetime
    genre_list: tuple[str, ...] = ()

    def to_dto(self) -> ContentDto:
        """Retourne les champs modifiables du contenu."""
        return ContentDto(
            title=self.title,
            subtitle=self.subtitle,
            description=self.description,
            image_url=self.image_url,
            duration=self.duration,
            start_time=self.start_time,
            end_time=self.end_time,
            genre_list=self.genre_list,
        )

    def with_genres(self, genre_list: tuple[str, ...]) -> ContentDto:
        """Retourne un DTO identique au contenu avec une nouvelle liste de genres."""
        return replace(self.to_dto(), genre_list=tuple(genre_list))
