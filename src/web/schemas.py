"""
Schemas pydantic de l'API HTTP.

Les corps JSON utilisent des cles camelCase (imageUrl, startTime, genreList...).
Les schemas convertissent depuis/vers les entites du domaine.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..core.entities.content import Content, ContentDto


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ContentInput(_CamelModel):
    """Corps des requetes de creation et de mise a jour d'un contenu."""

    title: str = Field(..., description="Titre du contenu")
    subtitle: str = Field("", description="Sous-titre")
    description: str = Field("", description="Resume")
    image_url: str = Field("", description="URL de l'affiche")
    duration: int = Field(..., ge=0, description="Duree en minutes")
    start_time: datetime = Field(..., description="Debut de diffusion")
    end_time: datetime = Field(..., description="Fin de diffusion")
    genre_list: list[str] = Field(default_factory=list, description="Genres, dans l'ordre")

    def to_dto(self) -> ContentDto:
        return ContentDto(
            title=self.title,
            subtitle=self.subtitle,
            description=self.description,
            image_url=self.image_url,
            duration=self.duration,
            start_time=self.start_time,
            end_time=self.end_time,
            genre_list=tuple(self.genre_list),
        )


class ContentResponse(_CamelModel):
    """Representation d'un contenu renvoyee par l'API."""

    id: UUID
    title: str
    subtitle: str
    description: str
    image_url: str
    duration: int
    start_time: datetime
    end_time: datetime
    genre_list: list[str]

    @classmethod
    def from_entity(cls, content: Content) -> "ContentResponse":
        return cls(
            id=content.id,
            title=content.title,
            subtitle=content.subtitle,
            description=content.description,
            image_url=content.image_url,
            duration=content.duration,
            start_time=content.start_time,
            end_time=content.end_time,
            genre_list=list(content.genre_list),
        )


class ErrorMessage(BaseModel):
    """Erreur metier renvoyee avec un statut 400."""

    error: str
    genre: str | None = None
