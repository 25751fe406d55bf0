"""
Implementation SQLModel du repository Content.

Implemente l'interface IContentRepository pour la persistance des contenus
via SQLModel. Chaque operation ouvre sa propre session, ce qui permet
d'appeler le repository depuis des threads de travail concurrents.
"""

from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

from sqlalchemy import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from src.core.entities.content import Content, ContentDto
from src.core.exceptions import PersistenceError
from src.core.ports.repositories import IContentRepository
from src.infrastructure.persistence.models import ContentModel


def _to_utc(value: datetime) -> datetime:
    """Normalise un horodatage en UTC (les valeurs naives sont considerees UTC)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class SQLModelContentRepository(IContentRepository):
    """
    Repository SQLModel pour les contenus.

    Implemente IContentRepository avec conversion bidirectionnelle
    entre l'entite Content (domaine) et ContentModel (persistance).
    Les erreurs SQLAlchemy sont converties en PersistenceError.
    """

    def __init__(self, engine: Engine) -> None:
        """
        Initialise le repository avec l'engine de la base.

        Args :
            engine : Engine SQLAlchemy partage par l'application
        """
        self._engine = engine

    def _to_entity(self, model: ContentModel) -> Content:
        """
        Convertit un modele DB en entite domaine.

        Args :
            model : Le modele ContentModel depuis la DB

        Retourne :
            L'entite Content correspondante
        """
        return Content(
            id=model.id,
            title=model.title,
            subtitle=model.subtitle,
            description=model.description,
            image_url=model.image_url,
            duration=model.duration,
            start_time=_to_utc(model.start_time),
            end_time=_to_utc(model.end_time),
            genre_list=tuple(model.genre_list),
        )

    def _apply_dto(self, model: ContentModel, dto: ContentDto) -> None:
        """Recopie les champs modifiables du DTO sur le modele."""
        model.title = dto.title
        model.subtitle = dto.subtitle
        model.description = dto.description
        model.image_url = dto.image_url
        model.duration = dto.duration
        model.start_time = _to_utc(dto.start_time)
        model.end_time = _to_utc(dto.end_time)
        model.genre_list = list(dto.genre_list)

    def list_all(self) -> list[Content]:
        """Liste tous les contenus persistes."""
        try:
            with Session(self._engine) as session:
                models = session.exec(select(ContentModel)).all()
                return [self._to_entity(model) for model in models]
        except SQLAlchemyError as e:
            raise PersistenceError(f"Lecture des contenus impossible: {e}") from e

    def get_by_id(self, content_id: UUID) -> Optional[Content]:
        """Recupere un contenu par son ID."""
        try:
            with Session(self._engine) as session:
                model = session.get(ContentModel, content_id)
                if model:
                    return self._to_entity(model)
                return None
        except SQLAlchemyError as e:
            raise PersistenceError(f"Lecture du contenu {content_id} impossible: {e}") from e

    def create(self, dto: ContentDto) -> Content:
        """Insere un contenu, l'ID est genere a l'insertion."""
        try:
            with Session(self._engine) as session:
                model = ContentModel(
                    title=dto.title,
                    subtitle=dto.subtitle,
                    description=dto.description,
                    image_url=dto.image_url,
                    duration=dto.duration,
                    start_time=_to_utc(dto.start_time),
                    end_time=_to_utc(dto.end_time),
                    genre_list=list(dto.genre_list),
                )
                session.add(model)
                session.commit()
                session.refresh(model)
                return self._to_entity(model)
        except SQLAlchemyError as e:
            raise PersistenceError(f"Creation du contenu impossible: {e}") from e

    def update(self, content_id: UUID, dto: ContentDto) -> Optional[Content]:
        """Remplace tous les champs modifiables d'un contenu existant."""
        try:
            with Session(self._engine) as session:
                model = session.get(ContentModel, content_id)
                if model is None:
                    return None
                self._apply_dto(model, dto)
                session.add(model)
                session.commit()
                session.refresh(model)
                return self._to_entity(model)
        except SQLAlchemyError as e:
            raise PersistenceError(f"Mise a jour du contenu {content_id} impossible: {e}") from e

    def delete(self, content_id: UUID) -> Optional[UUID]:
        """Supprime un contenu et retourne son ID, ou None si inconnu."""
        try:
            with Session(self._engine) as session:
                model = session.get(ContentModel, content_id)
                if model is None:
                    return None
                session.delete(model)
                session.commit()
                return content_id
        except SQLAlchemyError as e:
            raise PersistenceError(f"Suppression du contenu {content_id} impossible: {e}") from e
