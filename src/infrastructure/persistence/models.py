"""
Modeles SQLModel pour la base de donnees Catalogue.

Ces modeles representent les tables de la base de donnees.
Ils sont distincts des entites de domaine (dataclass dans core/entities/)
selon l'architecture hexagonale.

Tables:
- Contents: Contenus media (films, series, programmes)

Les colonnes gardent les noms du schema existant (imageUrl, startTime,
endTime, genreList). La liste des genres est un tableau text[] sous
PostgreSQL et du JSON sous SQLite, qui n'a pas de type tableau.
"""

from __future__ import annotations

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import ARRAY, JSON, Column, DateTime, Text
from sqlmodel import Field, SQLModel

GenreListType = ARRAY(Text).with_variant(JSON(), "sqlite")


class ContentModel(SQLModel, table=True):
    """
    Modele representant un contenu dans la base de donnees.

    Tous les champs sont non-nullables. L'ID est genere a l'insertion.
    """

    __tablename__ = "Contents"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    title: str = Field(sa_column=Column(Text, nullable=False))
    subtitle: str = Field(sa_column=Column(Text, nullable=False))
    description: str = Field(sa_column=Column(Text, nullable=False))
    image_url: str = Field(sa_column=Column("imageUrl", Text, nullable=False))
    duration: int = Field(nullable=False)
    start_time: datetime = Field(
        sa_column=Column("startTime", DateTime(timezone=True), nullable=False)
    )
    end_time: datetime = Field(
        sa_column=Column("endTime", DateTime(timezone=True), nullable=False)
    )
    genre_list: list[str] = Field(
        default_factory=list, sa_column=Column("genreList", GenreListType, nullable=False)
    )
