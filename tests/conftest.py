"""
Fixtures pytest partagees pour les tests Catalogue.

Ce module contient les fixtures communes utilisees dans les tests:
- Settings de test avec base SQLite et log dans un repertoire temporaire
- Engine initialise et repository SQLModel
- Entites et DTO d'exemple
"""

from collections.abc import Iterator
from datetime import datetime, timezone
from pathlib import Path
from uuid import uuid4

import pytest
from dependency_injector import providers
from sqlalchemy import Engine

from src.config import Settings
from src.container import Container
from src.core.entities.content import Content, ContentDto
from src.infrastructure.persistence.database import create_db_engine, init_db
from src.infrastructure.persistence.repositories import SQLModelContentRepository


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Utilise tmp_path de pytest pour isoler la base et les logs de chaque test.
    """
    return Settings(
        database_url=f"sqlite:///{tmp_path}/test.db",
        log_level="DEBUG",
        log_file=tmp_path / "test.log",
    )


@pytest.fixture
def engine(test_settings: Settings) -> Iterator[Engine]:
    """Engine SQLite temporaire avec les tables creees."""
    engine = create_db_engine(test_settings.database_url)
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def content_repository(engine: Engine) -> SQLModelContentRepository:
    """Repository SQLModel branche sur la base temporaire."""
    return SQLModelContentRepository(engine)


@pytest.fixture
def container(test_settings: Settings) -> Iterator[Container]:
    """Container DI dont la configuration pointe sur la base temporaire."""
    container = Container()
    container.config.override(providers.Object(test_settings))
    yield container
    container.config.reset_override()


@pytest.fixture
def sample_dto() -> ContentDto:
    """DTO d'un film type."""
    return ContentDto(
        title="Inception",
        subtitle="Your mind is the scene of the crime",
        description="Un voleur qui s'infiltre dans les reves...",
        image_url="https://example.org/inception.jpg",
        duration=148,
        start_time=datetime(2024, 5, 27, 20, 0, tzinfo=timezone.utc),
        end_time=datetime(2024, 5, 27, 22, 28, tzinfo=timezone.utc),
        genre_list=("Action", "Science-Fiction"),
    )


@pytest.fixture
def sample_content(sample_dto: ContentDto) -> Content:
    """Contenu persiste type, construit depuis sample_dto."""
    return Content(
        id=uuid4(),
        title=sample_dto.title,
        subtitle=sample_dto.subtitle,
        description=sample_dto.description,
        image_url=sample_dto.image_url,
        duration=sample_dto.duration,
        start_time=sample_dto.start_time,
        end_time=sample_dto.end_time,
        genre_list=sample_dto.genre_list,
    )
