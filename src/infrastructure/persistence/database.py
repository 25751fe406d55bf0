"""
Configuration de la base de donnees pour Catalogue.

Ce module fournit :
- Creation de l'engine SQLAlchemy (SQLite ou PostgreSQL selon l'URL)
- Session factory avec context manager
- Fonction d'initialisation des tables

La base de donnees est configuree via CATALOGUE_DATABASE_URL (defaut: sqlite:///data/catalogue.db).
L'engine est cree par le Container DI : aucun etat global dans ce module.
"""

from collections.abc import Generator
from pathlib import Path

from loguru import logger
from sqlalchemy import Engine
from sqlmodel import Session, SQLModel, create_engine


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Cree l'engine de la base de donnees.

    Pour SQLite, le repertoire parent du fichier est cree si necessaire et
    l'engine est configure pour etre partage entre threads (les appels au
    repository sont executes dans des threads de travail).

    Args:
        database_url: URL SQLAlchemy de la base
        echo: Journalise les requetes SQL emises

    Returns:
        L'engine SQLAlchemy
    """
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
        if database_url.startswith("sqlite:///") and not database_url.startswith(
            "sqlite:///:memory:"
        ):
            db_path = Path(database_url.replace("sqlite:///", "", 1))
            db_path.parent.mkdir(exist_ok=True, parents=True)

    return create_engine(database_url, echo=echo, connect_args=connect_args)


def get_session(engine: Engine) -> Generator[Session, None, None]:
    """
    Generateur de session SQLModel.

    Utilisation avec next() :
        session = next(get_session(engine))
        try:
            # operations
        finally:
            session.close()

    Yields:
        Session SQLModel connectee a l'engine
    """
    with Session(engine) as session:
        yield session


def init_db(engine: Engine) -> None:
    """
    Initialise la base de donnees en creant toutes les tables.

    Importe les modeles pour enregistrer leurs metadonnees dans
    SQLModel.metadata, puis cree les tables manquantes. Les tables
    existantes ne sont pas modifiees.

    Doit etre appelee une fois au demarrage de l'application.
    """
    # L'import est fait ici pour eviter les imports circulaires
    from src.infrastructure.persistence import models  # noqa: F401

    SQLModel.metadata.create_all(engine)
    logger.debug("Tables initialisees", url=engine.url.render_as_string(hide_password=True))
