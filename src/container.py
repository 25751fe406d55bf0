"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour les interfaces CLI et Web.
C'est la racine de composition : le cache des contenus y est cree une seule
fois et injecte dans la couche HTTP, jamais atteint par une variable globale.
"""

from dependency_injector import containers, providers

from .adapters.cache.memory_cache import MemoryCacheService
from .config import Settings
from .infrastructure.persistence.database import create_db_engine, init_db
from .infrastructure.persistence.repositories import SQLModelContentRepository
from .services.contents_manager import ContentsManager


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.database.init()  # Cree les tables une fois
        manager = container.contents_manager()
        cache = container.content_cache()

    Pour les tests, la configuration peut etre remplacee :
        container.config.override(providers.Object(Settings(database_url=...)))
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Engine partage par tous les repositories
    engine = providers.Singleton(
        create_db_engine,
        database_url=config.provided.database_url,
        echo=config.provided.database_echo,
    )

    # Database - Resource pour initialisation unique
    database = providers.Resource(init_db, engine=engine)

    # Repository - Factory, chaque operation ouvre sa propre session
    content_repository = providers.Factory(
        SQLModelContentRepository,
        engine=engine,
    )

    # Services
    contents_manager = providers.Factory(
        ContentsManager,
        repository=content_repository,
    )

    # Cache des contenus - Singleton, duree de vie du processus
    content_cache = providers.Singleton(MemoryCacheService)
