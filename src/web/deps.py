"""
Dépendances partagées de l'application web.

Résout les services depuis le Container DI stocké sur app.state au démarrage.
Les tests peuvent les remplacer via app.dependency_overrides.
"""

from fastapi import Request

from ..core.entities.content import Content
from ..core.ports.cache import ICacheService
from ..services.contents_manager import ContentsManager


def get_contents_manager(request: Request) -> ContentsManager:
    """Retourne un ContentsManager issu du Container de l'application."""
    return request.app.state.container.contents_manager()


def get_content_cache(request: Request) -> ICacheService[Content]:
    """Retourne le cache des contenus, unique pour le processus."""
    return request.app.state.container.content_cache()
