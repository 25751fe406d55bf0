"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

Ports repository : Contrats de persistance des données
- IContentRepository : Stockage des contenus

Ports cache : Contrats de mise en cache
- ICacheService : Cache clé -> entité indexé par UUID
"""

from src.core.ports.cache import ICacheService
from src.core.ports.repositories import IContentRepository

__all__ = [
    # Repositories
    "IContentRepository",
    # Cache
    "ICacheService",
]
