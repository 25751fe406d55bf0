"""
Couche adaptateurs.

Les adaptateurs implémentent les ports définis dans core/ports/ et fournissent
des implémentations concrètes pour les systèmes externes.

Sous-packages :
- cache/ : Cache mémoire des entités (MemoryCacheService)

La persistance SQL vit dans infrastructure/persistence/.
Chaque adaptateur dépend de core/ mais core/ ne dépend jamais des adaptateurs.
"""

from src.adapters.cache import MemoryCacheService

__all__ = [
    "MemoryCacheService",
]
