"""
Catalogue - API REST de gestion des contenus média (films, séries).

Ce package fournit le CRUD des contenus, le filtrage par titre et genre,
la gestion des genres et un cache mémoire des contenus lus par ID.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, exceptions)
- services/ : Couche application (cas d'utilisation, orchestration)
- adapters/ : Adaptateurs (cache mémoire)
- infrastructure/ : Persistance SQL (SQLModel)
- web/ : API HTTP (FastAPI)
"""
