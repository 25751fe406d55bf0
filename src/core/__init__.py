"""
Couche domaine (core).

Contient les entités métier, les ports (interfaces abstraites) et les exceptions.
Cette couche n'a AUCUNE dépendance vers l'infrastructure (adapters, frameworks, BDD).

Sous-packages :
- entities/ : Entités métier (Content, ContentDto)
- ports/ : Interfaces abstraites définissant les contrats pour les adaptateurs
- exceptions.py : Erreurs métier (genre en doublon, échec de persistance)
"""
