"""
Exceptions du domaine Catalogue.

Les absences (contenu introuvable) ne sont pas des exceptions : elles
remontent sous forme de résultat Optional. Seules les erreurs qui
interrompent une opération sont modélisées ici.
"""


class CatalogueError(Exception):
    """Classe de base des erreurs de l'application."""


class DuplicateGenreError(CatalogueError):
    """
    Exception levée quand un genre à ajouter existe déjà sur le contenu.

    Attributes:
        genre: Le premier genre en doublon rencontré
    """

    def __init__(self, genre: str) -> None:
        self.genre = genre
        super().__init__(f"Genre already exists: {genre}")


class PersistenceError(CatalogueError):
    """Exception levée quand la base de données rejette une opération."""
