"""
Calcul des listes de genres lors de l'ajout ou du retrait de genres.

Fonctions pures : la lecture du contenu, la mise a jour complete et le
rafraichissement du cache sont faits par la couche HTTP.
"""

from collections.abc import Iterable, Sequence

from src.core.exceptions import DuplicateGenreError


def add_genres(current: Sequence[str], candidates: Iterable[str]) -> tuple[str, ...]:
    """
    Ajoute des genres a la fin de la liste existante.

    Les candidats sont examines dans l'ordre : le premier deja present
    (comparaison exacte, sensible a la casse) interrompt l'operation et
    les suivants ne sont pas examines. Rien n'est ajoute dans ce cas.

    Args:
        current: Genres actuels du contenu
        candidates: Genres a ajouter, dans l'ordre

    Returns:
        Les genres actuels suivis des nouveaux genres

    Raises:
        DuplicateGenreError: au premier genre deja present
    """
    staged: list[str] = []
    for genre in candidates:
        if genre in current:
            raise DuplicateGenreError(genre)
        staged.append(genre)
    return tuple(current) + tuple(staged)


def remove_genres(current: Sequence[str], candidates: Iterable[str]) -> tuple[str, ...]:
    """
    Retire toutes les occurrences des genres candidats.

    Un candidat absent de la liste est ignore. L'operation est idempotente.
    """
    to_remove = set(candidates)
    return tuple(genre for genre in current if genre not in to_remove)
