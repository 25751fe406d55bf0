"""
Routes de l'API REST des contenus.

Traduction HTTP <-> ContentsManager, lecture cache-aside par ID,
et ajout/retrait de genres.

Le cache n'est jamais la source de verite : il est rafraichi apres chaque
ecriture reussie, et invalide seulement quand la suppression est confirmee.
"""

from typing import Annotated, Optional
from uuid import UUID

from fastapi import APIRouter, Body, Depends, HTTPException
from fastapi.responses import JSONResponse
from loguru import logger

from ...core.entities.content import Content
from ...core.exceptions import DuplicateGenreError
from ...core.ports.cache import ICacheService
from ...services.contents_manager import ContentsManager
from ...services.genres import add_genres, remove_genres
from ..deps import get_content_cache, get_contents_manager
from ..schemas import ContentInput, ContentResponse, ErrorMessage

router = APIRouter(prefix="/content", tags=["content"])

ManagerDep = Annotated[ContentsManager, Depends(get_contents_manager)]
CacheDep = Annotated[ICacheService[Content], Depends(get_content_cache)]
GenresBody = Annotated[list[str], Body()]


def _not_found() -> HTTPException:
    return HTTPException(status_code=404)


@router.get("", response_model=list[ContentResponse])
async def get_contents(
    manager: ManagerDep,
    title: Optional[str] = None,
    genre: Optional[str] = None,
):
    """Liste les contenus, filtres par titre et/ou genre si demandes."""
    if title is None and genre is None:
        logger.info("Lecture de tous les contenus...")
        contents = await manager.get_many()
    else:
        logger.info("Lecture des contenus filtres...", title=title, genre=genre)
        contents = await manager.get_filtered(title, genre)

    if not contents:
        logger.info("Aucun contenu trouve")
        raise _not_found()

    logger.info("Contenus lus", count=len(contents))
    return [ContentResponse.from_entity(c) for c in contents]


@router.get("/{content_id}", response_model=ContentResponse)
async def get_content(content_id: UUID, manager: ManagerDep, cache: CacheDep):
    """Lit un contenu, depuis le cache si possible."""
    logger.info("Lecture du contenu...", content_id=str(content_id))

    cached = await cache.get(content_id)
    if cached is not None:
        logger.info("Contenu trouve en cache", content_id=str(content_id))
        return ContentResponse.from_entity(cached)

    content = await manager.get(content_id)
    if content is None:
        logger.info("Contenu introuvable", content_id=str(content_id))
        raise _not_found()

    await cache.set(content.id, content)
    logger.info("Contenu lu", content_id=str(content_id))
    return ContentResponse.from_entity(content)


@router.post("", response_model=ContentResponse)
async def create_content(payload: ContentInput, manager: ManagerDep, cache: CacheDep):
    """Cree un contenu puis le met en cache."""
    logger.info("Creation d'un contenu...")
    content = await manager.create(payload.to_dto())

    logger.info("Contenu cree, mise en cache", content_id=str(content.id))
    await cache.set(content.id, content)
    return ContentResponse.from_entity(content)


@router.patch("/{content_id}", response_model=ContentResponse)
async def update_content(
    content_id: UUID, payload: ContentInput, manager: ManagerDep, cache: CacheDep
):
    """Remplace les champs modifiables d'un contenu et rafraichit le cache."""
    logger.info("Mise a jour du contenu...", content_id=str(content_id))
    content = await manager.update(content_id, payload.to_dto())

    if content is None:
        logger.info("Contenu introuvable", content_id=str(content_id))
        raise _not_found()

    logger.info("Contenu mis a jour, rafraichissement du cache", content_id=str(content_id))
    await cache.set(content_id, content)
    return ContentResponse.from_entity(content)


@router.delete("/{content_id}", response_model=UUID)
async def delete_content(content_id: UUID, manager: ManagerDep, cache: CacheDep):
    """Supprime un contenu puis l'invalide dans le cache."""
    logger.info("Suppression du contenu...", content_id=str(content_id))
    deleted_id = await manager.delete(content_id)

    if deleted_id is None:
        # Le cache n'est pas touche, meme s'il contient encore une copie
        logger.info("Contenu introuvable", content_id=str(content_id))
        raise _not_found()

    logger.info("Contenu supprime, retrait du cache", content_id=str(content_id))
    await cache.remove(content_id)
    return deleted_id


@router.post(
    "/{content_id}/genre",
    response_model=ContentResponse,
    responses={400: {"model": ErrorMessage}},
)
async def add_content_genres(
    content_id: UUID, genres: GenresBody, manager: ManagerDep, cache: CacheDep
):
    """Ajoute des genres a un contenu. Refuse tout genre deja present."""
    logger.info("Ajout de genres au contenu...", content_id=str(content_id))

    content = await manager.get(content_id)
    if content is None:
        logger.info("Contenu introuvable", content_id=str(content_id))
        raise _not_found()

    try:
        genre_list = add_genres(content.genre_list, genres)
    except DuplicateGenreError as e:
        logger.info("Genre deja present", content_id=str(content_id), genre=e.genre)
        return JSONResponse(
            status_code=400,
            content=ErrorMessage(error="Genre already exists", genre=e.genre).model_dump(),
        )

    updated = await manager.update(content_id, content.with_genres(genre_list))
    if updated is None:
        logger.info("Contenu supprime pendant l'ajout de genres", content_id=str(content_id))
        raise _not_found()

    await cache.set(content_id, updated)
    logger.info("Genres ajoutes", content_id=str(content_id), genres=list(updated.genre_list))
    return ContentResponse.from_entity(updated)


@router.delete("/{content_id}/genre", response_model=ContentResponse)
async def remove_content_genres(
    content_id: UUID, genres: GenresBody, manager: ManagerDep, cache: CacheDep
):
    """Retire des genres d'un contenu. Les genres absents sont ignores."""
    logger.info("Retrait de genres du contenu...", content_id=str(content_id))

    content = await manager.get(content_id)
    if content is None:
        logger.info("Contenu introuvable", content_id=str(content_id))
        raise _not_found()

    genre_list = remove_genres(content.genre_list, genres)

    updated = await manager.update(content_id, content.with_genres(genre_list))
    if updated is None:
        logger.info("Contenu supprime pendant le retrait de genres", content_id=str(content_id))
        raise _not_found()

    await cache.set(content_id, updated)
    logger.info("Genres retires", content_id=str(content_id), genres=list(updated.genre_list))
    return ContentResponse.from_entity(updated)
