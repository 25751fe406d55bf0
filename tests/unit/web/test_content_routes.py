"""
Tests des routes REST des contenus.

Le ContentsManager est remplace par un mock (dependency_overrides) ;
le cache est un vrai MemoryCacheService pour verifier la logique cache-aside.
"""

import asyncio
from dataclasses import replace
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient
from loguru import logger

from src.adapters.cache.memory_cache import MemoryCacheService
from src.core.exceptions import PersistenceError
from src.services.contents_manager import ContentsManager
from src.web.app import create_app
from src.web.deps import get_content_cache, get_contents_manager

BASE = "/api/v1/content"


def _payload(**overrides) -> dict:
    body = {
        "title": "Inception",
        "subtitle": "Your mind is the scene of the crime",
        "description": "Un voleur qui s'infiltre dans les reves...",
        "imageUrl": "https://example.org/inception.jpg",
        "duration": 148,
        "startTime": "2024-05-27T20:00:00+00:00",
        "endTime": "2024-05-27T22:28:00+00:00",
        "genreList": ["Action", "Science-Fiction"],
    }
    body.update(overrides)
    return body


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def mock_manager():
    """Mock ContentsManager, toutes les operations retournent None par defaut."""
    manager = MagicMock(spec=ContentsManager)
    manager.get_many = AsyncMock(return_value=[])
    manager.get_filtered = AsyncMock(return_value=[])
    manager.get = AsyncMock(return_value=None)
    manager.create = AsyncMock(return_value=None)
    manager.update = AsyncMock(return_value=None)
    manager.delete = AsyncMock(return_value=None)
    return manager


@pytest.fixture
def cache():
    """Cache reel, vide."""
    return MemoryCacheService()


@pytest.fixture
def client(container, mock_manager, cache):
    """TestClient avec manager mocke et cache injecte."""
    app = create_app(container)
    app.dependency_overrides[get_contents_manager] = lambda: mock_manager
    app.dependency_overrides[get_content_cache] = lambda: cache
    return TestClient(app)


# ============================================================================
# GET /content
# ============================================================================


class TestGetContents:
    """Tests de la liste des contenus."""

    def test_returns_all_contents(self, client, mock_manager, sample_content):
        """200 avec la liste complete."""
        mock_manager.get_many.return_value = [sample_content]

        resp = client.get(BASE)

        assert resp.status_code == 200
        body = resp.json()
        assert len(body) == 1
        assert body[0]["id"] == str(sample_content.id)
        assert body[0]["imageUrl"] == sample_content.image_url
        assert body[0]["genreList"] == ["Action", "Science-Fiction"]
        mock_manager.get_filtered.assert_not_called()

    def test_empty_returns_404(self, client, mock_manager):
        """404 quand aucun contenu n'existe."""
        resp = client.get(BASE)
        assert resp.status_code == 404

    def test_filters_are_forwarded(self, client, mock_manager, sample_content):
        """Les parametres title et genre passent par get_filtered."""
        mock_manager.get_filtered.return_value = [sample_content]

        resp = client.get(BASE, params={"title": "incep", "genre": "action"})

        assert resp.status_code == 200
        assert len(resp.json()) == 1
        mock_manager.get_filtered.assert_awaited_once_with("incep", "action")

    def test_single_filter(self, client, mock_manager, sample_content):
        """Un seul filtre suffit a passer par get_filtered."""
        mock_manager.get_filtered.return_value = [sample_content]

        resp = client.get(BASE, params={"genre": "Action"})

        assert resp.status_code == 200
        mock_manager.get_filtered.assert_awaited_once_with(None, "Action")

    def test_empty_filtered_returns_404(self, client, mock_manager):
        """404 quand le filtre ne retient rien."""
        resp = client.get(BASE, params={"title": "Matrix"})
        assert resp.status_code == 404


# ============================================================================
# GET /content/{id}
# ============================================================================


class TestGetContent:
    """Tests de la lecture cache-aside."""

    def test_cache_hit_skips_manager(self, client, mock_manager, cache, sample_content):
        """Un contenu en cache est retourne sans consulter le manager."""
        asyncio.run(cache.set(sample_content.id, sample_content))

        resp = client.get(f"{BASE}/{sample_content.id}")

        assert resp.status_code == 200
        assert resp.json()["title"] == "Inception"
        mock_manager.get.assert_not_called()

    def test_cache_miss_populates_cache(self, client, mock_manager, cache, sample_content):
        """Apres un defaut de cache, le contenu lu est mis en cache."""
        mock_manager.get.return_value = sample_content

        resp = client.get(f"{BASE}/{sample_content.id}")

        assert resp.status_code == 200
        assert resp.json()["id"] == str(sample_content.id)
        assert asyncio.run(cache.get(sample_content.id)) == sample_content

    def test_second_read_is_cache_hit(self, client, mock_manager, sample_content):
        """La seconde lecture ne consulte plus le manager."""
        mock_manager.get.return_value = sample_content

        client.get(f"{BASE}/{sample_content.id}")
        client.get(f"{BASE}/{sample_content.id}")

        mock_manager.get.assert_awaited_once_with(sample_content.id)

    def test_read_logs_content_id(self, client, mock_manager, sample_content):
        """Chaque etape de la lecture est journalisee avec le content_id."""
        mock_manager.get.return_value = sample_content
        messages = []
        handler_id = logger.add(messages.append, level="INFO")
        try:
            client.get(f"{BASE}/{sample_content.id}")
        finally:
            logger.remove(handler_id)

        logged = [
            message.record["message"]
            for message in messages
            if message.record["extra"].get("content_id") == str(sample_content.id)
        ]
        assert logged == ["Lecture du contenu...", "Contenu lu"]

    def test_not_found(self, client, mock_manager, cache):
        """404 sans toucher au cache quand le contenu n'existe pas."""
        resp = client.get(f"{BASE}/{uuid4()}")

        assert resp.status_code == 404
        assert len(cache) == 0

    def test_invalid_id_returns_422(self, client):
        """Un identifiant qui n'est pas un UUID est rejete."""
        resp = client.get(f"{BASE}/not-a-uuid")
        assert resp.status_code == 422


# ============================================================================
# POST / PATCH / DELETE /content
# ============================================================================


class TestWrites:
    """Tests des ecritures et de leur effet sur le cache."""

    def test_create_caches_result(self, client, mock_manager, cache, sample_content):
        """La creation renvoie le contenu cree et le met en cache."""
        mock_manager.create.return_value = sample_content

        resp = client.post(BASE, json=_payload())

        assert resp.status_code == 200
        assert resp.json()["id"] == str(sample_content.id)
        assert asyncio.run(cache.get(sample_content.id)) == sample_content
        dto = mock_manager.create.await_args.args[0]
        assert dto.title == "Inception"
        assert dto.genre_list == ("Action", "Science-Fiction")

    def test_create_persistence_failure_returns_problem(self, client, mock_manager, cache):
        """Un echec de persistance renvoie une reponse 500 'problem'."""
        mock_manager.create.side_effect = PersistenceError("rejected")

        resp = client.post(BASE, json=_payload())

        assert resp.status_code == 500
        assert resp.headers["content-type"].startswith("application/problem+json")
        assert resp.json()["status"] == 500
        assert len(cache) == 0

    def test_create_invalid_body_returns_422(self, client, mock_manager):
        """Un corps incomplet est rejete avant d'atteindre le manager."""
        resp = client.post(BASE, json={"subtitle": "sans titre"})

        assert resp.status_code == 422
        mock_manager.create.assert_not_called()

    def test_create_negative_duration_rejected(self, client):
        """La duree doit etre positive ou nulle."""
        resp = client.post(BASE, json=_payload(duration=-1))
        assert resp.status_code == 422

    def test_update_refreshes_cache(self, client, mock_manager, cache, sample_content):
        """La mise a jour remplace l'entree du cache."""
        stale = replace(sample_content, title="Ancien")
        asyncio.run(cache.set(sample_content.id, stale))
        mock_manager.update.return_value = sample_content

        resp = client.patch(f"{BASE}/{sample_content.id}", json=_payload())

        assert resp.status_code == 200
        assert asyncio.run(cache.get(sample_content.id)) == sample_content

    def test_update_not_found(self, client, mock_manager, cache):
        """404 sans toucher au cache quand le contenu n'existe pas."""
        resp = client.patch(f"{BASE}/{uuid4()}", json=_payload())

        assert resp.status_code == 404
        assert len(cache) == 0

    def test_delete_removes_from_cache(self, client, mock_manager, cache, sample_content):
        """La suppression renvoie l'ID et invalide le cache."""
        asyncio.run(cache.set(sample_content.id, sample_content))
        mock_manager.delete.return_value = sample_content.id

        resp = client.delete(f"{BASE}/{sample_content.id}")

        assert resp.status_code == 200
        assert resp.json() == str(sample_content.id)
        assert asyncio.run(cache.get(sample_content.id)) is None

    def test_delete_not_found_leaves_cache(self, client, mock_manager, cache, sample_content):
        """Une suppression introuvable laisse le cache intact."""
        asyncio.run(cache.set(sample_content.id, sample_content))

        resp = client.delete(f"{BASE}/{sample_content.id}")

        assert resp.status_code == 404
        assert asyncio.run(cache.get(sample_content.id)) == sample_content


# ============================================================================
# POST / DELETE /content/{id}/genre
# ============================================================================


class TestGenres:
    """Tests de l'ajout et du retrait de genres."""

    def test_add_genres(self, client, mock_manager, cache, sample_content):
        """Les genres sont ajoutes a la fin et le resultat est mis en cache."""
        updated = replace(sample_content, genre_list=("Action", "Science-Fiction", "Drama"))
        mock_manager.get.return_value = sample_content
        mock_manager.update.return_value = updated

        resp = client.post(f"{BASE}/{sample_content.id}/genre", json=["Drama"])

        assert resp.status_code == 200
        assert resp.json()["genreList"] == ["Action", "Science-Fiction", "Drama"]
        content_id, dto = mock_manager.update.await_args.args
        assert content_id == sample_content.id
        assert dto.genre_list == ("Action", "Science-Fiction", "Drama")
        assert dto.title == sample_content.title
        assert asyncio.run(cache.get(sample_content.id)) == updated

    def test_add_duplicate_genre_returns_400(self, client, mock_manager, cache, sample_content):
        """Un genre deja present est refuse et rien n'est mis a jour."""
        mock_manager.get.return_value = sample_content

        resp = client.post(f"{BASE}/{sample_content.id}/genre", json=["Drama", "Action"])

        assert resp.status_code == 400
        assert resp.json() == {"error": "Genre already exists", "genre": "Action"}
        mock_manager.update.assert_not_called()
        assert len(cache) == 0

    def test_add_genres_not_found(self, client, mock_manager):
        """404 quand le contenu n'existe pas."""
        resp = client.post(f"{BASE}/{uuid4()}/genre", json=["Drama"])

        assert resp.status_code == 404
        mock_manager.update.assert_not_called()

    def test_add_genres_content_deleted_meanwhile(self, client, mock_manager, cache, sample_content):
        """404 si le contenu disparait entre la lecture et la mise a jour."""
        mock_manager.get.return_value = sample_content

        resp = client.post(f"{BASE}/{sample_content.id}/genre", json=["Drama"])

        assert resp.status_code == 404
        assert len(cache) == 0

    def test_remove_genres(self, client, mock_manager, cache, sample_content):
        """Les genres demandes sont retires, les absents ignores."""
        updated = replace(sample_content, genre_list=("Science-Fiction",))
        mock_manager.get.return_value = sample_content
        mock_manager.update.return_value = updated

        resp = client.request(
            "DELETE", f"{BASE}/{sample_content.id}/genre", json=["Action", "Horror"]
        )

        assert resp.status_code == 200
        assert resp.json()["genreList"] == ["Science-Fiction"]
        _, dto = mock_manager.update.await_args.args
        assert dto.genre_list == ("Science-Fiction",)
        assert asyncio.run(cache.get(sample_content.id)) == updated

    def test_remove_genres_not_found(self, client, mock_manager):
        """404 quand le contenu n'existe pas."""
        resp = client.request("DELETE", f"{BASE}/{uuid4()}/genre", json=["Drama"])

        assert resp.status_code == 404
        mock_manager.update.assert_not_called()


class TestHealth:
    """Route de sante."""

    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}
