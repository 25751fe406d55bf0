"""
Tests pour les entites Content et ContentDto.
"""

from dataclasses import FrozenInstanceError

import pytest

from src.core.entities import Content, ContentDto


class TestContent:
    """Tests de l'entite Content."""

    def test_content_is_immutable(self, sample_content: Content):
        """Un Content ne peut pas etre modifie apres creation."""
        with pytest.raises(FrozenInstanceError):
            sample_content.title = "Autre"

    def test_to_dto_keeps_mutable_fields(self, sample_content: Content, sample_dto: ContentDto):
        """to_dto() retourne exactement les champs modifiables."""
        assert sample_content.to_dto() == sample_dto

    def test_with_genres_replaces_only_genres(self, sample_content: Content):
        """with_genres() ne change que la liste des genres."""
        dto = sample_content.with_genres(("Drame",))

        assert dto.genre_list == ("Drame",)
        assert dto.title == sample_content.title
        assert dto.start_time == sample_content.start_time
        assert sample_content.genre_list == ("Action", "Science-Fiction")

    def test_with_genres_accepts_list(self, sample_content: Content):
        """with_genres() convertit une liste en tuple."""
        dto = sample_content.with_genres(["Drame", "Thriller"])
        assert dto.genre_list == ("Drame", "Thriller")

    def test_default_genre_list_is_empty(self, sample_dto: ContentDto):
        """Sans genres, la liste est vide."""
        dto = ContentDto(
            title="Sans genre",
            subtitle="",
            description="",
            image_url="",
            duration=10,
            start_time=sample_dto.start_time,
            end_time=sample_dto.end_time,
        )
        assert dto.genre_list == ()
