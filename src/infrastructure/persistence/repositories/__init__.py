"""
Implementations SQLModel des repositories.

Ce module contient les implementations concretes des interfaces repository
definies dans src/core/ports/repositories.py, utilisant SQLModel pour
la persistance.
"""

from src.infrastructure.persistence.repositories.content_repository import (
    SQLModelContentRepository,
)

__all__ = [
    "SQLModelContentRepository",
]
