"""
Business entities representing core domain concepts.

Exports:
- Content: A persisted media content record (movie, show)
- ContentDto: The mutable fields accepted on create/update
"""

from src.core.entities.content import Content, ContentDto

__all__ = [
    "Content",
    "ContentDto",
]
