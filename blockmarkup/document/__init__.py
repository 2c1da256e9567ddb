"""Document model: blocks, per-character metadata, entities."""

from blockmarkup.document.models import (
    CharacterMetadata,
    ContentBlock,
    Document,
    Entity,
)
from blockmarkup.document.ranges import get_entity_ranges, get_style_ranges
from blockmarkup.document.raw import document_from_raw

__all__ = [
    # Models
    "CharacterMetadata",
    "ContentBlock",
    "Document",
    "Entity",
    # Ranges
    "get_entity_ranges",
    "get_style_ranges",
    # Raw loader
    "document_from_raw",
]
