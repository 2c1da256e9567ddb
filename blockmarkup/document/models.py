"""Data models for the rich-text document that gets rendered to HTML.

A Document is a flat, ordered list of ContentBlocks. Each block carries its raw
text plus one CharacterMetadata per character: the set of inline styles active
on that character and the key of the entity (link, image, ...) covering it.
List nesting is encoded by the per-block `depth`, not by tree structure.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt

from blockmarkup.constants import BlockType

# === CHARACTERS ===


class CharacterMetadata(BaseModel):
    style: frozenset[str] = frozenset()
    entity: str | None = None

    model_config = ConfigDict(frozen=True)


EMPTY_CHARACTER = CharacterMetadata()


# === ENTITIES ===


class Entity(BaseModel):
    """Out-of-band annotation attached to a text range, e.g. a link."""

    type: str
    mutability: str = "MUTABLE"
    data: dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)


# === BLOCKS ===


class ContentBlock(BaseModel):
    key: str = ""
    type: str = BlockType.UNSTYLED
    text: str = ""
    depth: NonNegativeInt = 0
    character_list: list[CharacterMetadata] = Field(default_factory=list)
    data: dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)


# === DOCUMENT ===


class Document(BaseModel):
    """The full in-memory document: blocks in order plus their entities."""

    blocks: list[ContentBlock] = Field(default_factory=list)
    entity_map: dict[str, Entity] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    def get_entity(self, key: str) -> Entity | None:
        return self.entity_map.get(key)

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "Document":
        """Build a Document from the editor's raw JSON form (see `document.raw`)."""
        from blockmarkup.document.raw import document_from_raw

        return document_from_raw(raw)
