"""Load a Document from the editor's raw JSON representation.

Raw shape:

    {
      "blocks": [
        {"key": "a1", "text": "Hello", "type": "unstyled", "depth": 0,
         "inlineStyleRanges": [{"offset": 0, "length": 5, "style": "BOLD"}],
         "entityRanges": [{"offset": 0, "length": 5, "key": 0}],
         "data": {}}
      ],
      "entityMap": {"0": {"type": "LINK", "mutability": "MUTABLE", "data": {"url": "..."}}}
    }

Offsets and lengths count UTF-16 code units, as the editor reports them;
they are converted to Python string indices on load.
"""

from collections.abc import Mapping
from typing import Any

from loguru import logger

from blockmarkup.constants import BlockType
from blockmarkup.document.models import CharacterMetadata, ContentBlock, Document, Entity
from blockmarkup.exceptions import DocumentError


def _utf16_index(text: str) -> dict[int, int]:
    """UTF-16 code-unit offset -> Python string index, for every character boundary."""
    index = {}
    unit = 0
    for i, char in enumerate(text):
        index[unit] = i
        unit += 2 if ord(char) > 0xFFFF else 1
    index[unit] = len(text)
    return index


def _range_field(block_key: str, raw_range: Mapping[str, Any], name: str) -> Any:
    if name not in raw_range:
        raise DocumentError(block_key, message=f"range {dict(raw_range)!r} has no {name!r}")
    return raw_range[name]


def _range_bounds(block_key: str, utf16_index: Mapping[int, int], raw_range: Mapping[str, Any]) -> tuple[int, int]:
    offset = int(raw_range.get("offset", 0))
    length = int(raw_range.get("length", 0))
    start = utf16_index.get(offset)
    end = utf16_index.get(offset + length)
    if length < 0 or start is None or end is None:
        raise DocumentError(
            block_key,
            message=f"range offset={offset} length={length} does not fit text of {max(utf16_index)} UTF-16 units",
        )
    return start, end


def _build_characters(
    block_key: str,
    text: str,
    raw_block: Mapping[str, Any],
    entity_map: Mapping[str, Entity],
) -> list[CharacterMetadata]:
    styles: list[set[str]] = [set() for _ in text]
    entities: list[str | None] = [None] * len(text)
    utf16_index = _utf16_index(text)

    for style_range in raw_block.get("inlineStyleRanges") or []:
        style = _range_field(block_key, style_range, "style")
        start, end = _range_bounds(block_key, utf16_index, style_range)
        for i in range(start, end):
            styles[i].add(style)

    for entity_range in raw_block.get("entityRanges") or []:
        entity_key = str(_range_field(block_key, entity_range, "key"))
        if entity_key not in entity_map:
            # Kept on the characters; the generator renders unresolved keys as plain text.
            logger.debug(f"Block {block_key!r} references entity {entity_key!r} missing from entityMap")
        start, end = _range_bounds(block_key, utf16_index, entity_range)
        for i in range(start, end):
            entities[i] = entity_key

    return [CharacterMetadata(style=frozenset(s), entity=e) for s, e in zip(styles, entities)]


def document_from_raw(raw: Mapping[str, Any]) -> Document:
    entity_map = {str(key): Entity.model_validate(value) for key, value in (raw.get("entityMap") or {}).items()}

    blocks = []
    for idx, raw_block in enumerate(raw.get("blocks") or []):
        key = str(raw_block.get("key", idx))
        text = raw_block.get("text", "")
        blocks.append(
            ContentBlock(
                key=key,
                type=raw_block.get("type") or BlockType.UNSTYLED,
                text=text,
                depth=raw_block.get("depth", 0),
                character_list=_build_characters(key, text, raw_block, entity_map),
                data=raw_block.get("data") or {},
            )
        )

    logger.debug(f"Loaded raw document with {len(blocks)} blocks and {len(entity_map)} entities")
    return Document(blocks=blocks, entity_map=entity_map)
