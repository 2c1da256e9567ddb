"""Shared builders for rendering small documents in tests."""

from collections.abc import Mapping
from typing import Any

from blockmarkup.config import Settings
from blockmarkup.document import Document
from blockmarkup.markup import state_to_html

# Explicit values so BLOCKMARKUP_* env vars can't leak into expectations
TEST_SETTINGS = Settings(indent="  ", line_break="<br>", log_level="DEBUG")


def block(text: str = "", type: str = "unstyled", depth: int = 0, **raw: Any) -> dict[str, Any]:
    """Raw block dict; extra keys (inlineStyleRanges, entityRanges, ...) pass through."""
    return {"key": raw.pop("key", text or type), "text": text, "type": type, "depth": depth, **raw}


def make_document(blocks: list[dict[str, Any]], entity_map: Mapping[str, Any] | None = None) -> Document:
    return Document.from_raw({"blocks": blocks, "entityMap": dict(entity_map or {})})


def render(
    blocks: list[dict[str, Any]],
    entity_map: Mapping[str, Any] | None = None,
    settings: Settings = TEST_SETTINGS,
    **options: Any,
) -> str:
    return state_to_html(make_document(blocks, entity_map), options or None, settings=settings)
