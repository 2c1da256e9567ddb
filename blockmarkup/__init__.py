"""Render rich-text editor documents (typed blocks with styled runs and entities) to HTML."""

from loguru import logger

from blockmarkup.config import Settings, get_settings
from blockmarkup.constants import BlockType, EntityType, InlineStyle
from blockmarkup.document import CharacterMetadata, ContentBlock, Document, Entity, document_from_raw
from blockmarkup.exceptions import DocumentError, MarkupError
from blockmarkup.logging_config import configure_logging
from blockmarkup.markup import MarkupGenerator, RenderConfig, RenderOptions, state_to_html

# Silent unless the application opts in via configure_logging() / logger.enable().
logger.disable("blockmarkup")

__all__ = [
    "BlockType",
    "CharacterMetadata",
    "ContentBlock",
    "Document",
    "DocumentError",
    "Entity",
    "EntityType",
    "InlineStyle",
    "MarkupError",
    "MarkupGenerator",
    "RenderConfig",
    "RenderOptions",
    "Settings",
    "configure_logging",
    "document_from_raw",
    "get_settings",
    "state_to_html",
]
