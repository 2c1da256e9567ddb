"""HTML generation from the block document model."""

from blockmarkup.markup.attributes import normalize_attributes, stringify_attrs, style_to_css
from blockmarkup.markup.encoding import encode_attr, encode_content, preserve_whitespace
from blockmarkup.markup.entities import EntityRenderer
from blockmarkup.markup.generator import MarkupGenerator, state_to_html
from blockmarkup.markup.options import RenderConfig, RenderOptions
from blockmarkup.markup.styles import DEFAULT_STYLE_MAP, DEFAULT_STYLE_ORDER, combine_ordered_styles

__all__ = [
    # Generator
    "MarkupGenerator",
    "state_to_html",
    # Options
    "RenderConfig",
    "RenderOptions",
    # Styles and entities
    "DEFAULT_STYLE_MAP",
    "DEFAULT_STYLE_ORDER",
    "combine_ordered_styles",
    "EntityRenderer",
    # Serialization helpers
    "encode_attr",
    "encode_content",
    "normalize_attributes",
    "preserve_whitespace",
    "stringify_attrs",
    "style_to_css",
]
