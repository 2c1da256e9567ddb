"""Caller-supplied render policy.

Options are immutable; the generator merges them over the built-in defaults
into fresh tables per instance and never writes back into either.
Keys may be given in snake_case or camelCase (`inline_styles` / `inlineStyles`).
"""

from collections.abc import Callable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from blockmarkup.document.models import ContentBlock, Entity


class RenderConfig(BaseModel):
    """How one inline style (or a block's start tags) is rendered."""

    element: str | None = None
    attributes: dict[str, Any] | None = None
    style: dict[str, Any] | None = None

    model_config = ConfigDict(frozen=True)


BlockRenderer = Callable[[ContentBlock], str | None]
BlockStyleFn = Callable[[ContentBlock], RenderConfig | Mapping[str, Any] | None]
EntityGetter = Callable[[str], Entity | None]
# (rendered content, attribute string, raw entity data) -> markup
EntityFormatter = Callable[[str, str, Mapping[str, Any]], str | None]
# (normalized entity type, entity) -> attributes
EntityAttributesRenderer = Callable[[str, Entity], Mapping[str, Any] | None]


class RenderOptions(BaseModel):
    inline_styles: dict[str, RenderConfig] | None = None
    block_renderers: dict[str, BlockRenderer] = Field(default_factory=dict)
    block_style_fn: BlockStyleFn | None = None
    entity_getter: EntityGetter | None = None
    entity_formatter_map: dict[str, EntityFormatter] = Field(default_factory=dict)
    entity_attributes_map: dict[str, dict[str, str]] = Field(default_factory=dict)
    entity_attributes_renderer_map: dict[str, EntityAttributesRenderer] = Field(default_factory=dict)

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


def coerce_options(options: RenderOptions | Mapping[str, Any] | None) -> RenderOptions:
    if options is None:
        return RenderOptions()
    if isinstance(options, RenderOptions):
        return options
    return RenderOptions.model_validate(options)
