"""Inline style stacking: wrap escaped text in one element per active style."""

from collections.abc import Mapping
from typing import Any

from blockmarkup.constants import BlockType, InlineStyle
from blockmarkup.markup.attributes import build_attributes, stringify_attrs
from blockmarkup.markup.options import RenderConfig

DEFAULT_STYLE_MAP: Mapping[str, RenderConfig] = {
    InlineStyle.BOLD: RenderConfig(element="strong"),
    InlineStyle.CODE: RenderConfig(element="code"),
    InlineStyle.ITALIC: RenderConfig(element="em"),
    InlineStyle.STRIKETHROUGH: RenderConfig(element="del"),
    InlineStyle.UNDERLINE: RenderConfig(element="ins"),
}

# Inner-most style first: BOLD+ITALIC renders as <em><strong>foo</strong></em>
DEFAULT_STYLE_ORDER: tuple[str, ...] = (
    InlineStyle.BOLD,
    InlineStyle.ITALIC,
    InlineStyle.UNDERLINE,
    InlineStyle.STRIKETHROUGH,
    InlineStyle.CODE,
)


def combine_ordered_styles(
    custom: Mapping[str, RenderConfig | Mapping[str, Any]] | None,
    defaults: Mapping[str, RenderConfig] = DEFAULT_STYLE_MAP,
    default_order: tuple[str, ...] = DEFAULT_STYLE_ORDER,
) -> tuple[dict[str, RenderConfig], tuple[str, ...]]:
    """Merge caller styles over the defaults.

    A caller entry for a known style is merged field by field over the default
    entry; unknown styles are appended to the order as given. Returns new
    values; neither input is modified.
    """
    style_map = dict(defaults)
    order = list(default_order)
    for name, config in (custom or {}).items():
        config = config if isinstance(config, RenderConfig) else RenderConfig.model_validate(config)
        if name in defaults:
            style_map[name] = defaults[name].model_copy(update=config.model_dump(exclude_unset=True))
        else:
            style_map[name] = config
            if name not in order:
                order.append(name)
    return style_map, tuple(order)


def wrap_element(content: str, config: RenderConfig) -> str:
    element = config.element or "span"
    attr_string = stringify_attrs(build_attributes(config.attributes, config.style))
    return f"<{element}{attr_string}>{content}</{element}>"


def render_styles(
    content: str,
    styles: frozenset[str],
    block_type: str,
    style_map: Mapping[str, RenderConfig],
    style_order: tuple[str, ...],
) -> str:
    """Wrap already-escaped `content` in the elements for `styles`, in `style_order`."""
    for name in style_order:
        # A code block already renders <code>; skip the inline one.
        if name == InlineStyle.CODE and block_type == BlockType.CODE:
            continue
        if name in styles:
            content = wrap_element(content, style_map[name])
    return content
