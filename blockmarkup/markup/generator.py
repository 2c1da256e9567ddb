"""Generate HTML from a Document.

Walks the flat block list, rebuilding list nesting from block depths, and
renders each block's text with inline styles stacked and entities substituted.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from loguru import logger

from blockmarkup.config import Settings, get_settings
from blockmarkup.constants import BlockType
from blockmarkup.document.models import ContentBlock, Document, Entity
from blockmarkup.document.ranges import get_entity_ranges
from blockmarkup.markup.attributes import build_attributes, stringify_attrs
from blockmarkup.markup.encoding import encode_content, preserve_whitespace
from blockmarkup.markup.entities import EntityRenderer
from blockmarkup.markup.options import RenderConfig, RenderOptions, coerce_options
from blockmarkup.markup.styles import combine_ordered_styles, render_styles


def get_tags(block_type: str) -> tuple[str, ...]:
    """Elements a block is wrapped in, outer first. Code blocks get two."""
    match block_type:
        case BlockType.HEADER_ONE:
            return ("h1",)
        case BlockType.HEADER_TWO:
            return ("h2",)
        case BlockType.HEADER_THREE:
            return ("h3",)
        case BlockType.HEADER_FOUR:
            return ("h4",)
        case BlockType.HEADER_FIVE:
            return ("h5",)
        case BlockType.HEADER_SIX:
            return ("h6",)
        case BlockType.UNORDERED_LIST_ITEM | BlockType.ORDERED_LIST_ITEM:
            return ("li",)
        case BlockType.BLOCKQUOTE | BlockType.PULLQUOTE:
            return ("blockquote",)
        case BlockType.CODE:
            return ("pre", "code")
        case BlockType.ATOMIC:
            return ("figure",)
        case _:
            return ("p",)


def get_wrapper_tag(block_type: str) -> str | None:
    match block_type:
        case BlockType.UNORDERED_LIST_ITEM:
            return "ul"
        case BlockType.ORDERED_LIST_ITEM:
            return "ol"
        case _:
            return None


def can_have_depth(block_type: str) -> bool:
    return block_type in (BlockType.UNORDERED_LIST_ITEM, BlockType.ORDERED_LIST_ITEM)


@dataclass
class GenerationState:
    """Mutable state of one `generate()` call."""

    blocks: list[ContentBlock]
    depths: list[int]  # effective nesting depth per block
    index: int = 0
    output: list[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.blocks)

    @property
    def current(self) -> ContentBlock:
        return self.blocks[self.index]


class MarkupGenerator:
    """Renders one Document to HTML under a fixed set of options.

    Options are merged over the defaults once, at construction; `generate()`
    keeps all of its working state local, so repeated calls are independent.
    """

    def __init__(
        self,
        document: Document,
        options: RenderOptions | Mapping[str, Any] | None = None,
        settings: Settings | None = None,
    ):
        self.document = document
        self.options = coerce_options(options)
        self.settings = settings if settings is not None else get_settings()
        self.entity_getter = self.options.entity_getter or document.get_entity
        self.entities = EntityRenderer(
            formatter_map=self.options.entity_formatter_map,
            attributes_map=self.options.entity_attributes_map,
            attributes_renderer_map=self.options.entity_attributes_renderer_map,
        )
        self.style_map, self.style_order = combine_ordered_styles(self.options.inline_styles)

    def generate(self) -> str:
        blocks = self.document.blocks
        logger.debug(f"Generating markup for {len(blocks)} blocks")
        state = GenerationState(blocks=blocks, depths=self._effective_depths(blocks))
        self._process_run(state, depth=None, indent_level=0)
        html = "".join(state.output).strip()
        logger.debug(f"Generated {len(html)} characters of markup")
        return html

    def _effective_depths(self, blocks: list[ContentBlock]) -> list[int]:
        """Depth per block, with list items clamped to one deeper than their predecessor."""
        depths = []
        limit = 0
        for block in blocks:
            if not can_have_depth(block.type):
                depths.append(0)
                limit = 0
                continue
            depth = min(block.depth, limit)
            if depth != block.depth:
                logger.warning(f"Block {block.key!r} jumps to depth {block.depth}; nesting it at depth {depth}")
            depths.append(depth)
            limit = depth + 1
        return depths

    # === BLOCK STRUCTURE ===

    def _process_run(self, state: GenerationState, depth: int | None, indent_level: int) -> None:
        """Process consecutive blocks at `depth` (all remaining blocks if None).

        The run owns its wrapper tag: it is opened and closed as block types
        change, and whatever is still open is closed before returning.
        """
        wrapper_tag: str | None = None
        while state.index < state.total:
            if depth is not None and state.depths[state.index] != depth:
                break
            new_wrapper_tag = get_wrapper_tag(state.current.type)
            if wrapper_tag != new_wrapper_tag:
                if wrapper_tag:
                    indent_level -= 1
                    self._write_line(state, indent_level, f"</{wrapper_tag}>")
                if new_wrapper_tag:
                    self._write_line(state, indent_level, f"<{new_wrapper_tag}>")
                    indent_level += 1
                wrapper_tag = new_wrapper_tag
            self._process_block(state, indent_level)
        if wrapper_tag:
            self._write_line(state, indent_level - 1, f"</{wrapper_tag}>")

    def _process_block(self, state: GenerationState, indent_level: int) -> None:
        block = state.current
        state.output.append(self._indent(indent_level))

        # Custom renderers may return None to fall through to normal rendering.
        renderer = self.options.block_renderers.get(block.type)
        custom_output = renderer(block) if renderer is not None else None
        if custom_output is not None:
            logger.debug(f"Block {block.key!r} rendered by custom {block.type!r} renderer")
            state.output.append(f"{custom_output}\n")
            state.index += 1
            return

        tags = get_tags(block.type)
        state.output.append(self._start_tags(block, tags))
        state.output.append(self.render_block_content(block))

        depth = state.depths[state.index]
        next_index = state.index + 1
        state.index = next_index
        if can_have_depth(block.type) and next_index < state.total and state.depths[next_index] == depth + 1:
            state.output.append("\n")
            self._process_run(state, depth=depth + 1, indent_level=indent_level + 1)
            state.output.append(self._indent(indent_level))

        state.output.append("".join(f"</{tag}>" for tag in reversed(tags)) + "\n")

    def _start_tags(self, block: ContentBlock, tags: tuple[str, ...]) -> str:
        attr_string = ""
        if self.options.block_style_fn is not None:
            config = self.options.block_style_fn(block)
            if config is not None:
                if not isinstance(config, RenderConfig):
                    config = RenderConfig.model_validate(config)
                attr_string = stringify_attrs(build_attributes(config.attributes, config.style))
        return "".join(f"<{tag}{attr_string}>" for tag in tags)

    def _indent(self, indent_level: int) -> str:
        return self.settings.indent * indent_level

    def _write_line(self, state: GenerationState, indent_level: int, markup: str) -> None:
        state.output.append(f"{self._indent(indent_level)}{markup}\n")

    # === BLOCK CONTENT ===

    def render_block_content(self, block: ContentBlock) -> str:
        if block.text == "":
            # An empty element would be collapsed by most renderers.
            return self.settings.line_break

        text = preserve_whitespace(block.text)
        parts = []
        for entity_key, style_ranges in get_entity_ranges(text, block.character_list):
            content = "".join(
                render_styles(
                    encode_content(piece, self.settings.line_break),
                    styles,
                    block.type,
                    self.style_map,
                    self.style_order,
                )
                for piece, styles in style_ranges
            )
            parts.append(self.entities.render(content, self._resolve_entity(entity_key)))
        return "".join(parts)

    def _resolve_entity(self, entity_key: str | None) -> Entity | None:
        if entity_key is None:
            return None
        entity = self.entity_getter(entity_key)
        if entity is None:
            logger.debug(f"Entity {entity_key!r} could not be resolved; rendering its text unannotated")
            return None
        if not isinstance(entity, Entity):
            entity = Entity.model_validate(entity)
        return entity


def state_to_html(
    document: Document,
    options: RenderOptions | Mapping[str, Any] | None = None,
    *,
    settings: Settings | None = None,
) -> str:
    """Render `document` to an HTML string."""
    return MarkupGenerator(document, options, settings=settings).generate()
