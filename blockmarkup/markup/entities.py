"""Entity substitution: turn a resolved entity plus rendered content into markup."""

import re
from collections.abc import Mapping
from typing import Any

from blockmarkup.constants import DEFAULT_KEY, EntityType
from blockmarkup.document.models import Entity
from blockmarkup.markup.attributes import stringify_attrs
from blockmarkup.markup.options import EntityAttributesRenderer, EntityFormatter

DATA_ATTRIBUTE = re.compile(r"^data-([a-z0-9-]+)$")

# Entity data key -> element attribute, per entity type
DEFAULT_ENTITY_ATTRIBUTES_MAP: Mapping[str, Mapping[str, str]] = {
    EntityType.LINK: {"url": "href", "rel": "rel", "target": "target", "title": "title", "className": "class"},
    EntityType.IMAGE: {"src": "src", "height": "height", "width": "width", "alt": "alt", "className": "class"},
}


def format_link(content: str, attr_string: str, data: Mapping[str, Any]) -> str:
    return f"<a{attr_string}>{content}</a>"


def format_image(content: str, attr_string: str, data: Mapping[str, Any]) -> str:
    return f"<img{attr_string}/>"


def format_default(content: str, attr_string: str, data: Mapping[str, Any]) -> str:
    return f"<span{attr_string}>{content}</span>"


def attributes_renderer(attributes_map: Mapping[str, Mapping[str, str]]) -> EntityAttributesRenderer:
    """Build the default attribute renderer over an entity-type -> (data key -> attribute) table.

    Data keys found in the type's table are renamed; keys that already look like
    `data-*` attributes pass through unchanged; everything else is dropped.
    """

    def render(entity_type: str, entity: Entity) -> dict[str, Any]:
        attr_map = attributes_map.get(entity_type, {})
        attrs = {}
        for data_key, value in entity.data.items():
            if data_key in attr_map:
                attrs[attr_map[data_key]] = value
            elif DATA_ATTRIBUTE.match(data_key):
                attrs[data_key] = value
        return attrs

    return render


def normalize_entity_type(entity_type: str) -> str:
    # Some editors store lower-case types ("image"); tables are keyed upper-case.
    return entity_type.upper()


def normalize_keys(table: Mapping[str, Any]) -> dict[str, Any]:
    return {normalize_entity_type(key): value for key, value in table.items()}


class EntityRenderer:
    """Formatter and attribute lookup for one generator.

    Caller tables win over the built-ins for the types they name. A caller
    `DEFAULT` entry replaces the fallback for types with no entry of their own.
    """

    def __init__(
        self,
        formatter_map: Mapping[str, EntityFormatter],
        attributes_map: Mapping[str, Mapping[str, str]],
        attributes_renderer_map: Mapping[str, EntityAttributesRenderer],
    ):
        self.formatter_overrides = normalize_keys(formatter_map)
        self.attributes_map = {**DEFAULT_ENTITY_ATTRIBUTES_MAP, **normalize_keys(attributes_map)}
        self.attributes_renderer_map = {
            DEFAULT_KEY: attributes_renderer(self.attributes_map),
            **normalize_keys(attributes_renderer_map),
        }

    def get_formatter(self, entity_type: str) -> EntityFormatter:
        if entity_type in self.formatter_overrides:
            return self.formatter_overrides[entity_type]
        match entity_type:
            case EntityType.LINK:
                return format_link
            case EntityType.IMAGE:
                return format_image
            case _:
                return self.formatter_overrides.get(DEFAULT_KEY, format_default)

    def get_attributes(self, entity_type: str, entity: Entity) -> Mapping[str, Any] | None:
        renderer = self.attributes_renderer_map.get(entity_type, self.attributes_renderer_map[DEFAULT_KEY])
        return renderer(entity_type, entity)

    def render(self, content: str, entity: Entity | None) -> str:
        """Substitute `content` (already style-rendered) for the entity's markup."""
        if entity is None:
            return content
        entity_type = normalize_entity_type(entity.type)
        attr_string = stringify_attrs(self.get_attributes(entity_type, entity))
        output = self.get_formatter(entity_type)(content, attr_string, entity.data)
        return content if output is None else output
