"""Attribute serialization: name normalization, CSS strings, `name="value"` fragments."""

import re
from collections.abc import Mapping
from typing import Any

from blockmarkup.markup.encoding import encode_attr

# DOM property name -> HTML attribute name
ATTR_NAME_MAP = {
    "acceptCharset": "accept-charset",
    "className": "class",
    "htmlFor": "for",
    "httpEquiv": "http-equiv",
}

_UPPERCASE = re.compile(r"([A-Z])")
_VENDOR_PREFIX = re.compile(r"^(moz|ms|o|webkit)-")
_NUMERIC_STRING = re.compile(r"^\d+$")

# CSS properties whose numeric values are not suffixed with "px"
UNITLESS_PROPERTIES = frozenset(
    {
        "animationIterationCount",
        "borderImageOutset",
        "borderImageSlice",
        "borderImageWidth",
        "boxFlex",
        "boxFlexGroup",
        "boxOrdinalGroup",
        "columnCount",
        "columns",
        "flex",
        "flexGrow",
        "flexPositive",
        "flexShrink",
        "flexNegative",
        "flexOrder",
        "gridRow",
        "gridRowEnd",
        "gridRowSpan",
        "gridRowStart",
        "gridColumn",
        "gridColumnEnd",
        "gridColumnSpan",
        "gridColumnStart",
        "fontWeight",
        "lineClamp",
        "lineHeight",
        "opacity",
        "order",
        "orphans",
        "tabSize",
        "widows",
        "zIndex",
        "zoom",
        "fillOpacity",
        "floodOpacity",
        "stopOpacity",
        "strokeDasharray",
        "strokeDashoffset",
        "strokeMiterlimit",
        "strokeOpacity",
        "strokeWidth",
    }
)


def normalize_attributes(attributes: Mapping[str, Any] | None) -> dict[str, Any] | None:
    """Map DOM-style names (`className`) to markup names (`class`)."""
    if attributes is None:
        return None
    return {ATTR_NAME_MAP.get(name, name): value for name, value in attributes.items()}


def _style_name(name: str) -> str:
    return _VENDOR_PREFIX.sub(r"-\1-", _UPPERCASE.sub(r"-\1", name).lower())


def _style_value(name: str, value: Any) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, str):
        is_numeric = bool(_NUMERIC_STRING.match(value))
    else:
        is_numeric = True
        value = str(value)
    if not is_numeric or value == "0" or name in UNITLESS_PROPERTIES:
        return value
    return f"{value}px"


def style_to_css(style: Mapping[str, Any]) -> str:
    """Serialize `{"fontSize": 12, "WebkitUserSelect": "none"}` to a CSS declaration string."""
    return "; ".join(f"{_style_name(name)}: {_style_value(name, value)}" for name, value in style.items())


def build_attributes(
    attributes: Mapping[str, Any] | None,
    style: Mapping[str, Any] | None,
) -> dict[str, Any] | None:
    """Normalize attribute names and fold `style` into a `style` attribute."""
    normalized = normalize_attributes(attributes)
    if style is None:
        return normalized
    css = style_to_css(style)
    return {**(normalized or {}), "style": css}


def _attr_value(value: Any) -> str:
    # Lowercase, as in style values.
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)


def stringify_attrs(attributes: Mapping[str, Any] | None) -> str:
    """Render attributes as ` name="value"` fragments, skipping None values."""
    if not attributes:
        return ""
    return "".join(
        f' {name}="{encode_attr(_attr_value(value))}"' for name, value in attributes.items() if value is not None
    )
