from enum import StrEnum


class BlockType(StrEnum):
    UNSTYLED = "unstyled"
    HEADER_ONE = "header-one"
    HEADER_TWO = "header-two"
    HEADER_THREE = "header-three"
    HEADER_FOUR = "header-four"
    HEADER_FIVE = "header-five"
    HEADER_SIX = "header-six"
    UNORDERED_LIST_ITEM = "unordered-list-item"
    ORDERED_LIST_ITEM = "ordered-list-item"
    BLOCKQUOTE = "blockquote"
    PULLQUOTE = "pullquote"
    CODE = "code-block"
    ATOMIC = "atomic"


class InlineStyle(StrEnum):
    BOLD = "BOLD"
    CODE = "CODE"
    ITALIC = "ITALIC"
    STRIKETHROUGH = "STRIKETHROUGH"
    UNDERLINE = "UNDERLINE"


class EntityType(StrEnum):
    LINK = "LINK"
    IMAGE = "IMAGE"


# Fallback key in formatter / attribute-renderer tables
DEFAULT_KEY = "DEFAULT"
