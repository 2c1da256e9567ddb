"""Split a block's text into entity ranges and, within them, style ranges.

A style range is a maximal slice of text whose characters share an identical
style set. An entity range is a maximal slice whose characters share the same
entity key (or none); each entity range is itself a list of style ranges.
"""

from collections.abc import Sequence
from itertools import groupby

from blockmarkup.document.models import EMPTY_CHARACTER, CharacterMetadata

StyleRange = tuple[str, frozenset[str]]
EntityRange = tuple[str | None, list[StyleRange]]


def _pad(text: str, characters: Sequence[CharacterMetadata]) -> list[CharacterMetadata]:
    chars = list(characters[: len(text)])
    chars.extend(EMPTY_CHARACTER for _ in range(len(text) - len(chars)))
    return chars


def get_style_ranges(text: str, characters: Sequence[CharacterMetadata]) -> list[StyleRange]:
    if not text:
        return [("", frozenset())]

    ranges = []
    start = 0
    for style, group in groupby(_pad(text, characters), key=lambda c: c.style):
        length = sum(1 for _ in group)
        ranges.append((text[start : start + length], style))
        start += length
    return ranges


def get_entity_ranges(text: str, characters: Sequence[CharacterMetadata]) -> list[EntityRange]:
    if not text:
        return [(None, get_style_ranges(text, characters))]

    chars = _pad(text, characters)
    ranges: list[EntityRange] = []
    start = 0
    for entity_key, group in groupby(chars, key=lambda c: c.entity):
        length = sum(1 for _ in group)
        end = start + length
        ranges.append((entity_key, get_style_ranges(text[start:end], chars[start:end])))
        start = end
    return ranges
