"""Escaping of text content and attribute values.

Text is escaped exactly once per render pass; callers never feed already
escaped output back through these functions.
"""

NBSP = "\xa0"
DEFAULT_BREAK = "<br>"


def preserve_whitespace(text: str) -> str:
    """Replace leading, trailing and repeated spaces with non-breaking spaces.

    HTML collapses runs of whitespace; converting the significant ones keeps
    the text looking the way it did in the editor. Length is unchanged, so
    per-character metadata still lines up.
    """
    last = len(text) - 1
    return "".join(
        NBSP if char == " " and (i == 0 or i == last or text[i - 1] == " ") else char
        for i, char in enumerate(text)
    )


def encode_content(text: str, line_break: str = DEFAULT_BREAK) -> str:
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace(NBSP, "&nbsp;")
        .replace("\n", f"{line_break}\n")
    )


def encode_attr(text: str) -> str:
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;").replace('"', "&quot;")
