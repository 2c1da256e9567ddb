from typing import Any


class MarkupError(Exception):
    """Base exception for all blockmarkup errors."""

    def __init__(self, message: str):
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary, e.g. for JSON error payloads."""
        return {"detail": str(self)}


class DocumentError(MarkupError):
    """Raised when a raw document cannot be turned into a Document."""

    def __init__(self, block_key: str | None, *, message: str):
        super().__init__(f"block {block_key!r}: {message}" if block_key is not None else message)
        self.block_key = block_key

    def to_dict(self) -> dict[str, Any]:
        return {"detail": str(self), "block_key": self.block_key}
