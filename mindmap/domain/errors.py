"""Errors raised while reading a saved mind-map project."""

from __future__ import annotations


class DecodeError(ValueError):
    """A project document could not be turned into a graph store."""


class MalformedDocumentError(DecodeError):
    """The text is not a project document at all (bad JSON, wrong shape)."""


class InvalidDocumentError(DecodeError):
    """The document parsed but a field is missing or has the wrong type."""

    def __init__(self, message: str, *, entry_index: int | None = None) -> None:
        if entry_index is not None:
            message = f"Entries[{entry_index}]: {message}"
        super().__init__(message)
        self.entry_index = entry_index
