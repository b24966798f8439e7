"""Public exceptions for richdelta."""

from __future__ import annotations


class DeltaError(Exception):
    """Base class for delta errors."""


class InvalidDocumentError(DeltaError, ValueError):
    """Raised when a document delta is required but a change delta was given.

    Attributes:
        side: "this" when the receiver was invalid, "other" for the argument
    """

    def __init__(self, side: str) -> None:
        prep = "on" if side == "other" else "with"
        super().__init__(f"diff() called {prep} non-document ({side})")
        self.side = side
