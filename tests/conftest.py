"""Shared test fixtures for richdelta."""

from __future__ import annotations

import pytest

from richdelta import Delta

BOLD = {"bold": "true"}


@pytest.fixture
def mixed_delta() -> Delta:
    """A change delta with one op of every kind."""
    return (
        Delta()
        .insert("Hello", BOLD)
        .retain(3)
        .insert("World!", {"color": "red"})
        .delete(4)
    )


@pytest.fixture
def lines_delta() -> Delta:
    """A document whose third line mixes formats and ends in an aligned newline."""
    return (
        Delta()
        .insert("Hello\n\n")
        .insert("World", BOLD)
        .insert("abcd", {"color": "red"})
        .insert("\n", {"align": "right"})
        .insert("!")
    )
