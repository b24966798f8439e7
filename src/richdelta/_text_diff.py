"""Character-level text diff used by Delta.diff.

Any callable with the `TextDiffer` signature can replace `diff_text`, as long
as its spans are ordered, gap-free and replaying them turns the first string
into the second.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from difflib import SequenceMatcher
from enum import Enum

logger = logging.getLogger(__name__)


class DiffTag(Enum):
    """Span kinds produced by a text diff."""

    EQUAL = "equal"
    INSERT = "insert"
    DELETE = "delete"


DiffSpan = tuple[DiffTag, str]
TextDiffer = Callable[[str, str], list[DiffSpan]]


def diff_text(pristine: str, current: str) -> list[DiffSpan]:
    """Diff two strings at character level.

    Returns (tag, text) spans in document order:
    - (EQUAL, text) - text common to both strings
    - (DELETE, text) - text only in pristine
    - (INSERT, text) - text only in current

    A replaced region is reported as a DELETE followed by an INSERT.
    """
    matcher = SequenceMatcher(isjunk=None, a=pristine, b=current, autojunk=False)

    spans: list[DiffSpan] = []
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            spans.append((DiffTag.EQUAL, pristine[i1:i2]))
        elif tag == "delete":
            spans.append((DiffTag.DELETE, pristine[i1:i2]))
        elif tag == "insert":
            spans.append((DiffTag.INSERT, current[j1:j2]))
        elif tag == "replace":
            spans.append((DiffTag.DELETE, pristine[i1:i2]))
            spans.append((DiffTag.INSERT, current[j1:j2]))

    logger.debug(
        "diff_text: %d spans for %d -> %d chars", len(spans), len(pristine), len(current)
    )
    return spans
