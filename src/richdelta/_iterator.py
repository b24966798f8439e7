"""Cursor over a sequence of ops that can consume part of an op.

compose, diff, slice and each_line all walk deltas with a DeltaIterator so
that ops can be split at arbitrary offsets. Past the end of the sequence the
iterator behaves as an infinite bare Retain: the untouched remainder of the
document.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from ._ops import Delete, Insert, Op, OpType, Retain


class DeltaIterator:
    """Split-consuming cursor over ops.

    State is an op index plus an offset into that op. Ops handed out by
    `next` are always freshly constructed; the underlying sequence is never
    modified.
    """

    def __init__(self, ops: Sequence[Op]) -> None:
        self._ops = ops
        self.index = 0
        self.offset = 0

    def __iter__(self) -> DeltaIterator:
        return self

    def __next__(self) -> Op:
        if not self.has_next():
            raise StopIteration
        return self.next()

    def has_next(self) -> bool:
        return self.peek_length() < math.inf

    def peek(self) -> Op | None:
        """Return the op under the cursor without splitting it."""
        if self.index < len(self._ops):
            return self._ops[self.index]
        return None

    def peek_length(self) -> int | float:
        """Remaining length of the op under the cursor, or inf past the end."""
        op = self.peek()
        if op is None:
            return math.inf
        return op.length() - self.offset

    def peek_type(self) -> OpType:
        op = self.peek()
        if op is None:
            return OpType.RETAIN
        return op.type

    def next(self, length: int | float = math.inf) -> Op:
        """Consume up to `length` units of the current op.

        When the rest of the current op fits in `length` the cursor moves to
        the following op and the returned op may be shorter than requested.
        """
        op = self.peek()
        if op is None:
            return Retain(math.inf)

        offset = self.offset
        remaining = op.length() - offset
        if length >= remaining:
            length = remaining
            self.index += 1
            self.offset = 0
        else:
            self.offset += length

        if isinstance(op, Delete):
            return Delete(length)
        if isinstance(op, Retain):
            return Retain(length, op.attributes)
        return Insert(op.text[offset : offset + length], op.attributes)

    def rest(self) -> list[Op]:
        """Return every op not yet consumed, leaving the cursor where it is."""
        if not self.has_next():
            return []
        if self.offset == 0:
            return list(self._ops[self.index :])
        index, offset = self.index, self.offset
        head = self.next()
        tail = list(self._ops[self.index :])
        self.index, self.offset = index, offset
        return [head, *tail]
