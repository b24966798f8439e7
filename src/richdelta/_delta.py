"""Delta: a normalized sequence of ops describing a document or a change.

A document delta contains only inserts. A change delta mixes inserts,
deletes and retains and carries an implicit trailing retain of whatever it
does not touch. Builders (`insert`, `delete`, `retain`, `push`) mutate the
delta in place and return it for chaining; `compose`, `diff`, `slice` and
`concat` always return new deltas and leave their operands untouched.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterable, Iterator
from typing import Any

from ._attributes import compose as compose_attributes
from ._exceptions import InvalidDocumentError
from ._iterator import DeltaIterator
from ._ops import AttributeMap, Delete, Insert, Op, OpType, Retain
from ._text_diff import DiffTag, TextDiffer, diff_text

logger = logging.getLogger(__name__)


class Delta:
    """Ordered, self-normalizing sequence of ops.

    Stored ops always satisfy:
    - every op has positive length
    - no two adjacent inserts (or retains) share identical attributes
    - adjacent deletes are merged
    - an insert never directly follows a delete
    """

    def __init__(self, ops: Iterable[Op] | None = None) -> None:
        self._ops: list[Op] = list(ops or [])

    # --- Builders ---

    def insert(self, text: str, attributes: AttributeMap | None = None) -> Delta:
        if not text:
            return self
        return self.push(Insert(text, attributes or {}))

    def delete(self, length: int, attributes: AttributeMap | None = None) -> Delta:
        if length <= 0:
            return self
        return self.push(Delete(length, attributes or {}))

    def retain(self, length: int, attributes: AttributeMap | None = None) -> Delta:
        if length <= 0:
            return self
        return self.push(Retain(length, attributes or {}))

    def push(self, new_op: Op) -> Delta:
        """Append an op, merging it into its neighbour where possible."""
        if new_op.length() <= 0:
            return self

        index = len(self._ops)
        last_op = self._ops[-1] if self._ops else None

        if isinstance(new_op, Delete) and isinstance(last_op, Delete):
            self._ops[index - 1] = Delete(last_op.count + new_op.count)
            return self

        # Inserting before or after a delete at the same position is
        # equivalent; inserts always go first.
        if isinstance(last_op, Delete) and isinstance(new_op, Insert):
            index -= 1
            if index == 0:
                self._ops.insert(0, new_op)
                return self
            last_op = self._ops[index - 1]

        if last_op is not None and new_op.attributes == last_op.attributes:
            if isinstance(new_op, Insert) and isinstance(last_op, Insert):
                self._ops[index - 1] = Insert(
                    last_op.text + new_op.text, new_op.attributes
                )
                return self
            if isinstance(new_op, Retain) and isinstance(last_op, Retain):
                self._ops[index - 1] = Retain(
                    last_op.count + new_op.count, new_op.attributes
                )
                return self

        self._ops.insert(index, new_op)
        return self

    def chop(self) -> Delta:
        """Drop a trailing bare retain; it is implicit."""
        if self._ops:
            last_op = self._ops[-1]
            if isinstance(last_op, Retain) and not last_op.attributes:
                self._ops.pop()
        return self

    # --- Accessors ---

    @property
    def ops(self) -> tuple[Op, ...]:
        return tuple(self._ops)

    def size(self) -> int:
        """Number of stored ops."""
        return len(self._ops)

    def op_at(self, index: int) -> Op | None:
        if 0 <= index < len(self._ops):
            return self._ops[index]
        return None

    def length(self) -> int:
        """Sum of the lengths of all ops."""
        return sum(op.length() for op in self._ops)

    def change_length(self) -> int:
        """Net length change: inserted minus deleted units."""
        length = 0
        for op in self._ops:
            if isinstance(op, Insert):
                length += op.length()
            elif isinstance(op, Delete):
                length -= op.length()
        return length

    def filter(self, predicate: Callable[[Op], bool]) -> list[Op]:
        return [op for op in self._ops if predicate(op)]

    def map(self, fn: Callable[[Op], Any]) -> list[Any]:
        return [fn(op) for op in self._ops]

    def partition(self, predicate: Callable[[Op], bool]) -> tuple[list[Op], list[Op]]:
        passed: list[Op] = []
        failed: list[Op] = []
        for op in self._ops:
            (passed if predicate(op) else failed).append(op)
        return passed, failed

    def __iter__(self) -> Iterator[Op]:
        return DeltaIterator(self._ops)

    def __len__(self) -> int:
        return len(self._ops)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Delta):
            return NotImplemented
        return self._ops == other._ops

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Delta({self._ops!r})"

    # --- Derived deltas ---

    def slice(self, start: int = 0, end: int | float = math.inf) -> Delta:
        """Return the ops covering [start, end), splitting boundary ops."""
        ops: list[Op] = []
        it = DeltaIterator(self._ops)
        index = 0
        while index < end and it.has_next():
            if index < start:
                next_op = it.next(start - index)
            else:
                next_op = it.next(end - index)
                ops.append(next_op)
            index += next_op.length()
        return Delta(ops)

    def concat(self, other: Delta) -> Delta:
        """Return this delta followed by `other`, merging at the seam."""
        delta = Delta(self._ops)
        if other._ops:
            delta.push(other._ops[0])
            delta._ops.extend(other._ops[1:])
        return delta

    def compose(self, other: Delta) -> Delta:
        """Return a delta equivalent to applying this delta, then `other`."""
        this_iter = DeltaIterator(self._ops)
        other_iter = DeltaIterator(other._ops)

        # Inserts fully covered by a leading bare retain in `other` pass
        # through untouched.
        ops: list[Op] = []
        first_other = other_iter.peek()
        if isinstance(first_other, Retain) and not first_other.attributes:
            first_left = first_other.count
            while (
                this_iter.peek_type() is OpType.INSERT
                and this_iter.peek_length() <= first_left
            ):
                first_left -= this_iter.peek_length()
                ops.append(this_iter.next())
            if first_other.count - first_left > 0:
                other_iter.next(first_other.count - first_left)

        delta = Delta(ops)
        while this_iter.has_next() or other_iter.has_next():
            if other_iter.peek_type() is OpType.INSERT:
                delta.push(other_iter.next())
            elif this_iter.peek_type() is OpType.DELETE:
                delta.push(this_iter.next())
            else:
                length = min(this_iter.peek_length(), other_iter.peek_length())
                this_op = this_iter.next(length)
                other_op = other_iter.next(length)
                if isinstance(other_op, Retain):
                    attributes = compose_attributes(
                        this_op.attributes, other_op.attributes
                    )
                    new_op: Op
                    if isinstance(this_op, Insert):
                        new_op = Insert(this_op.text, attributes)
                    else:
                        new_op = Retain(length, attributes)
                    delta.push(new_op)

                    # Nothing left in `other`: the rest of this delta is
                    # unchanged.
                    if not other_iter.has_next() and delta._ops[-1] == new_op:
                        rest = Delta(this_iter.rest())
                        logger.debug(
                            "compose: copying %d remaining ops unchanged", rest.size()
                        )
                        return delta.concat(rest).chop()
                elif isinstance(other_op, Delete) and isinstance(this_op, Retain):
                    delta.push(other_op)
                # else: an insert deleted by `other` cancels out
        return delta.chop()

    def diff(self, other: Delta, differ: TextDiffer = diff_text) -> Delta:
        """Return the change delta turning this document into `other`.

        Both deltas must be documents (inserts only).

        Raises:
            InvalidDocumentError: If either delta contains a non-insert op
        """
        if self is other:
            return Delta()

        strings = [_document_text(self, "this"), _document_text(other, "other")]

        delta = Delta()
        this_iter = DeltaIterator(self._ops)
        other_iter = DeltaIterator(other._ops)
        spans = differ(strings[0], strings[1])
        for tag, text in spans:
            length = len(text)
            while length > 0:
                if tag is DiffTag.INSERT:
                    op_length = min(other_iter.peek_length(), length)
                    delta.push(other_iter.next(op_length))
                elif tag is DiffTag.DELETE:
                    op_length = min(length, this_iter.peek_length())
                    this_iter.next(op_length)
                    delta.delete(op_length)
                else:
                    op_length = min(
                        this_iter.peek_length(), other_iter.peek_length(), length
                    )
                    this_op = this_iter.next(op_length)
                    other_op = other_iter.next(op_length)
                    if (
                        isinstance(this_op, Insert)
                        and isinstance(other_op, Insert)
                        and this_op.text == other_op.text
                    ):
                        # Formatting changes on equal text are not diffed.
                        delta.retain(op_length)
                    else:
                        delta.push(other_op).delete(op_length)
                length -= op_length

        logger.debug("diff: %d spans -> %d ops", len(spans), len(delta._ops))
        return delta.chop()

    # --- Lines ---

    def each_line(
        self,
        predicate: Callable[[Delta, dict[str, str], int], Any],
        newline: str = "\n",
    ) -> None:
        """Call `predicate(line, attributes, index)` for every line.

        `attributes` are those of the newline that ends the line. Iteration
        stops at the first non-insert op, or when `predicate` returns False.
        Trailing content without a newline is reported with empty attributes.

        Raises:
            ValueError: If `newline` is empty
        """
        if not newline:
            raise ValueError("newline must be a non-empty string")
        it = DeltaIterator(self._ops)
        line = Delta()
        i = 0
        while it.has_next():
            if it.peek_type() is not OpType.INSERT:
                return
            op = it.peek()
            assert isinstance(op, Insert)
            start = op.length() - it.peek_length()
            index = op.text.find(newline, start)
            if index < 0:
                line.push(it.next())
            elif index > start:
                line.push(it.next(index - start))
            else:
                attributes = dict(it.next(len(newline)).attributes)
                if predicate(line, attributes, i) is False:
                    return
                i += 1
                line = Delta()
        if line.length() > 0:
            predicate(line, {}, i)


def _document_text(delta: Delta, side: str) -> str:
    parts: list[str] = []
    for op in delta._ops:
        if not isinstance(op, Insert):
            raise InvalidDocumentError(side)
        parts.append(op.text)
    return "".join(parts)
