"""richdelta - rich text deltas for collaborative editing.

A Delta is an ordered list of insert/retain/delete operations over attributed
text. Deltas can be composed, diffed, sliced, concatenated and walked line by
line.

Public exports:
    Delta, DeltaIterator
    Insert, Delete, Retain, Op, OpType, AttributeMap
    compose_attributes, diff_attributes
    DiffTag, diff_text
    DeltaError, InvalidDocumentError
"""

__version__ = "0.1.0"

from ._attributes import compose as compose_attributes
from ._attributes import diff as diff_attributes
from ._delta import Delta
from ._exceptions import DeltaError, InvalidDocumentError
from ._iterator import DeltaIterator
from ._ops import AttributeMap, Delete, Insert, Op, OpType, Retain
from ._text_diff import DiffTag, TextDiffer, diff_text

__all__ = [
    "AttributeMap",
    "Delete",
    "Delta",
    "DeltaError",
    "DeltaIterator",
    "DiffTag",
    "Insert",
    "InvalidDocumentError",
    "Op",
    "OpType",
    "Retain",
    "TextDiffer",
    "compose_attributes",
    "diff_attributes",
    "diff_text",
]
