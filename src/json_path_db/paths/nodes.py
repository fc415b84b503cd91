"""NodeKind StrEnum and the classifier every traversal step branches on.

A nested structure is a closed tagged union of three kinds:

- KEYED_MAP: any ``collections.abc.Mapping`` (dict, OrderedDict, MappingProxy, ...)
- SEQUENCE:  any ``collections.abc.Sequence`` except text and binary strings
- SCALAR:    everything else, including ``None``

``str``, ``bytes`` and ``bytearray`` are Sequences to Python but leaves here.
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping, Sequence
from enum import StrEnum, auto
from typing import Any, TypeAlias

__all__ = ["Key", "NodeKind", "Path", "classify", "is_container"]

Key: TypeAlias = Hashable
Path: TypeAlias = tuple[Key, ...]

_STRING_TYPES = (str, bytes, bytearray)


class NodeKind(StrEnum):
    """The three node kinds of a nested structure.

    - KEYED_MAP -> "keyed_map" : mapping from key to node
    - SEQUENCE  -> "sequence"  : ordered list of nodes, addressed by index
    - SCALAR    -> "scalar"    : terminal value
    """

    KEYED_MAP = auto()
    SEQUENCE = auto()
    SCALAR = auto()


def classify(value: Any) -> NodeKind:
    """Return the NodeKind of ``value``.

    Strings are checked before Sequence because ``str`` is a Sequence.
    """
    if isinstance(value, Mapping):
        return NodeKind.KEYED_MAP
    if isinstance(value, _STRING_TYPES):
        return NodeKind.SCALAR
    if isinstance(value, Sequence):
        return NodeKind.SEQUENCE
    return NodeKind.SCALAR


def is_container(value: Any) -> bool:
    return classify(value) is not NodeKind.SCALAR
