"""
Core Composition Model Objects

Defines the data structures shared by the composer, flattener and
normalizer:
    - Offsets (0-indexed line/column positions)
    - Dynamic values (raw text, leaves, composites)
    - Mapping tree nodes and their payloads
    - Sections (the flat, wire-ready unit)

ARCHITECTURAL RULE:
    These objects:
        - Are immutable once built
        - Never inspect the content of the maps they carry
        - Represent structure, not behavior
"""

from abc import ABC
from dataclasses import dataclass, field
from typing import Any, Dict, Tuple, Union


@dataclass(frozen=True, order=True)
class Offset:
    """
    A position in generated text.

    Both fields are 0-indexed, matching the `offset` objects of a
    sectioned source map.
    """

    line: int = 0
    column: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {"line": self.line, "column": self.column}


def empty_map() -> Dict[str, Any]:
    """
    A valid source map that maps nothing.

    Used for synthetic spans so they do not inherit the provenance of
    the sourced span before them. A fresh dict is returned on each call.
    """
    return {"version": 3, "sources": [], "names": [], "mappings": []}


class DynamicValue(ABC):
    """
    Base class for values interpolated between static fragments.

    Exactly one of:
        RawText    -> untraced text
        Leaf       -> text with its own source map
        Composite  -> the result of an earlier composition
    """


@dataclass(frozen=True)
class RawText(DynamicValue):
    """Text with no known origin."""

    text: str


@dataclass(frozen=True)
class Leaf(DynamicValue):
    """
    Text backed by a real source map.

    Properties:
        code: The generated text
        map:
            Any accepted map shape: a JSON string, a flat encoded or
            decoded dict, a sectioned dict, or a ParsedMap handle.
            The map is carried as-is and never validated here.
    """

    code: str
    map: Any


@dataclass(frozen=True)
class LeafMap:
    """Node payload holding a single provenance map."""

    map: Any


@dataclass(frozen=True)
class Children:
    """Node payload holding the tree of an embedded composition."""

    nodes: Tuple["Node", ...]


Payload = Union[LeafMap, Children]


@dataclass(frozen=True)
class Node:
    """
    One entry of a mapping tree.

    The offset is relative to the frame of the enclosing composition.
    """

    offset: Offset
    payload: Payload


@dataclass(frozen=True)
class Composite(DynamicValue):
    """
    The result of one composition call.

    Properties:
        code: The combined text

    The mapping tree is kept private. It is only read by the flattener
    and by an enclosing composition that embeds this value, which is
    what lets nested compositions compose without flattening first.

    _starts_sourced / _ends_sourced record whether the first and last
    non-empty units were sourced, so an enclosing composition knows
    where untraced text sits at the edges of the embedded tree.
    """

    code: str
    _tree: Tuple[Node, ...] = field(default=(), repr=False)
    _starts_sourced: bool = field(default=False, repr=False)
    _ends_sourced: bool = field(default=False, repr=False)


@dataclass(frozen=True)
class Section:
    """A provenance map anchored at an absolute offset."""

    offset: Offset
    map: Any
