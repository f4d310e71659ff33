"""
Composer (fragments + values -> Composite).

A composition interleaves N+1 static fragments with N dynamic values:

    compose(["const a = ", ";\\n"], leaf("1", m))

Static fragments and RawText values are untraced. Leaf values contribute
their map; Composite values contribute their whole mapping tree, which
is embedded as-is and only flattened at the end.

Every call builds its own context. Nested or concurrent compositions
never share a cursor or tree.
"""

from typing import Any, List, Optional, Sequence, Union

from .errors import CompositionError
from .flatten import sectioned_map
from .model import (
    Children,
    Composite,
    DynamicValue,
    Leaf,
    LeafMap,
    Node,
    RawText,
    empty_map,
)
from .position import Cursor


Value = Union[str, DynamicValue]


def leaf(code: str, map: Any) -> Leaf:
    """Shorthand for Leaf(code, map)."""
    return Leaf(code=code, map=map)


def freeze(composite: Composite, file: Optional[str] = None) -> Leaf:
    """
    Turn a Composite into a Leaf carrying its sectioned map.

    Embedding the result wraps the composition as one nested section,
    instead of inlining its sections into the enclosing map.
    """
    return Leaf(code=composite.code, map=sectioned_map(composite, file=file))


def _as_dynamic(value: Value) -> DynamicValue:
    if isinstance(value, str):
        return RawText(value)
    if isinstance(value, DynamicValue):
        return value
    raise CompositionError(f"Unsupported dynamic value type: {type(value).__name__}")


class _CompositionContext:
    """Call-local state of one compose() call."""

    def __init__(self):
        self.parts: List[str] = []
        self.tree: List[Node] = []
        self.cursor = Cursor()
        self.sourced = False
        # Whether the first non-empty unit was sourced; None until one is seen
        self.starts_sourced: Optional[bool] = None

    def push_sourceless(self, text: str) -> None:
        if not text:
            return
        self._close_sourced()
        self._mark_start(False)
        self.sourced = False
        self._append(text)

    def push_value(self, value: DynamicValue) -> None:
        if isinstance(value, RawText):
            self.push_sourceless(value.text)
        elif isinstance(value, Leaf):
            self.tree.append(Node(self.cursor.offset(), LeafMap(value.map)))
            self._mark_start(True)
            self.sourced = True
            self._append(value.code)
        elif isinstance(value, Composite):
            self.push_composite(value)
        else:
            raise CompositionError(f"Unsupported dynamic value type: {type(value).__name__}")

    def push_composite(self, value: Composite) -> None:
        if not value.code and not value._tree:
            return
        if not value._starts_sourced:
            self._close_sourced()
        if value._tree:
            self.tree.append(Node(self.cursor.offset(), Children(value._tree)))
        self._mark_start(value._starts_sourced)
        self.sourced = value._ends_sourced
        self._append(value.code)

    def _close_sourced(self) -> None:
        # Stop the previous sourced node's coverage from running into untraced text
        if self.sourced:
            self.tree.append(Node(self.cursor.offset(), LeafMap(empty_map())))

    def _mark_start(self, sourced: bool) -> None:
        if self.starts_sourced is None:
            self.starts_sourced = sourced

    def _append(self, text: str) -> None:
        self.parts.append(text)
        self.cursor.advance(text)

    def finish(self) -> Composite:
        return Composite(
            code="".join(self.parts),
            _tree=tuple(self.tree),
            _starts_sourced=bool(self.starts_sourced),
            _ends_sourced=self.sourced,
        )


def compose(strings: Sequence[str], *values: Value) -> Composite:
    """
    Combine static fragments and dynamic values into a Composite.

    Args:
        strings: The N+1 static fragments
        *values: The N dynamic values (str, RawText, Leaf or Composite)

    Returns:
        Composite holding the combined code and its mapping tree

    Raises:
        CompositionError: If the counts do not interleave or a value has
            an unsupported type
    """
    if isinstance(strings, str):
        raise CompositionError("Static fragments must be a sequence of strings, not a single string")
    if len(strings) != len(values) + 1:
        raise CompositionError(
            f"Expected {len(values) + 1} static fragments for {len(values)} values, got {len(strings)}"
        )
    dynamic = [_as_dynamic(v) for v in values]

    context = _CompositionContext()
    context.push_sourceless(strings[0])
    for value, following in zip(dynamic, strings[1:]):
        context.push_value(value)
        context.push_sourceless(following)
    return context.finish()
