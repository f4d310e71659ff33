"""
Flattening of mapping trees into section lists.

Nested compositions are inlined: their nodes are re-based onto the
enclosing frame and emitted at the same level as every other section,
so the result is always exactly one level deep.

Offsets are non-decreasing in construction order, so the depth-first
walk already yields sections in ascending order. No sort is done.
"""

from typing import Any, Dict, List, Optional, Sequence, Union

from .model import Children, Composite, Node, Offset, Section


def _walk(nodes: Sequence[Node], line_offset: int, column_offset: int, out: List[Section]) -> None:
    for node in nodes:
        line = node.offset.line + line_offset
        # A parent's column only shifts nodes that start on the parent's line
        column = node.offset.column + column_offset if node.offset.line == 0 else node.offset.column
        if isinstance(node.payload, Children):
            _walk(node.payload.nodes, line, column, out)
        else:
            out.append(Section(offset=Offset(line, column), map=node.payload.map))


def flatten(tree: Union[Composite, Sequence[Node]]) -> List[Section]:
    """
    Turn a mapping tree into a flat list of absolutely positioned sections.

    Args:
        tree: A Composite, or the node sequence of one

    Returns:
        Sections in ascending offset order
    """
    if isinstance(tree, Composite):
        tree = tree._tree
    sections: List[Section] = []
    _walk(tree, 0, 0, sections)
    return sections


def to_sectioned_map(sections: Sequence[Section], file: Optional[str] = None) -> Dict[str, Any]:
    """Wire form of a section list. Section maps are passed through as-is."""
    out: Dict[str, Any] = {"version": 3}
    if file is not None:
        out["file"] = file
    out["sections"] = [{"offset": s.offset.to_dict(), "map": s.map} for s in sections]
    return out


def sectioned_map(composite: Composite, file: Optional[str] = None) -> Dict[str, Any]:
    """Flatten a Composite straight into its sectioned map."""
    return to_sectioned_map(flatten(composite), file=file)
