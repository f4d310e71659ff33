"""
Normalization of source map inputs into one canonical shape.

Accepted inputs:
    - JSON text of any of the shapes below
    - a flat map whose `mappings` is a VLQ string
    - a flat map whose `mappings` is a list of decoded segments
    - a ParsedMap handle
    - a sectioned map whose section maps are any of the above

Canonical output:
    - flat maps become flat maps with a VLQ `mappings` string
    - sectioned maps become {version: 3, [file], sections: [...]} with
      every section map canonical in turn

normalize() is idempotent: a canonical map comes back unchanged.
"""

from typing import Any, Dict, Union

from .errors import MapShapeError
from .flatten import sectioned_map
from .model import Composite, Leaf
from .parsed import ParsedMap, load_map_text


def _normalize_offset(offset: Any) -> Dict[str, int]:
    if not isinstance(offset, dict) or "line" not in offset or "column" not in offset:
        raise MapShapeError(f"Section offset must have line and column, got {offset!r}")
    return {"line": offset["line"], "column": offset["column"]}


def _normalize_section(section: Any) -> Dict[str, Any]:
    if not isinstance(section, dict):
        raise MapShapeError(f"Section must be an object, got {type(section).__name__}")
    if "offset" not in section or "map" not in section:
        raise MapShapeError("Section must have both 'offset' and 'map'")
    return {
        "offset": _normalize_offset(section["offset"]),
        "map": normalize(section["map"]),
    }


def normalize(map_input: Any) -> Dict[str, Any]:
    """
    Rewrite any accepted map representation into canonical form.

    Raises:
        MapParseError: If text input is not valid JSON
        MapShapeError: If a map has neither sections nor version/mappings
        CodecError: If a VLQ mappings string is malformed
    """
    if isinstance(map_input, str):
        map_input = load_map_text(map_input)

    if isinstance(map_input, dict) and "sections" in map_input:
        sections = map_input["sections"]
        if not isinstance(sections, list):
            raise MapShapeError(f"'sections' must be a list, got {type(sections).__name__}")
        out: Dict[str, Any] = {"version": 3}
        if "file" in map_input:
            out["file"] = map_input["file"]
        out["sections"] = [_normalize_section(s) for s in sections]
        return out

    return ParsedMap(map_input).encoded_map()


def normalize_built(value: Union[Composite, Leaf]) -> Leaf:
    """
    Normalize the map of a built value, keeping its code.

    A Composite is flattened first, so the result is a Leaf whose map is
    the canonical sectioned map of the whole composition.
    """
    if isinstance(value, Composite):
        return Leaf(code=value.code, map=normalize(sectioned_map(value)))
    if isinstance(value, Leaf):
        return Leaf(code=value.code, map=normalize(value.map))
    raise TypeError(f"Unsupported built value type: {type(value).__name__}")
