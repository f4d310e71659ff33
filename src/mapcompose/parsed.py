"""
Pre-parsed handle for a flat source map.

A ParsedMap is built once from JSON text or a flat dict (encoded or
decoded `mappings`) and can then be embedded anywhere a map is accepted.
It holds the decoded segments and hands out fresh encoded/decoded dicts.

This is NOT a map reader: it never resolves positions.
"""

import copy
import json
import warnings
from typing import Any, Dict, List, Optional

from . import codec
from .errors import MapParseError, MapShapeError


_ABSENT = object()


def _is_field(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _copy_decoded(mappings: List[Any]) -> List[List[List[int]]]:
    """Copy decoded mappings, checking they are lines of integer segments."""
    decoded = []
    for line_index, line in enumerate(mappings):
        if not isinstance(line, (list, tuple)):
            raise MapShapeError(f"Decoded mappings line {line_index} must be a list, got {type(line).__name__}")
        segments = []
        for segment in line:
            if not isinstance(segment, (list, tuple)) or not all(_is_field(v) for v in segment):
                raise MapShapeError(f"Decoded mappings line {line_index} has a malformed segment: {segment!r}")
            segments.append(list(segment))
        decoded.append(segments)
    return decoded


def load_map_text(text: str) -> Any:
    """Parse JSON map text, reporting failures as MapParseError."""
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise MapParseError(f"Invalid source map JSON: {e}") from e


class ParsedMap:
    """
    Opaque handle around one flat version 3 source map.

    Args:
        map_input: JSON text, a flat dict, or another ParsedMap

    Raises:
        MapParseError: If text input is not valid JSON
        MapShapeError: If the map is sectioned, lacks version/mappings, or
            its decoded mappings are not lines of integer segments
        CodecError: If an encoded mappings string is malformed
    """

    def __init__(self, map_input: Any):
        if isinstance(map_input, ParsedMap):
            self._fields = copy.deepcopy(map_input._fields)
            self._decoded = copy.deepcopy(map_input._decoded)
            return

        if isinstance(map_input, str):
            map_input = load_map_text(map_input)
        if not isinstance(map_input, dict):
            raise MapShapeError(f"Expected a source map object, got {type(map_input).__name__}")
        if "sections" in map_input:
            raise MapShapeError("Sectioned maps cannot be held by ParsedMap; normalize them instead")

        missing = [key for key in ("version", "mappings") if key not in map_input]
        if missing:
            raise MapShapeError(f"Source map is missing required field(s): {', '.join(missing)}")

        version = map_input["version"]
        if version != 3:
            warnings.warn(f"Source map declares version {version!r}, treating it as version 3", UserWarning)

        mappings = map_input["mappings"]
        if isinstance(mappings, str):
            self._decoded = codec.decode(mappings)
        elif isinstance(mappings, list):
            self._decoded = _copy_decoded(mappings)
        else:
            raise MapShapeError(f"Unsupported mappings type: {type(mappings).__name__}")

        self._fields = {
            "file": map_input.get("file", _ABSENT),
            "names": list(map_input.get("names") or []),
            "sourceRoot": map_input.get("sourceRoot", _ABSENT),
            "sources": list(map_input.get("sources") or []),
            "sourcesContent": map_input.get("sourcesContent", _ABSENT),
            "ignoreList": map_input.get("ignoreList", _ABSENT),
        }

    @property
    def file(self) -> Optional[str]:
        value = self._fields["file"]
        return None if value is _ABSENT else value

    @property
    def sources(self) -> List[Optional[str]]:
        return list(self._fields["sources"])

    @property
    def names(self) -> List[str]:
        return list(self._fields["names"])

    def _to_dict(self, mappings: Any) -> Dict[str, Any]:
        out: Dict[str, Any] = {"version": 3}
        if self._fields["file"] is not _ABSENT:
            out["file"] = self._fields["file"]
        out["names"] = list(self._fields["names"])
        if self._fields["sourceRoot"] is not _ABSENT:
            out["sourceRoot"] = self._fields["sourceRoot"]
        out["sources"] = list(self._fields["sources"])
        if self._fields["sourcesContent"] is not _ABSENT:
            out["sourcesContent"] = copy.deepcopy(self._fields["sourcesContent"])
        out["mappings"] = mappings
        if self._fields["ignoreList"] is not _ABSENT:
            out["ignoreList"] = copy.deepcopy(self._fields["ignoreList"])
        return out

    def decoded_map(self) -> Dict[str, Any]:
        """Fresh flat map with `mappings` as absolute segments."""
        return self._to_dict(copy.deepcopy(self._decoded))

    def encoded_map(self) -> Dict[str, Any]:
        """Fresh flat map with `mappings` as a VLQ string."""
        return self._to_dict(codec.encode(self._decoded))

    def __repr__(self) -> str:
        return f"ParsedMap(sources={self._fields['sources']!r}, lines={len(self._decoded)})"
