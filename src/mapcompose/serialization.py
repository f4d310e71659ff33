"""
Serialization helpers for composed output (maps, sections, built code).

Provides JSON/YAML text forms via an intermediate dict representation.
Maps are always normalized before they are written, so the text forms
only ever hold canonical maps.
"""
from __future__ import annotations

import json
from typing import Any, Dict, Union

import yaml

from mapcompose.errors import MapParseError, MapShapeError
from mapcompose.model import Composite, Leaf, Offset, Section
from mapcompose.normalize import normalize, normalize_built
from mapcompose.parsed import load_map_text


def offset_to_dict(o: Offset) -> Dict[str, int]:
    return o.to_dict()


def offset_from_dict(d: Dict[str, Any]) -> Offset:
    return Offset(line=d["line"], column=d["column"])


def section_to_dict(s: Section) -> Dict[str, Any]:
    return {"offset": offset_to_dict(s.offset), "map": normalize(s.map)}


def section_from_dict(d: Dict[str, Any]) -> Section:
    if "offset" not in d or "map" not in d:
        raise MapShapeError("Section must have both 'offset' and 'map'")
    return Section(offset=offset_from_dict(d["offset"]), map=normalize(d["map"]))


def built_to_dict(b: Union[Composite, Leaf]) -> Dict[str, Any]:
    normalized = normalize_built(b)
    return {"code": normalized.code, "map": normalized.map}


def built_from_dict(d: Dict[str, Any]) -> Leaf:
    if "code" not in d or "map" not in d:
        raise MapShapeError("Built code must have both 'code' and 'map'")
    return Leaf(code=d["code"], map=normalize(d["map"]))


def map_to_json(m: Any, sort_keys: bool = True) -> str:
    return json.dumps(normalize(m), sort_keys=sort_keys)


def map_from_json(s: str) -> Dict[str, Any]:
    return normalize(load_map_text(s))


def _load_yaml(s: str) -> Any:
    try:
        return yaml.safe_load(s)
    except yaml.YAMLError as e:
        raise MapParseError(f"Invalid YAML: {e}") from e


def map_to_yaml(m: Any) -> str:
    return yaml.safe_dump(normalize(m))


def map_from_yaml(s: str) -> Dict[str, Any]:
    return normalize(_load_yaml(s))


def built_to_json(b: Union[Composite, Leaf], sort_keys: bool = True) -> str:
    return json.dumps(built_to_dict(b), sort_keys=sort_keys)


def built_from_json(s: str) -> Leaf:
    return built_from_dict(load_map_text(s))


def built_to_yaml(b: Union[Composite, Leaf]) -> str:
    return yaml.safe_dump(built_to_dict(b))


def built_from_yaml(s: str) -> Leaf:
    return built_from_dict(_load_yaml(s))
