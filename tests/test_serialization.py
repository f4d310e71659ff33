"""
Tests for serialization of maps and built code.

These tests ensure the JSON/YAML text forms hold canonical maps and
read back to the same dict representation.
"""

import pytest
from mapcompose.composer import compose, leaf
from mapcompose.errors import MapParseError, MapShapeError
from mapcompose.model import Leaf, Offset, Section
from mapcompose.serialization import (
    built_from_json,
    built_from_yaml,
    built_to_dict,
    built_to_json,
    built_to_yaml,
    map_from_json,
    map_from_yaml,
    map_to_json,
    map_to_yaml,
    section_from_dict,
    section_to_dict,
)


FOO_DECODED = {
    "version": 3,
    "names": [],
    "sources": ["foo.js"],
    "mappings": [[[0, 0, 0, 0]]],
}

FOO_MAP = dict(FOO_DECODED, mappings="AAAA")


def build_sample():
    return compose(["const a = ", ";\n"], leaf("foo", FOO_DECODED))


def test_section_to_dict_normalizes_map():
    section = Section(Offset(1, 2), FOO_DECODED)
    assert section_to_dict(section) == {"offset": {"line": 1, "column": 2}, "map": FOO_MAP}


def test_section_from_dict():
    section = section_from_dict({"offset": {"line": 0, "column": 4}, "map": FOO_DECODED})
    assert section == Section(Offset(0, 4), FOO_MAP)


def test_section_from_dict_missing_map():
    with pytest.raises(MapShapeError):
        section_from_dict({"offset": {"line": 0, "column": 4}})


def test_built_to_dict():
    assert built_to_dict(build_sample()) == {
        "code": "const a = foo;\n",
        "map": {
            "version": 3,
            "sections": [
                {"offset": {"line": 0, "column": 10}, "map": FOO_MAP},
                {
                    "offset": {"line": 0, "column": 13},
                    "map": {"version": 3, "names": [], "sources": [], "mappings": ""},
                },
            ],
        },
    }


def test_json_roundtrip():
    before = built_to_dict(build_sample())
    restored = built_from_json(built_to_json(build_sample()))
    assert isinstance(restored, Leaf)
    assert built_to_dict(restored) == before


def test_yaml_roundtrip():
    before = built_to_dict(build_sample())
    restored = built_from_yaml(built_to_yaml(build_sample()))
    assert built_to_dict(restored) == before


def test_map_json_roundtrip():
    assert map_from_json(map_to_json(FOO_DECODED)) == FOO_MAP


def test_map_yaml_roundtrip():
    assert map_from_yaml(map_to_yaml(FOO_DECODED)) == FOO_MAP


def test_map_to_json_is_sorted():
    assert map_to_json(FOO_MAP).startswith('{"mappings"')


def test_invalid_json_text():
    with pytest.raises(MapParseError):
        built_from_json("[")


def test_invalid_yaml_text():
    with pytest.raises(MapParseError):
        map_from_yaml("version: [3")


def test_built_from_dict_requires_code():
    with pytest.raises(MapShapeError):
        built_from_json('{"map": {"version": 3, "sections": []}}')
