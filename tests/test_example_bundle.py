"""
Test the example bundle used by the demo.

Validates the composed code and the absolute offsets of every section,
including those inlined from the nested exports composition.
"""

from mapcompose.examples import EXPORT_MAP, FAREWELL_MAP, GREET_MAP, build_example_bundle
from mapcompose.flatten import flatten
from mapcompose.model import empty_map
from mapcompose.normalize import normalize, normalize_built


def test_example_bundle_code():
    bundle = build_example_bundle()
    assert bundle.code == (
        "// bundle\n"
        "function greet() {\n  return 'hi';\n}\n"
        "\n"
        "function farewell() {\n  return 'bye';\n}\n"
        "export { greet, farewell };\n"
    )


def test_example_bundle_sections():
    sections = flatten(build_example_bundle())
    assert [(s.offset.line, s.offset.column) for s in sections] == [
        (1, 0),
        (3, 1),
        (5, 0),
        (7, 1),
        (8, 9),
        (8, 24),
    ]
    assert sections[0].map is GREET_MAP
    assert sections[1].map == empty_map()
    assert sections[2].map is FAREWELL_MAP
    assert sections[4].map is EXPORT_MAP

    # Offsets come out ordered without sorting
    offsets = [s.offset for s in sections]
    assert offsets == sorted(offsets)


def test_example_bundle_normalizes():
    built = normalize_built(build_example_bundle())
    assert built.map["sections"][4]["map"]["mappings"] == "AAAA"
    assert normalize(built.map) == built.map


def test_banner_is_untraced():
    """A longer banner shifts nothing but the header line."""
    short = flatten(build_example_bundle(banner="a"))
    long = flatten(build_example_bundle(banner="a much longer banner"))
    assert [s.offset for s in short] == [s.offset for s in long]
