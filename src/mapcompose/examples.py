"""
Example bundle builder for demos and tests.

Composes a small module out of two traced functions (each with its own
source map), an untraced header, and a nested composition for the
exports block.
"""
from mapcompose.composer import compose, leaf
from mapcompose.model import Composite


GREET_MAP = {
    "version": 3,
    "sources": ["greet.ts"],
    "names": [],
    "mappings": "AAAA;EACE;AACF",
}

FAREWELL_MAP = {
    "version": 3,
    "sources": ["farewell.ts"],
    "names": ["farewell"],
    "mappings": "AAAAA;EACE;AACF",
}

EXPORT_MAP = {
    "version": 3,
    "sources": ["index.ts"],
    "names": [],
    "mappings": [[[0, 0, 0, 0]]],
}


def build_example_bundle(banner: str = "bundle") -> Composite:
    greet = leaf("function greet() {\n  return 'hi';\n}", GREET_MAP)
    farewell = leaf("function farewell() {\n  return 'bye';\n}", FAREWELL_MAP)

    # Exports are composed separately, then embedded without flattening
    exports = compose(["export { ", " };"], leaf("greet, farewell", EXPORT_MAP))

    return compose(
        ["// ", "\n", "\n\n", "\n", "\n"],
        banner,
        greet,
        farewell,
        exports,
    )
