#!/usr/bin/env python3
"""
Demo: Compose a small bundle and print its code and sectioned source map.
"""

from mapcompose.examples import build_example_bundle
from mapcompose.flatten import flatten
from mapcompose.serialization import built_to_json, built_to_yaml


def main():
    bundle = build_example_bundle(banner="demo bundle")

    print("=" * 80)
    print("COMPOSED CODE")
    print("=" * 80)
    print(bundle.code)

    print("=" * 80)
    print("SECTIONS")
    print("=" * 80)
    for section in flatten(bundle):
        sources = section.map.get("sources") if isinstance(section.map, dict) else None
        label = ", ".join(sources) if sources else "(synthetic)"
        print(f"  {section.offset.line}:{section.offset.column}  {label}")

    print("\n" + "=" * 80)
    print("JSON")
    print("=" * 80)
    print(built_to_json(bundle))

    print("\n" + "=" * 80)
    print("YAML")
    print("=" * 80)
    print(built_to_yaml(bundle))


if __name__ == "__main__":
    main()
