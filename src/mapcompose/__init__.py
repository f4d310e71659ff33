"""
Source Map Composition Package

Joins fragments of generated code into one output text plus one
sectioned (index) source map, so that every position of the output can
be traced back to where it came from.

ARCHITECTURAL GUARANTEE:
------------------------
This package contains ZERO knowledge of:
    - Reading or writing files
    - Resolving output positions back to original sources
    - What the generated code means

It only tracks positions and shapes maps.

Layers:
    position   -> line/column cursor over generated text
    composer   -> fragments + values -> Composite (code + mapping tree)
    flatten    -> mapping tree -> flat section list
    normalize  -> any accepted map shape -> canonical map
"""

__version__ = "0.1.0"
