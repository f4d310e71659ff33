"""Errors raised while composing and normalizing source maps."""


class MapComposeError(Exception):
    """Base error for this package."""


class MapParseError(MapComposeError, ValueError):
    """Raised when serialized map text cannot be parsed."""


class MapShapeError(MapComposeError, ValueError):
    """Raised when a map lacks the fields needed to recognize its shape."""


class CodecError(MapComposeError, ValueError):
    """Raised when a mappings string or decoded segment is malformed."""


class CompositionError(MapComposeError, ValueError):
    """Raised when fragments and values are not interleaved correctly."""
