"""
Base64 VLQ codec for the `mappings` field of a version 3 source map.

Decoded form:
    one list per generated line, each holding segments of 1, 4 or 5
    absolute integers:
        [generated_column]
        [generated_column, source_index, source_line, source_column]
        [generated_column, source_index, source_line, source_column, name_index]

Encoded form:
    lines separated by ";", segments by ",", every field stored as a
    delta from the previous segment. The generated column restarts at 0
    on every line; the other fields carry over across lines.
"""

from typing import List

from .errors import CodecError


_BASE64 = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
_BASE64_VALUES = {ch: i for i, ch in enumerate(_BASE64)}

_VLQ_SHIFT = 5
_VLQ_CONTINUATION = 1 << _VLQ_SHIFT
_VLQ_MASK = _VLQ_CONTINUATION - 1

_SEGMENT_LENGTHS = (1, 4, 5)

Segment = List[int]
DecodedMappings = List[List[Segment]]


def _decode_segment(text: str) -> Segment:
    values: Segment = []
    value = 0
    shift = 0
    for ch in text:
        digit = _BASE64_VALUES.get(ch)
        if digit is None:
            raise CodecError(f"Invalid base64 character {ch!r} in mappings")
        value += (digit & _VLQ_MASK) << shift
        if digit & _VLQ_CONTINUATION:
            shift += _VLQ_SHIFT
            continue
        negative = value & 1
        value >>= 1
        values.append(-value if negative else value)
        value = 0
        shift = 0
    if shift:
        raise CodecError(f"Truncated VLQ value in segment {text!r}")
    if len(values) not in _SEGMENT_LENGTHS:
        raise CodecError(f"Segment {text!r} has {len(values)} fields, expected 1, 4 or 5")
    return values


def decode(mappings: str) -> DecodedMappings:
    """Decode a mappings string into absolute segments."""
    decoded: DecodedMappings = []
    source_index = 0
    source_line = 0
    source_column = 0
    name_index = 0

    for line_text in mappings.split(";"):
        line: List[Segment] = []
        generated_column = 0
        for segment_text in line_text.split(","):
            if not segment_text:
                continue
            fields = _decode_segment(segment_text)
            generated_column += fields[0]
            segment = [generated_column]
            if len(fields) > 1:
                source_index += fields[1]
                source_line += fields[2]
                source_column += fields[3]
                segment.extend([source_index, source_line, source_column])
                if len(fields) == 5:
                    name_index += fields[4]
                    segment.append(name_index)
            line.append(segment)
        decoded.append(line)

    # "" decodes to no lines at all, not one empty line
    if decoded == [[]]:
        return []
    return decoded


def _encode_value(value: int) -> str:
    vlq = (-value << 1) | 1 if value < 0 else value << 1
    out = []
    while True:
        digit = vlq & _VLQ_MASK
        vlq >>= _VLQ_SHIFT
        if vlq:
            digit |= _VLQ_CONTINUATION
        out.append(_BASE64[digit])
        if not vlq:
            return "".join(out)


def encode(decoded: DecodedMappings) -> str:
    """Encode absolute segments into a mappings string."""
    source_index = 0
    source_line = 0
    source_column = 0
    name_index = 0

    lines = []
    for line in decoded:
        generated_column = 0
        segments = []
        for segment in line:
            if not isinstance(segment, (list, tuple)) or len(segment) not in _SEGMENT_LENGTHS:
                raise CodecError(f"Segment {segment!r} must be a list of 1, 4 or 5 fields")
            if not all(isinstance(v, int) and not isinstance(v, bool) for v in segment):
                raise CodecError(f"Segment {segment!r} must hold only integers")
            parts = [_encode_value(segment[0] - generated_column)]
            generated_column = segment[0]
            if len(segment) > 1:
                parts.append(_encode_value(segment[1] - source_index))
                parts.append(_encode_value(segment[2] - source_line))
                parts.append(_encode_value(segment[3] - source_column))
                source_index, source_line, source_column = segment[1], segment[2], segment[3]
                if len(segment) == 5:
                    parts.append(_encode_value(segment[4] - name_index))
                    name_index = segment[4]
            segments.append("".join(parts))
        lines.append(",".join(segments))
    return ";".join(lines)
