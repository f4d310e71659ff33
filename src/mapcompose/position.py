"""
Position tracking over generated text.

Line breaks follow the source map v3 rules used by map readers:
    - "\\r\\n" is a single break
    - a lone "\\n" or lone "\\r" is a break

Columns count UTF-16 code units, the unit source map readers use:
a character outside the Basic Multilingual Plane takes two columns.
"""

from dataclasses import dataclass

from .model import Offset


_NEWLINE = "\n"
_CARRIAGE_RETURN = "\r"
_BMP_MAX = 0xFFFF


def utf16_length(text: str) -> int:
    """Length of `text` in UTF-16 code units."""
    return len(text) + sum(1 for ch in text if ord(ch) > _BMP_MAX)


@dataclass
class Cursor:
    """
    Mutable (line, column) position, both 0-indexed.

    A Cursor belongs to exactly one composition call. Never share one
    between calls.
    """

    line: int = 0
    column: int = 0

    def reset(self) -> None:
        self.line = 0
        self.column = 0

    def advance(self, text: str) -> None:
        """Move the cursor past `text`."""
        last_break = -1
        breaks = 0
        i = 0
        length = len(text)
        while i < length:
            ch = text[i]
            if ch == _CARRIAGE_RETURN:
                if i + 1 < length and text[i + 1] == _NEWLINE:
                    i += 1
                breaks += 1
                last_break = i
            elif ch == _NEWLINE:
                breaks += 1
                last_break = i
            i += 1

        self.line += breaks
        if last_break == -1:
            self.column += utf16_length(text)
        else:
            self.column = utf16_length(text[last_break + 1:])

    def offset(self) -> Offset:
        """Snapshot of the current position."""
        return Offset(self.line, self.column)
