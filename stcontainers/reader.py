"""Character-level token reader for whitespace-separated console input."""

from __future__ import annotations

import sys
from typing import TextIO

_SKIPPED = (" ", "\n")
_DIGITS = "0123456789"


def _wrap_signed(value: int, bits: int) -> int:
    half = 1 << (bits - 1)
    return ((value + half) % (1 << bits)) - half


class TokenReader:
    """Reads words and numbers from a text stream one character at a time.

    Each read consumes the character that ends the token.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdin

    def _getc(self) -> str:
        return self._stream.read(1)

    def _skip_blank(self) -> str:
        c = self._getc()
        while c in _SKIPPED and c:
            c = self._getc()
        return c

    def read_word(self) -> str:
        """Read characters up to a space, newline or end of input."""
        chars = []
        c = self._getc()
        while c and c not in _SKIPPED:
            chars.append(c)
            c = self._getc()
        return "".join(chars)

    def read_int(self) -> int:
        """Read an optionally negative decimal integer; 0 if no digits follow."""
        c = self._skip_blank()
        negative = c == "-"
        if negative:
            c = self._getc()
        n = 0
        while c and c in _DIGITS:
            n = n * 10 + int(c)
            c = self._getc()
        return -n if negative else n

    def read_short(self) -> int:
        """Read an integer and wrap it to a signed 16-bit value."""
        return _wrap_signed(self.read_int(), 16)

    def read_unsigned(self) -> int:
        """Read an unsigned decimal integer, wrapped to 32 bits."""
        c = self._skip_blank()
        n = 0
        while c and c in _DIGITS:
            n = (n * 10 + int(c)) % (1 << 32)
            c = self._getc()
        return n

    def read_unsigned_short(self) -> int:
        """Read an unsigned integer and wrap it to 16 bits."""
        return self.read_unsigned() % (1 << 16)

    def read_float(self) -> float:
        """Read an optionally negative decimal number with a fractional part."""
        c = self._skip_blank()
        negative = c == "-"
        if negative:
            c = self._getc()
        whole = 0.0
        fraction = 0.0
        divisor = 1.0
        decimal = False
        while c and (c in _DIGITS or c == "."):
            if c == ".":
                decimal = True
            elif not decimal:
                whole = whole * 10 + int(c)
            else:
                fraction = fraction * 10 + int(c)
                divisor *= 10
            c = self._getc()
        value = whole + fraction / divisor
        return -value if negative else value

    def read_char(self) -> str:
        """Read a single character; empty string at end of input."""
        return self._getc()