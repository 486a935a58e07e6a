"""
Reverse of hex_dump: turn xxd-style hex dump text back into bytes.

Only the hex field is read. The offset before ':' and everything after the
double space that ends the hex field (the sidebar) are skipped. Colorized
dumps are not supported: escape sequences end up in the hex field and fail
to parse.
"""

import io
import string
from enum import Enum
from typing import BinaryIO, Optional, TextIO

from .exceptions import DecodeError
from .logging_config import get_logger

logger = get_logger('hex_load')

HEX_DIGITS = frozenset(string.hexdigits)


class DecoderState(Enum):
    """Where the decoder is within the current line."""
    IDLE = 'idle'                # before the 'offset:' prefix
    READING_HEX = 'reading_hex'  # inside the hex field
    LINE_DONE = 'line_done'      # past the hex field, skipping to end of line


class CharScanner:
    """Reads a text stream one character at a time with one unit of pushback."""

    def __init__(self, source: TextIO):
        self.source = source
        self.line = 1
        self._pushed: Optional[str] = None

    def next(self) -> Optional[str]:
        """Return the next character, or None at end of stream."""
        if self._pushed is not None:
            char, self._pushed = self._pushed, None
            return char

        char = self.source.read(1)
        if not char:
            return None
        if char == '\n':
            self.line += 1
        return char

    def push_back(self, char: str):
        """Return one character to the stream. Only one may be pending."""
        if self._pushed is not None:
            raise RuntimeError("Pushback buffer already holds a character")
        self._pushed = char


class HexLoader:
    """Finite-state decoder for hex dump text."""

    def __init__(self):
        self.state = DecoderState.IDLE

    def load(self, source: TextIO, sink: BinaryIO) -> int:
        """
        Decode hex dump text from source, writing recovered bytes to sink.

        Args:
            source: Text reader, read(1) returns '' at end of stream
            sink: Binary writer

        Returns:
            Number of bytes written

        Raises:
            DecodeError: If a hex field holds something other than hex digits
        """
        scanner = CharScanner(source)
        self.state = DecoderState.IDLE
        written = 0
        # Set after a lone carriage return: the next character is read as hex
        hex_pending = False

        while (char := scanner.next()) is not None:
            if hex_pending:
                hex_pending = False
            elif char == ':' and self.state is not DecoderState.LINE_DONE:
                # Conventional space after the colon
                scanner.next()
                self.state = DecoderState.READING_HEX
                continue
            elif char == '\n':
                self.state = DecoderState.IDLE
                continue
            elif char == '\r':
                following = scanner.next()
                if following is None:
                    break
                if following == '\n':
                    self.state = DecoderState.IDLE
                else:
                    self.state = DecoderState.READING_HEX
                    scanner.push_back(following)
                    hex_pending = True
                continue

            if self.state is not DecoderState.READING_HEX:
                continue

            if char == ' ':
                char = scanner.next()
                if char is None:
                    break
                if char == ' ':
                    self.state = DecoderState.LINE_DONE
                    continue

            line = scanner.line
            low = scanner.next()
            if low is None:
                logger.debug(f"Ignoring dangling hex digit {char!r} at end of input")
                break

            sink.write(bytes((self._parse_pair(char + low, line),)))
            written += 1

        logger.debug(f"Decoded {written} bytes")
        return written

    @staticmethod
    def _parse_pair(pair: str, line: int) -> int:
        """Parse two hex digits into a byte value."""
        if not all(c in HEX_DIGITS for c in pair):
            raise DecodeError(pair, line)
        return int(pair, 16)


def reverse_hex_dump(text: str) -> bytes:
    """
    Decode hex dump text held in memory.

    Args:
        text: Output of hex_dump()

    Returns:
        The original bytes
    """
    out = io.BytesIO()
    HexLoader().load(io.StringIO(text, newline=''), out)
    return out.getvalue()
