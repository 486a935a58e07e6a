"""
xxd-style hex dump encoder.

Each line looks like::

    00000000: 4865 6c6c 6f0a                           Hello.

The hex field is padded so the sidebar starts at the same column on every
line, including a short last line.
"""

import io
from typing import BinaryIO, Optional, TextIO

from .config import DumpConfig
from .layout import OFFSET_PREFIX_WIDTH, OFFSET_STRIDE, SIDEBAR_GAP, format_offset, sidebar_char
from .logging_config import get_logger

logger = get_logger('hex_dump')


class HexDumper:
    """Streaming hex dumper with optional ANSI highlighting."""

    # ANSI color codes
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    RESET = '\033[0m'

    # Bytes highlighted inside the hex field
    LINE_BREAK_BYTES = (0x0A, 0x0D)

    def __init__(self, config: Optional[DumpConfig] = None):
        """
        Initialize HexDumper.

        Args:
            config: Dump configuration (defaults to 16 columns, no color)
        """
        self.config = config or DumpConfig()

    def dump(self, source: BinaryIO, sink: TextIO) -> int:
        """
        Encode everything readable from source onto sink.

        Args:
            source: Binary reader, read(1) returns b'' at end of stream
            sink: Text writer

        Returns:
            Number of lines written
        """
        offset = 0
        lines = 0
        total = 0

        while True:
            written = self._dump_line(source, sink, offset)
            if written == 0:
                break
            total += written
            lines += 1
            offset += OFFSET_STRIDE

        logger.debug(f"Encoded {total} bytes into {lines} lines (width {self.config.column_width})")
        return lines

    def _dump_line(self, source: BinaryIO, sink: TextIO, offset: int) -> int:
        """Write one line. Returns the number of bytes consumed, 0 at end of stream."""
        first = source.read(1)
        if not first:
            return 0

        colorize = self.config.colorize
        prefix = format_offset(offset)
        sink.write(prefix)
        # Counted at its nominal width so a longer offset cannot eat the sidebar gap
        hex_wrote = OFFSET_PREFIX_WIDTH

        if colorize:
            sink.write(self.GREEN)

        sidebar = []
        chunk = first
        for i in range(self.config.column_width):
            if i > 0:
                chunk = source.read(1)
                if not chunk:
                    break
            byte_val = chunk[0]

            if colorize and byte_val in self.LINE_BREAK_BYTES:
                sink.write(f'{self.YELLOW}{byte_val:02x}{self.GREEN}')
            else:
                sink.write(f'{byte_val:02x}')
            hex_wrote += 2

            if i % 2 != 0:
                sink.write(' ')
                hex_wrote += 1

            sidebar.append(sidebar_char(byte_val))

        padding = SIDEBAR_GAP + self.config.hex_field_width - hex_wrote
        sink.write(' ' * padding)
        sink.write(''.join(sidebar))
        if colorize:
            sink.write(self.RESET)
        sink.write('\n')

        return len(sidebar)


def hex_dump(data: bytes, column_width: int = 16, colorize: bool = False) -> str:
    """
    Create xxd-style hex dump of in-memory data.

    Args:
        data: Binary data to dump
        column_width: Number of bytes per line
        colorize: Use ANSI colors for the hex field

    Returns:
        Formatted hex dump string
    """
    dumper = HexDumper(DumpConfig(column_width=column_width, colorize=colorize))
    out = io.StringIO()
    dumper.dump(io.BytesIO(data), out)
    return out.getvalue()
