"""
Line layout arithmetic shared by the encoder and decoder.
"""

DEFAULT_COLUMN_WIDTH = 16

# Offsets always advance by the default width, even for custom column widths
OFFSET_STRIDE = DEFAULT_COLUMN_WIDTH

# Spaces between the hex field and the sidebar
SIDEBAR_GAP = 2

# "xxxxxxxx: "
OFFSET_PREFIX_WIDTH = 10

PRINTABLE_FIRST = 0x21  # '!'
PRINTABLE_LAST = 0x7E   # '~'


def hex_field_width(column_width: int) -> int:
    """
    Width of a line up to the sidebar gap, offset prefix included.

    The hex digits take 2 chars per byte, with one separator space after
    every 2-byte group. When the bytes split evenly into groups the last
    separator is dropped.

    Args:
        column_width: Bytes per line (must be positive, not checked here)

    Returns:
        Number of characters
    """
    last_space = 1 if column_width % 2 == 0 else 0
    return OFFSET_PREFIX_WIDTH + 2 * column_width + column_width // 2 - last_space


def format_offset(offset: int) -> str:
    """Format a line offset as 8 lowercase hex digits plus ': '."""
    return f'{offset:08x}: '


def sidebar_char(byte_val: int) -> str:
    """Sidebar rendering of a byte: itself if printable, else '.'."""
    if PRINTABLE_FIRST <= byte_val <= PRINTABLE_LAST:
        return chr(byte_val)
    return '.'
