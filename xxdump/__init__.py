"""
xxdump

Encode byte streams as xxd-style hex dump text and decode that text back
into the original bytes.
"""

from .config import DumpConfig, RunConfig
from .exceptions import XxdumpError, ConfigError, DecodeError
from .hex_dump import HexDumper, hex_dump
from .hex_load import HexLoader, DecoderState, CharScanner, reverse_hex_dump
from .layout import DEFAULT_COLUMN_WIDTH, OFFSET_STRIDE, hex_field_width, sidebar_char
from .logging_config import LoggingManager, setup_logging, get_logger
from .streams import open_input, open_output

__all__ = [
    # Configuration
    'DumpConfig',
    'RunConfig',
    # Encoder / decoder
    'HexDumper',
    'hex_dump',
    'HexLoader',
    'DecoderState',
    'CharScanner',
    'reverse_hex_dump',
    # Layout
    'DEFAULT_COLUMN_WIDTH',
    'OFFSET_STRIDE',
    'hex_field_width',
    'sidebar_char',
    # Streams
    'open_input',
    'open_output',
    # Exceptions
    'XxdumpError',
    'ConfigError',
    'DecodeError',
    # Logging
    'LoggingManager',
    'setup_logging',
    'get_logger',
]

__version__ = '1.0.0'
