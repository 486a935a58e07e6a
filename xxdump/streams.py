"""
Source and sink acquisition for the CLI.

Files opened here are always closed on exit. The process's standard
streams are used when no path is given and are left open.
"""

import io
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Iterator, Optional

# Hex dump text is ASCII on the way out. Reading it as latin-1 lets any
# stray byte reach the decoder's hex check instead of failing in the codec.
DUMP_WRITE_ENCODING = 'ascii'
DUMP_READ_ENCODING = 'latin-1'


@contextmanager
def open_input(path: Optional[Path], binary: bool) -> Iterator[IO]:
    """
    Open the input stream.

    Args:
        path: File to read, or None for stdin
        binary: Raw bytes (encoding) or hex dump text (decoding)
    """
    if path is None:
        if binary:
            yield sys.stdin.buffer
            return
        # Same decoding as files, whatever the locale says about stdin
        stream = io.TextIOWrapper(sys.stdin.buffer, encoding=DUMP_READ_ENCODING, newline='')
        try:
            yield stream
        finally:
            stream.detach()
        return

    if binary:
        f = open(path, 'rb')
    else:
        f = open(path, 'r', encoding=DUMP_READ_ENCODING, newline='')
    with f:
        yield f


@contextmanager
def open_output(path: Optional[Path], binary: bool) -> Iterator[IO]:
    """
    Open (create or truncate) the output stream.

    Args:
        path: File to write, or None for stdout
        binary: Raw bytes (decoding) or hex dump text (encoding)
    """
    if path is None:
        stream = sys.stdout.buffer if binary else sys.stdout
        try:
            yield stream
        finally:
            stream.flush()
        return

    if binary:
        f = open(path, 'wb')
    else:
        f = open(path, 'w', encoding=DUMP_WRITE_ENCODING, newline='')
    with f:
        yield f
