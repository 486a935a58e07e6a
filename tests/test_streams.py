"""
Tests for input/output stream acquisition.
"""

import io
import sys

from xxdump.streams import open_input, open_output


def test_open_input_binary(tmp_path):
    path = tmp_path / "data.bin"
    path.write_bytes(b'\x00\xff')

    with open_input(path, binary=True) as f:
        assert f.read() == b'\x00\xff'
    assert f.closed


def test_open_input_text_keeps_carriage_returns(tmp_path):
    """Dump text is read without newline translation."""
    path = tmp_path / "dump.txt"
    path.write_bytes(b'00000000: 41  A\r\n')

    with open_input(path, binary=False) as f:
        assert f.read() == '00000000: 41  A\r\n'


def test_open_input_text_accepts_any_byte(tmp_path):
    path = tmp_path / "dump.txt"
    path.write_bytes(b'\xe9')

    with open_input(path, binary=False) as f:
        assert f.read() == '\xe9'


def test_open_output_creates_and_closes(tmp_path):
    path = tmp_path / "out.txt"
    path.write_text('stale contents')

    with open_output(path, binary=False) as f:
        f.write('00000000: 41  A\n')
    assert f.closed
    assert path.read_bytes() == b'00000000: 41  A\n'


def test_open_output_closes_on_error(tmp_path):
    path = tmp_path / "out.bin"
    try:
        with open_output(path, binary=True) as f:
            f.write(b'x')
            raise ValueError("boom")
    except ValueError:
        pass
    assert f.closed
    assert path.read_bytes() == b'x'


def test_stdout_used_without_path(capsys):
    with open_output(None, binary=False) as f:
        assert f is sys.stdout
        f.write('hello')
    assert capsys.readouterr().out == 'hello'
    assert not sys.stdout.closed


def test_stdin_text_decoded_like_files(monkeypatch):
    """Dump text from stdin keeps carriage returns and accepts any byte, and stdin stays open."""
    stdin = io.TextIOWrapper(io.BytesIO(b'00000000: 41  \xe9\r\n'), encoding='utf-8')
    monkeypatch.setattr(sys, 'stdin', stdin)

    with open_input(None, binary=False) as f:
        assert f.read() == '00000000: 41  \xe9\r\n'
    assert not stdin.buffer.closed
