"""
Tests for the hex dump decoder.
"""

import io

import pytest

from xxdump.exceptions import DecodeError
from xxdump.hex_dump import hex_dump
from xxdump.hex_load import CharScanner, DecoderState, HexLoader, reverse_hex_dump


HELLO_LINE = '00000000: 4865 6c6c 6f' + ' ' * 29 + 'Hello\n'


def test_hello_line():
    assert reverse_hex_dump(HELLO_LINE) == b'Hello'


def test_empty_input():
    assert reverse_hex_dump('') == b''


@pytest.mark.parametrize('width', [1, 2, 3, 7, 16, 17, 32])
@pytest.mark.parametrize('data', [
    b'',
    b'Hello',
    bytes(range(256)),
    b'\r\n\r\n  \n',
    b'key: value\n' * 5,
])
def test_round_trip(width, data):
    """Decoding the encoder's output returns the original bytes."""
    assert reverse_hex_dump(hex_dump(data, column_width=width)) == data


def test_sidebar_is_ignored():
    """Colons and hex-looking characters after the double space are not data."""
    assert reverse_hex_dump('00000000: 3a41  :ab cd\n') == b':A'


def test_single_spaced_pairs():
    assert reverse_hex_dump('00000000: 41 42 43  ABC\n') == b'ABC'


def test_crlf_line_endings():
    text = '00000000: 4142  AB\r\n00000010: 43  C\r\n'
    assert reverse_hex_dump(text) == b'ABC'


def test_lone_carriage_return_resumes_hex():
    """A carriage return not followed by a newline puts the decoder back in the hex field."""
    assert reverse_hex_dump('junk\r41') == b'A'


def test_dangling_digit_is_dropped():
    assert reverse_hex_dump('00000000: 414') == b'A'


def test_text_without_prefix_is_skipped():
    assert reverse_hex_dump('no hex here\n') == b''


def test_malformed_pair():
    with pytest.raises(DecodeError) as exc_info:
        reverse_hex_dump('00000000: zz00  ..\n')
    assert exc_info.value.pair == 'zz'
    assert exc_info.value.line == 1


def test_malformed_pair_reports_line():
    text = '00000000: 41  A\n00000010: g1  .\n'
    with pytest.raises(DecodeError) as exc_info:
        reverse_hex_dump(text)
    assert exc_info.value.pair == 'g1'
    assert exc_info.value.line == 2


def test_sign_is_not_a_hex_digit():
    """'+f' parses with int(..., 16) but is not a hex pair."""
    with pytest.raises(DecodeError):
        reverse_hex_dump('00000000: +f  .\n')


def test_colorized_dump_is_not_decodable():
    with pytest.raises(DecodeError):
        reverse_hex_dump(hex_dump(b'abc', colorize=True))


def test_bytes_written_before_error_are_kept():
    """Output is streamed byte by byte, so bytes before a bad pair reach the sink."""
    sink = io.BytesIO()
    with pytest.raises(DecodeError):
        HexLoader().load(io.StringIO('00000000: 4142 zz  AB.\n'), sink)
    assert sink.getvalue() == b'AB'


def test_load_returns_byte_count_and_final_state():
    loader = HexLoader()
    sink = io.BytesIO()
    count = loader.load(io.StringIO('00000000: 4142  AB'), sink)
    assert count == 2
    assert loader.state is DecoderState.LINE_DONE


def test_state_resets_on_newline():
    loader = HexLoader()
    loader.load(io.StringIO('00000000: 41  A\n'), io.BytesIO())
    assert loader.state is DecoderState.IDLE


class FailingSink(io.BytesIO):
    def write(self, b):
        raise OSError("broken pipe")


def test_write_failure_propagates():
    with pytest.raises(OSError, match="broken pipe"):
        HexLoader().load(io.StringIO(HELLO_LINE), FailingSink())


def test_scanner_pushback():
    scanner = CharScanner(io.StringIO('ab'))
    assert scanner.next() == 'a'
    scanner.push_back('a')
    assert scanner.next() == 'a'
    assert scanner.next() == 'b'
    assert scanner.next() is None


def test_scanner_allows_one_pending_character():
    scanner = CharScanner(io.StringIO(''))
    scanner.push_back('x')
    with pytest.raises(RuntimeError):
        scanner.push_back('y')


def test_scanner_counts_lines():
    scanner = CharScanner(io.StringIO('a\nb\n'))
    while scanner.next() is not None:
        pass
    assert scanner.line == 3


@pytest.mark.parametrize('text', ['\r\r41', '\r:41'])
def test_character_after_lone_carriage_return_is_hex(text):
    """The character after a lone carriage return starts a hex pair, even ':' or another '\\r'."""
    with pytest.raises(DecodeError):
        reverse_hex_dump(text)


def test_space_after_lone_carriage_return():
    assert reverse_hex_dump('\r 41  A\n') == b'A'
