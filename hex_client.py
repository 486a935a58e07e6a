#!/usr/bin/env python3
"""
xxdump CLI
Hex dump a file, or reverse a hex dump back into the original bytes.
"""

import argparse
import sys

import argcomplete
from argcomplete.completers import FilesCompleter

from xxdump.config import RunConfig
from xxdump.exceptions import ConfigError, XxdumpError
from xxdump.hex_dump import HexDumper
from xxdump.hex_load import HexLoader
from xxdump.logging_config import setup_logging, get_logger
from xxdump.streams import open_input, open_output

logger = get_logger('cli')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='xxdump',
        description='Make a hex dump of a file, or reverse a hex dump to the original bytes'
    )
    input_arg = parser.add_argument('-i', '--input', metavar='FILE',
                                    help='Input file (default: stdin)')
    input_arg.completer = FilesCompleter()
    output_arg = parser.add_argument('-o', '--output', metavar='FILE',
                                     help='Output file (default: stdout)')
    output_arg.completer = FilesCompleter()
    parser.add_argument('-c', '--cols', default='16', metavar='N',
                        help='Bytes per line (default: 16)')
    parser.add_argument('-r', '--reverse', action='store_true',
                        help='Reverse a hex dump to the original bytes')
    parser.add_argument('-p', '--pretty', action='store_true',
                        help='Pretty print: colored hex. Not compatible with -r')
    parser.add_argument('--log-level', default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL', 'NONE'],
                        help='Set logging level (NONE = disable logging)')
    return parser


def run_dump(config: RunConfig) -> None:
    """Encode input bytes as hex dump text."""
    with open_input(config.input_file, binary=True) as source, \
            open_output(config.output_file, binary=False) as sink:
        lines = HexDumper(config.dump).dump(source, sink)
    logger.info(f"Wrote {lines} lines")


def run_reverse(config: RunConfig) -> None:
    """Decode hex dump text back into bytes."""
    with open_input(config.input_file, binary=False) as source, \
            open_output(config.output_file, binary=True) as sink:
        written = HexLoader().load(source, sink)
    logger.info(f"Wrote {written} bytes")


def main(argv=None) -> int:
    parser = build_parser()
    argcomplete.autocomplete(parser)
    args = parser.parse_args(argv)

    setup_logging(args.log_level, use_color=args.pretty)

    try:
        config = RunConfig.from_args(args)
    except ConfigError as e:
        logger.error(f"Error occurred while reading cli args: {e}")
        parser.print_help()
        return 2

    if config.reverse and config.dump.colorize:
        logger.warning("Pretty printing does not apply to reverse mode, ignoring -p")

    try:
        if config.reverse:
            run_reverse(config)
        else:
            run_dump(config)
    except XxdumpError as e:
        logger.error(f"Error occurred while reversing hex dump: {e}")
        return 1
    except OSError as e:
        logger.error(f"Error occurred while reading or writing: {e}")
        return 1

    return 0


if __name__ == '__main__':
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nInterrupted")
        sys.exit(0)
