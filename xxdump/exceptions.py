"""
Custom exceptions for the xxdump hex codec.
"""


class XxdumpError(Exception):
    """Base exception for all xxdump errors."""
    pass


class ConfigError(XxdumpError):
    """Exception raised for invalid dump configuration."""
    pass


class DecodeError(XxdumpError):
    """Exception raised when a hex digit pair cannot be parsed."""

    def __init__(self, pair: str, line: int):
        self.pair = pair
        self.line = line
        super().__init__(f"Invalid hex pair {pair!r} on line {line}")
