"""
Configuration dataclasses for xxdump runs.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .exceptions import ConfigError
from .layout import DEFAULT_COLUMN_WIDTH, hex_field_width


@dataclass(frozen=True)
class DumpConfig:
    """
    Encoder parameters.

    The column width is checked here, when the config is built, so the
    encoder can trust whatever it receives.
    """
    column_width: int = DEFAULT_COLUMN_WIDTH
    colorize: bool = False

    def __post_init__(self):
        """Validate column width."""
        if isinstance(self.column_width, bool) or not isinstance(self.column_width, int):
            raise ConfigError(
                f"Column width must be an integer, got {type(self.column_width).__name__}"
            )
        if self.column_width <= 0:
            raise ConfigError(f"Column width must be positive, got {self.column_width}")

    @property
    def hex_field_width(self) -> int:
        """Fixed hex field width for the configured column width."""
        return hex_field_width(self.column_width)

    @classmethod
    def from_string(cls, text: str, colorize: bool = False) -> 'DumpConfig':
        """
        Build a DumpConfig from a column width given as text (e.g. a CLI flag).

        Args:
            text: Decimal column width
            colorize: Emit ANSI highlight markers

        Returns:
            Validated DumpConfig

        Raises:
            ConfigError: If text is not a positive decimal integer
        """
        try:
            column_width = int(text, 10)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid column width: {text!r}") from e
        return cls(column_width=column_width, colorize=colorize)


@dataclass
class RunConfig:
    """One command-line invocation. None paths mean stdin/stdout."""
    input_file: Optional[Path] = None
    output_file: Optional[Path] = None
    reverse: bool = False
    dump: DumpConfig = field(default_factory=DumpConfig)

    @classmethod
    def from_args(cls, args) -> 'RunConfig':
        """Build RunConfig from parsed argparse arguments."""
        return cls(
            input_file=Path(args.input) if args.input else None,
            output_file=Path(args.output) if args.output else None,
            reverse=args.reverse,
            dump=DumpConfig.from_string(args.cols, colorize=args.pretty),
        )
