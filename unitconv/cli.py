"""
unitconv CLI

Usage:
    unitconv 1mib
    python -m unitconv 0x10KiB
"""

# Standard library -----------------------------------------------------------------------------------------------------
import argparse
import sys

# Third-party ----------------------------------------------------------------------------------------------------------
from packaging.version import InvalidVersion

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import ConvError
from .formatters import fmt_conversions, fmt_exception, human_readable
from .numeric import scale_size
from .pack import version_string
from .parsers import parse_size
from .units import conv_conf


# Classes --------------------------------------------------------------------------------------------------------------

class VersionAction(argparse.Action):
    """--version that looks the installed version up only when the flag is given."""

    def __init__(self, option_strings, dest=argparse.SUPPRESS, default=argparse.SUPPRESS,
                 help="show program's version number and exit"):
        super().__init__(option_strings=option_strings, dest=dest, default=default, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        try:
            version = version_string(parser.prog)
        except InvalidVersion as exc:
            parser.exit(conv_conf.EXIT_FAILURE, f"{fmt_exception(exc)}\n")
        print(version)
        parser.exit()


# Methods --------------------------------------------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=conv_conf.PROG,
        description="Convert a byte quantity to dec/hex/oct/bin and a human-readable size",
    )
    parser.add_argument(
        "value",
        help="Quantity with optional 0x/0b/0 radix prefix and size suffix, e.g. 42, 0x10, 010, 1mib, 3KB",
    )
    parser.add_argument("--version", action=VersionAction)
    return parser


def render(value: int) -> str:
    """Full report for value: the conversions block, a blank line, then the human-readable size."""
    return f"{fmt_conversions(value)}\n\n{human_readable(value)}"


def run(argv: list[str] | None = None) -> int:
    """Parse argv, print the report to stdout and return the process exit code."""
    args = build_parser().parse_args(argv)

    try:
        base, multiplier = parse_size(args.value)
        value = scale_size(base, multiplier, on_overflow="raise")
    except (ConvError, OverflowError) as exc:
        print(f"{conv_conf.ERROR_PREFIX}{fmt_exception(exc)}", file=sys.stderr)
        return conv_conf.EXIT_FAILURE

    print(render(value))
    return conv_conf.EXIT_OK


def main() -> None:
    """Console script entry point."""
    raise SystemExit(run())


if __name__ == "__main__":
    main()
