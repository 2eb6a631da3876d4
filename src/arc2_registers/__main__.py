"""Command line entry point.

Usage:
    python -m arc2_registers --version
"""

from argparse import ArgumentParser
from collections.abc import Sequence

from . import __version__

__all__ = ["main"]


def main(args: Sequence[str] | None = None) -> None:
    """Report the package version."""
    parser = ArgumentParser(description="Instrument register encoding")
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=__version__,
    )

    parser.parse_args(args)
    parser.print_help()


if __name__ == "__main__":
    main()
