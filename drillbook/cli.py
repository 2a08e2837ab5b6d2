"""Command-line entry point that prints a greeting."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

GREETING = "Hello, World!"


def main(argv: Sequence[str] | None = None) -> int:
    """Print the greeting and return the exit status."""
    parser = argparse.ArgumentParser(prog="drillbook", description="Print a greeting.")
    parser.parse_args(argv)
    print(GREETING, end="")
    return 0