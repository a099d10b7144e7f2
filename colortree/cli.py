"""Command-line front door for colortree.

Parses the depth option, builds the color-rule table when colors are enabled,
renders the tree below the root, and prints the directory/file summary.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import TextIO

from . import config
from .colors.rules import ColorRuleTable, load_color_rules
from .terminal import TerminalOutput, detect_color_support, use_surrogate_escapes
from .tree.types import Counter
from .tree.walk import render

logger = logging.getLogger(__name__)

DEFAULT_ROOT = "."
UNLIMITED_DEPTH = 0xFFFF
MAX_DEPTH_ARG = 0xFF


@dataclass(frozen=True)
class Options:
    directory: str = DEFAULT_ROOT
    level: int = UNLIMITED_DEPTH


def _depth(value: str) -> int:
    """argparse type for an unsigned 8-bit depth."""
    try:
        parsed = int(value, 10)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid depth value: {value!r}") from exc
    if parsed < 0 or parsed > MAX_DEPTH_ARG:
        raise argparse.ArgumentTypeError(f"depth must be between 0 and {MAX_DEPTH_ARG}")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="colortree",
        description="List a directory as a colorized tree.",
    )
    parser.add_argument("-L", dest="level", type=_depth, required=True, help="Maximum depth to descend (0-255).")
    return parser


def parse_args(argv: list[str]) -> Options:
    """Resolve options from ``argv`` (without the program name).

    Only ``-L N [PATH]`` is recognized. Any other first argument, or ``-L``
    without a value, lists ``.`` with unlimited depth. An invalid depth exits
    through argparse with status 2.
    """
    if len(argv) < 2 or argv[0] != "-L":
        return Options()
    args = build_parser().parse_args(argv[:2])
    # The root is taken verbatim, even when it starts with "-".
    directory = argv[2] if len(argv) > 2 else DEFAULT_ROOT
    return Options(directory=directory, level=args.level)


def build_color_table(color_enabled: bool) -> ColorRuleTable:
    """Read color rules from the environment only when colors will be shown."""
    if not color_enabled:
        return {}
    return load_color_rules(config.load_color_env_name())


def run(options: Options, stdout: TextIO, stderr: TextIO) -> Counter:
    """Render the tree for ``options`` and return the final counts."""
    color_enabled = detect_color_support(stdout, config.load_color_mode())
    logger.debug("color output %s", "enabled" if color_enabled else "disabled")
    output = TerminalOutput(stdout, stderr, color_enabled)
    table = build_color_table(color_enabled)

    output.write(f"{options.directory}\n")
    counter = Counter()
    render(options.directory, "", options.level, counter, output, table)
    output.write(f"\n{counter.summary()}\n")
    output.flush()
    return counter


def main(argv: list[str] | None = None) -> int:
    """Parse CLI arguments and print the tree; returns the exit status."""
    logging.basicConfig(level=config.load_log_level(), format="%(levelname)s %(name)s: %(message)s")
    options = parse_args(sys.argv[1:] if argv is None else argv)
    use_surrogate_escapes(sys.stdout)
    use_surrogate_escapes(sys.stderr)
    run(options, sys.stdout, sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
