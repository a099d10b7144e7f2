"""Output and style port for tree rendering.

Wraps the output/error streams, decides whether color escapes are allowed, and
translates parsed style rules into SGR sequences from ``pygments.console``.
"""

from __future__ import annotations

import enum
import logging
import os
from collections.abc import Mapping
from typing import TextIO

from pygments.console import codes

from .colors.rules import Color, StyleRule, Weight

logger = logging.getLogger(__name__)

# pygments maps "white" to bold; SGR 37 is published as "gray".
COLOR_ESCAPES: dict[Color, str] = {
    Color.DEFAULT: "",
    Color.RED: codes["red"],
    Color.GREEN: codes["green"],
    Color.BLUE: codes["blue"],
    Color.MAGENTA: codes["magenta"],
    Color.CYAN: codes["cyan"],
    Color.WHITE: codes["gray"],
}
WEIGHT_ESCAPES: dict[Weight, str] = {
    Weight.NORMAL: "",
    Weight.BOLD: codes["bold"],
}
RESET_ESCAPE = codes["reset"]


class ColorMode(enum.Enum):
    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def stream_is_interactive(stream: TextIO) -> bool:
    """Return whether ``stream`` is attached to a terminal."""
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except (OSError, ValueError):
        return False


def detect_color_support(
    stream: TextIO,
    mode: ColorMode = ColorMode.AUTO,
    environ: Mapping[str, str] | None = None,
) -> bool:
    """Decide whether style escapes should be written to ``stream``.

    Non-interactive streams never get colors. On a terminal an explicit
    ``mode`` wins, otherwise ``NO_COLOR`` disables colors.
    """
    if not stream_is_interactive(stream):
        return False
    if mode is not ColorMode.AUTO:
        return mode is ColorMode.ALWAYS
    env = os.environ if environ is None else environ
    if "NO_COLOR" in env:
        logger.debug("NO_COLOR is set; colors disabled")
        return False
    return True


def use_surrogate_escapes(stream: TextIO) -> None:
    """Let ``stream`` write undecodable filename bytes back out unchanged.

    ``os.scandir`` returns such bytes as lone surrogates; a strict encoder
    would reject them.
    """
    reconfigure = getattr(stream, "reconfigure", None)
    if reconfigure is None:
        return
    try:
        reconfigure(errors="surrogateescape")
    except (OSError, ValueError):
        logger.debug("cannot reconfigure %r for surrogate escapes", stream)


def style_escape(rule: StyleRule) -> str:
    """Return the weight escape followed by the color escape for ``rule``."""
    return WEIGHT_ESCAPES[rule.weight] + COLOR_ESCAPES[rule.color]


class TerminalOutput:
    """Text sink used by the tree walker, with optional styling."""

    def __init__(self, stream: TextIO, error_stream: TextIO, color_enabled: bool) -> None:
        self.stream = stream
        self.error_stream = error_stream
        self.color_enabled = color_enabled

    def write(self, text: str) -> None:
        self.stream.write(text)

    def write_error(self, text: str) -> None:
        self.error_stream.write(text)

    def set_style(self, rule: StyleRule) -> None:
        if not self.color_enabled:
            return
        escape = style_escape(rule)
        if escape:
            self.stream.write(escape)

    def reset_style(self) -> None:
        if not self.color_enabled:
            return
        self.stream.write(RESET_ESCAPE)

    def is_interactive(self) -> bool:
        return stream_is_interactive(self.stream)

    def flush(self) -> None:
        self.stream.flush()


__all__ = [
    "COLOR_ESCAPES",
    "ColorMode",
    "RESET_ESCAPE",
    "TerminalOutput",
    "WEIGHT_ESCAPES",
    "detect_color_support",
    "stream_is_interactive",
    "style_escape",
    "use_surrogate_escapes",
]
