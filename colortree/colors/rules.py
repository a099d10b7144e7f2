"""Parse ``LS_COLORS``-style specifications into a style lookup table.

The specification is a colon-separated list of ``key=weight;color`` segments.
Keys are either two-letter type markers (``di`` for directories) or file
extension globs such as ``*.txt``; the leading ``*`` is dropped, globs are not
matched. Malformed segments are skipped silently.
"""

from __future__ import annotations

import enum
import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_COLOR_ENV = "LS_COLORS"
DIRECTORY_KEY = "di"
U8_MAX = 255
SGR_BOLD = 1


class Weight(enum.Enum):
    NORMAL = "normal"
    BOLD = "bold"


class Color(enum.Enum):
    DEFAULT = "default"
    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"


# 33 and 96 alias onto the closest entries of the 8-color palette.
COLOR_CODES: dict[int, Color] = {
    31: Color.RED,
    32: Color.GREEN,
    33: Color.RED,
    34: Color.BLUE,
    35: Color.MAGENTA,
    36: Color.CYAN,
    37: Color.WHITE,
    38: Color.CYAN,
    96: Color.BLUE,
}


@dataclass(frozen=True)
class StyleRule:
    """Display style for an entry name: font weight plus foreground color."""

    weight: Weight = Weight.NORMAL
    color: Color = Color.DEFAULT


ColorRuleTable = Mapping[str, StyleRule]


def _parse_weight(field: str) -> Weight:
    # The literal "0" selects bold, as does SGR 1 with any zero padding ("01").
    if field == "0":
        return Weight.BOLD
    if field.isascii() and field.isdigit() and int(field) == SGR_BOLD:
        return Weight.BOLD
    return Weight.NORMAL


def _parse_color(field: str) -> Color | None:
    """Map a numeric SGR color code to a palette color.

    Returns ``None`` when ``field`` is not an unsigned 8-bit integer. Numeric
    codes without a palette entry fall back to white.
    """
    if not field.isascii() or not field.isdigit():
        return None
    code = int(field)
    if code > U8_MAX:
        return None
    return COLOR_CODES.get(code, Color.WHITE)


def _normalize_key(key: str) -> str:
    return key[1:] if key.startswith("*") else key


def parse_color_rules(spec: str) -> dict[str, StyleRule]:
    """Parse a color specification string into a key -> style mapping.

    Later segments overwrite earlier ones for the same key.
    """
    table: dict[str, StyleRule] = {}
    for segment in spec.split(":"):
        key_value = segment.split("=")
        if len(key_value) != 2:
            if segment:
                logger.debug("skipping color rule without a single '=': %r", segment)
            continue
        raw_key, raw_value = key_value
        if not raw_key:
            logger.debug("skipping color rule with empty key: %r", segment)
            continue

        fields = raw_value.split(";")
        if len(fields) < 2:
            logger.debug("skipping color rule with fewer than two fields: %r", segment)
            continue
        color = _parse_color(fields[1])
        if color is None:
            logger.debug("skipping color rule with non-numeric color: %r", segment)
            continue

        table[_normalize_key(raw_key)] = StyleRule(weight=_parse_weight(fields[0]), color=color)
    return table


def load_color_rules(
    env_name: str = DEFAULT_COLOR_ENV,
    environ: Mapping[str, str] | None = None,
) -> dict[str, StyleRule]:
    """Read ``env_name`` from the environment and parse it.

    An unset variable yields an empty table, which resolves every entry to the
    default style.
    """
    source = os.environ if environ is None else environ
    spec = source.get(env_name)
    if spec is None:
        logger.debug("%s is not set; colors fall back to defaults", env_name)
        return {}
    return parse_color_rules(spec)


__all__ = [
    "COLOR_CODES",
    "Color",
    "ColorRuleTable",
    "DEFAULT_COLOR_ENV",
    "DIRECTORY_KEY",
    "StyleRule",
    "Weight",
    "load_color_rules",
    "parse_color_rules",
]
