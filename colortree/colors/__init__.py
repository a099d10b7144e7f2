"""Color-rule parsing and per-entry style resolution.

Rules come from an ``LS_COLORS``-style string; resolution picks the ``di``
rule for directories and a four-byte extension key for everything else.
"""

from __future__ import annotations

from .resolve import DEFAULT_STYLE, extension_key, resolve_style
from .rules import (
    COLOR_CODES,
    DEFAULT_COLOR_ENV,
    DIRECTORY_KEY,
    Color,
    ColorRuleTable,
    StyleRule,
    Weight,
    load_color_rules,
    parse_color_rules,
)

__all__ = [
    "COLOR_CODES",
    "Color",
    "ColorRuleTable",
    "DEFAULT_COLOR_ENV",
    "DEFAULT_STYLE",
    "DIRECTORY_KEY",
    "StyleRule",
    "Weight",
    "extension_key",
    "load_color_rules",
    "parse_color_rules",
    "resolve_style",
]
