"""Depth-limited recursive tree rendering.

Each frame lists one directory, writes one row per visible child with
``├── ``/``└── `` branch glyphs, and recurses into subdirectories with the
matching continuation prefix. A single :class:`Counter` is shared by the whole
walk. Directories that cannot be opened are reported on the error stream and
skipped; the rest of the tree is still rendered.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from ..colors.resolve import resolve_style
from ..colors.rules import ColorRuleTable
from ..terminal import TerminalOutput
from .fs import list_entries
from .types import Counter

logger = logging.getLogger(__name__)

BRANCH_MIDDLE = "├── "
BRANCH_LAST = "└── "
CONTINUE_MIDDLE = "│   "
CONTINUE_LAST = "    "


def branch_glyphs(is_last: bool) -> tuple[str, str]:
    """Return ``(branch, continuation)`` for a sibling position."""
    if is_last:
        return BRANCH_LAST, CONTINUE_LAST
    return BRANCH_MIDDLE, CONTINUE_MIDDLE


def render(
    directory: str | Path,
    prefix: str,
    depth_remaining: int,
    counter: Counter,
    output: TerminalOutput,
    table: ColorRuleTable,
) -> None:
    """Write the subtree below ``directory`` and tally its entries into ``counter``."""
    if depth_remaining <= 0:
        return

    entries, scan_error = list_entries(directory)
    if scan_error is not None:
        logger.debug("cannot open %s: %s", directory, scan_error)
        output.write_error(f'cannot open directory "{directory}"\n')
        return

    last_index = len(entries) - 1
    for idx, entry in enumerate(entries):
        branch, continuation = branch_glyphs(idx == last_index)
        output.write(prefix + branch)
        output.set_style(resolve_style(entry.name, entry.kind, table))
        output.write(entry.name)
        output.reset_style()
        output.write("\n")

        if entry.is_dir:
            counter.dirs += 1
            render(
                os.path.join(directory, entry.name),
                prefix + continuation,
                depth_remaining - 1,
                counter,
                output,
                table,
            )
        else:
            counter.files += 1


__all__ = [
    "BRANCH_LAST",
    "BRANCH_MIDDLE",
    "CONTINUE_LAST",
    "CONTINUE_MIDDLE",
    "branch_glyphs",
    "render",
]
