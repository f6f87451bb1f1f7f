"""Line counting for text files."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def count_lines_in_text(content: str) -> int:
    """Count lines as the number of ``\\n`` terminators plus one.

    Empty content has zero lines. A trailing newline is not special-cased,
    so ``"a\\n"`` counts as two lines.
    """
    if not content:
        return 0
    return content.count("\n") + 1


def count_lines_in_file(path: Path) -> int:
    """Read a file as UTF-8 text and count its lines.

    Undecodable bytes are replaced rather than rejected. A file that cannot be
    read counts as zero lines.
    """
    try:
        with path.open(encoding="utf-8", errors="replace", newline="") as handle:
            content = handle.read()
    except OSError:
        logger.debug("Could not read %s; counting zero lines", path, exc_info=True)
        return 0
    return count_lines_in_text(content)
