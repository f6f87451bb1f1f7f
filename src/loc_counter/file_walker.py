"""File walker for extracted archive workspaces.

This module walks a workspace directory and classifies every regular file
by extension and by whether its content looks binary.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from loc_counter.constants.archive_constants import BINARY_SNIFF_LENGTH
from loc_counter.models.archive import ClassifiedFile

logger = logging.getLogger(__name__)


def get_extension(name: str) -> str:
    """Return the lowercase extension of a file name, including the dot.

    The extension runs from the last dot to the end of the name. A dot in the
    first position never starts one, so ``.gitignore`` has none while
    ``..foo`` has ``.foo``.

    Args:
        name: File name or path.

    Returns:
        The extension such as ``".py"``, or an empty string.
    """
    base = os.path.basename(name)
    index = base.rfind(".")
    if index <= 0 or base == "..":
        return ""
    return base[index:].lower()


def is_binary_file(path: Path) -> bool:
    """Check whether a file's leading bytes contain a null byte.

    Unreadable files are reported as binary so they are skipped rather than
    aborting the walk.
    """
    try:
        with path.open("rb") as handle:
            prefix = handle.read(BINARY_SNIFF_LENGTH)
    except OSError:
        logger.debug("Could not read %s; treating as binary", path, exc_info=True)
        return True
    return b"\x00" in prefix


@dataclass
class WalkResult:
    """Result of walking a workspace tree.

    Attributes:
        root: Root directory that was walked.
        files: Classified files, ordered by relative path.
    """

    root: Path
    files: list[ClassifiedFile] = field(default_factory=list)

    @property
    def text_files(self) -> list[ClassifiedFile]:
        return [info for info in self.files if not info.is_binary]


class DirectoryWalker:
    """Walk extracted archive directories and classify their files."""

    @staticmethod
    def walk(directory: Path | str) -> WalkResult:
        """Walk a directory and classify every regular file beneath it.

        Files are returned sorted by relative path so later aggregation does
        not depend on filesystem enumeration order.

        Args:
            directory: Path to the directory to walk.

        Returns:
            WalkResult containing all classified files.

        Raises:
            ValueError: If directory doesn't exist or is not a directory.
        """
        root = Path(directory)
        if not root.exists() or not root.is_dir():
            raise ValueError(f"Invalid directory: {directory}")

        result = WalkResult(root=root)

        for file_path in root.rglob("*"):
            if file_path.is_symlink() or not file_path.is_file():
                continue

            rel_path = file_path.relative_to(root).as_posix()
            result.files.append(
                ClassifiedFile(
                    path=rel_path,
                    absolute_path=file_path,
                    extension=get_extension(file_path.name),
                    is_binary=is_binary_file(file_path),
                )
            )

        result.files.sort(key=lambda info: info.path)
        return result

    @staticmethod
    def scan_extensions(result: WalkResult) -> list[str]:
        """Return the sorted, deduplicated extensions of the text files in ``result``.

        Files without an extension are left out.
        """
        return sorted({info.extension for info in result.text_files if info.extension})

    @staticmethod
    def get_summary(result: WalkResult) -> dict[str, int]:
        """Get a summary dictionary from walk result.

        Args:
            result: WalkResult to summarize.

        Returns:
            Dictionary with total, text and binary file counts.
        """
        text_count = len(result.text_files)
        return {
            "total_files": len(result.files),
            "text_files": text_count,
            "binary_files": len(result.files) - text_count,
        }
