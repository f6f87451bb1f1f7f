"""Safe extraction of uploaded zip archives into a workspace."""

from __future__ import annotations

import io
import logging
import posixpath
import shutil
from pathlib import Path, PureWindowsPath
from zipfile import ZipFile, ZipInfo

from loc_counter.constants.archive_constants import MAX_ARCHIVE_BYTES
from loc_counter.models.archive import (
    ArchiveEntry,
    ArchiveTooLargeError,
    EmptyArchiveError,
    NoEntriesError,
    UnsafePathError,
)

logger = logging.getLogger(__name__)

_COPY_CHUNK_SIZE = 1024 * 1024


def ensure_archive_size(size: int) -> None:
    """Reject empty or oversized uploads before any decompression work.

    Args:
        size: Size of the upload in bytes.

    Raises:
        EmptyArchiveError: If the upload is zero bytes.
        ArchiveTooLargeError: If the upload exceeds the size ceiling.
    """
    if size == 0:
        raise EmptyArchiveError()
    if size > MAX_ARCHIVE_BYTES:
        raise ArchiveTooLargeError()


def normalize_entry_path(name: str) -> str:
    """Normalize an archive entry name into a safe relative POSIX path.

    Backslashes are treated as separators and inner ``.``/``..`` segments are
    collapsed. The result must stay relative and must not climb above the
    archive root.

    Args:
        name: Entry name as stored in the archive.

    Returns:
        The normalized relative path, without a trailing slash.

    Raises:
        UnsafePathError: If the path is empty, ``.``, absolute, or escapes upward.
    """
    candidate = name.replace("\\", "/")
    if not candidate or PureWindowsPath(candidate).drive:
        raise UnsafePathError()

    normalized = posixpath.normpath(candidate)
    if (
        normalized == "."
        or normalized == ".."
        or normalized.startswith("../")
        or posixpath.isabs(normalized)
    ):
        raise UnsafePathError()
    return normalized


def resolve_within(root: Path, relative: str) -> Path:
    """Join ``relative`` onto ``root`` and confirm it stays strictly inside.

    Raises:
        UnsafePathError: If the resolved path is the root itself or lies outside it.
    """
    resolved_root = root.resolve()
    output_path = (resolved_root / relative).resolve()
    if output_path == resolved_root or not output_path.is_relative_to(resolved_root):
        raise UnsafePathError()
    return output_path


def to_archive_entry(info: ZipInfo) -> ArchiveEntry:
    """Build a validated ArchiveEntry from a zip member.

    Raises:
        UnsafePathError: If the member path is unsafe.
    """
    return ArchiveEntry(
        path=normalize_entry_path(info.filename),
        is_directory=info.is_dir(),
        size=0 if info.is_dir() else info.file_size,
    )


def extract_archive(data: bytes, root: Path) -> int:
    """Unpack every entry of a zip archive into ``root``.

    Entry payloads are copied verbatim. Nothing is interpreted here;
    classification happens after extraction.

    Args:
        data: Raw archive bytes.
        root: Existing, empty workspace directory.

    Returns:
        Number of regular files written.

    Raises:
        EmptyArchiveError: If ``data`` is empty.
        ArchiveTooLargeError: If ``data`` exceeds the size ceiling.
        NoEntriesError: If the archive holds no entries.
        UnsafePathError: If any entry would land outside ``root``.
        zipfile.BadZipFile: If the bytes are not a readable zip archive.
    """
    ensure_archive_size(len(data))

    written = 0
    total_bytes = 0
    with ZipFile(io.BytesIO(data)) as archive:
        infos = archive.infolist()
        if not infos:
            raise NoEntriesError()

        for info in infos:
            entry = to_archive_entry(info)
            output_path = resolve_within(root, entry.path)

            if entry.is_directory:
                output_path.mkdir(parents=True, exist_ok=True)
                continue

            output_path.parent.mkdir(parents=True, exist_ok=True)
            with archive.open(info) as source, output_path.open("wb") as destination:
                shutil.copyfileobj(source, destination, _COPY_CHUNK_SIZE)
            written += 1
            total_bytes += entry.size

    logger.debug("Extracted %d files (%d bytes) into %s", written, total_bytes, root)
    return written
