"""Extension discovery and line counting over uploaded archives."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from loc_counter.constants.archive_constants import TOP_FILE_LIMIT
from loc_counter.file_walker import DirectoryWalker
from loc_counter.models.archive import (
    ClassifiedFile,
    CountResult,
    ExtensionSummary,
    FileLineEntry,
    NoExtensionsSelectedError,
)
from loc_counter.services.extractor import extract_archive
from loc_counter.services.line_counter import count_lines_in_file
from loc_counter.services.workspace import workspace

logger = logging.getLogger(__name__)


def normalize_extensions(extensions: Iterable[str]) -> set[str]:
    """Lowercase the selected extensions, dropping blank values.

    Raises:
        NoExtensionsSelectedError: If nothing usable remains.
    """
    allowed = {ext.strip().lower() for ext in extensions if ext and ext.strip()}
    if not allowed:
        raise NoExtensionsSelectedError()
    return allowed


def _sorted_by_count(counts: dict[str, int]) -> dict[str, int]:
    # Descending by count; equal counts fall back to the extension itself.
    return dict(sorted(counts.items(), key=lambda item: (-item[1], item[0])))


def build_count_result(files: Iterable[ClassifiedFile], allowed: set[str]) -> CountResult:
    """Aggregate line counts for text files whose extension is in ``allowed``.

    Args:
        files: Classified files from a workspace walk.
        allowed: Lowercase extensions to include.

    Returns:
        CountResult with extension maps sorted by descending count and the
        top files sorted by descending line count, ties broken by path.
    """
    summaries: dict[str, ExtensionSummary] = {}
    entries: list[FileLineEntry] = []
    result = CountResult()

    for info in files:
        if info.extension not in allowed or info.is_binary:
            continue

        lines = count_lines_in_file(info.absolute_path)
        result.total_lines += lines
        result.total_files += 1

        summary = summaries.setdefault(info.extension, ExtensionSummary(extension=info.extension))
        summary.line_count += lines
        summary.file_count += 1

        entries.append(FileLineEntry(path=info.path, lines=lines))

    result.line_counts_by_ext = _sorted_by_count(
        {ext: summary.line_count for ext, summary in summaries.items()}
    )
    result.file_counts_by_ext = _sorted_by_count(
        {ext: summary.file_count for ext, summary in summaries.items()}
    )
    entries.sort(key=lambda entry: (-entry.lines, entry.path))
    result.top_files = entries[:TOP_FILE_LIMIT]
    return result


def scan_extensions_from_archive(data: bytes) -> list[str]:
    """Extract an archive and list the extensions of its text files.

    Args:
        data: Raw zip archive bytes.

    Returns:
        Sorted, deduplicated lowercase extensions.

    Raises:
        ArchiveError: If the archive is empty, too large, has no entries or
            contains unsafe paths.
    """
    with workspace() as root:
        extract_archive(data, root)
        walk_result = DirectoryWalker.walk(root)
        extensions = DirectoryWalker.scan_extensions(walk_result)

    summary = DirectoryWalker.get_summary(walk_result)
    logger.info(
        "Scanned %d files (%d binary), found %d extensions",
        summary["total_files"],
        summary["binary_files"],
        len(extensions),
    )
    return extensions


def count_lines_from_archive(data: bytes, selected_extensions: Iterable[str]) -> CountResult:
    """Extract an archive and count lines for the selected extensions.

    Args:
        data: Raw zip archive bytes.
        selected_extensions: Extensions to include, compared case-insensitively.

    Returns:
        The aggregated CountResult.

    Raises:
        ArchiveError: If no extension is selected or the archive is rejected.
    """
    allowed = normalize_extensions(selected_extensions)

    with workspace() as root:
        extract_archive(data, root)
        walk_result = DirectoryWalker.walk(root)
        result = build_count_result(walk_result.files, allowed)

    logger.info(
        "Counted %d lines across %d files for %s",
        result.total_lines,
        result.total_files,
        ", ".join(sorted(allowed)),
    )
    return result
