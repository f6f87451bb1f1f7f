"""Data models for archive ingestion and line counting."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


class ArchiveError(Exception):
    """Raised when an uploaded archive cannot be analyzed because of caller input.

    The message is safe to show to the caller verbatim.
    """

    default_message = "Archive could not be processed."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class EmptyArchiveError(ArchiveError):
    """Raised for a zero-byte upload."""

    default_message = "Uploaded archive is empty."


class ArchiveTooLargeError(ArchiveError):
    """Raised when the upload exceeds the size ceiling."""

    default_message = "Archive exceeds the 200MB limit."


class NoEntriesError(ArchiveError):
    """Raised when the archive parses but contains no entries."""

    default_message = "Archive does not contain any files."


class UnsafePathError(ArchiveError):
    """Raised when an entry path would escape the workspace."""

    default_message = "Archive contains unsafe paths."


class NoExtensionsSelectedError(ArchiveError):
    """Raised when a count is requested with an empty extension selection."""

    default_message = "At least one extension must be selected."


@dataclass(slots=True)
class ArchiveEntry:
    """A single record read from the uploaded archive.

    Attributes:
        path: Normalized relative path using forward slashes.
        is_directory: Whether the entry denotes a directory.
        size: Uncompressed payload size in bytes (0 for directories).
    """

    path: str
    is_directory: bool
    size: int = 0


@dataclass(slots=True)
class ClassifiedFile:
    """A regular file found inside a workspace.

    Attributes:
        path: Relative path from the workspace root, forward-slash separated.
        absolute_path: Absolute path to the file on disk.
        extension: Lowercase extension including the leading dot, or "".
        is_binary: Whether the sampled prefix contains a null byte.
    """

    path: str
    absolute_path: Path
    extension: str
    is_binary: bool


@dataclass(slots=True)
class ExtensionSummary:
    """Aggregate counts for one extension."""

    extension: str
    line_count: int = 0
    file_count: int = 0


@dataclass(slots=True)
class FileLineEntry:
    path: str
    lines: int


@dataclass(slots=True)
class CountResult:
    """Final line count report for an archive.

    Attributes:
        total_files: Number of text files with a selected extension.
        total_lines: Sum of line counts over those files.
        line_counts_by_ext: Extension to line count, descending by count.
        file_counts_by_ext: Extension to file count, descending by count.
        top_files: Largest files by line count, capped in length.
    """

    total_files: int = 0
    total_lines: int = 0
    line_counts_by_ext: dict[str, int] = field(default_factory=dict)
    file_counts_by_ext: dict[str, int] = field(default_factory=dict)
    top_files: list[FileLineEntry] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly representation of the report."""
        return {
            "total_files": self.total_files,
            "total_lines": self.total_lines,
            "line_counts_by_ext": dict(self.line_counts_by_ext),
            "file_counts_by_ext": dict(self.file_counts_by_ext),
            "top_files": [{"path": entry.path, "lines": entry.lines} for entry in self.top_files],
        }
