"""Data models and type definitions"""

from loc_counter.models.archive import (
    ArchiveEntry,
    ArchiveError,
    ArchiveTooLargeError,
    ClassifiedFile,
    CountResult,
    EmptyArchiveError,
    ExtensionSummary,
    FileLineEntry,
    NoEntriesError,
    NoExtensionsSelectedError,
    UnsafePathError,
)

__all__ = [
    "ArchiveEntry",
    "ArchiveError",
    "ArchiveTooLargeError",
    "ClassifiedFile",
    "CountResult",
    "EmptyArchiveError",
    "ExtensionSummary",
    "FileLineEntry",
    "NoEntriesError",
    "NoExtensionsSelectedError",
    "UnsafePathError",
]
