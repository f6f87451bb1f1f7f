from __future__ import annotations

from loc_counter.constants.archive_constants import (
    BINARY_SNIFF_LENGTH,
    MAX_ARCHIVE_BYTES,
    TOP_FILE_LIMIT,
    UPLOAD_CHUNK_SIZE,
    WORKSPACE_PREFIX,
)

__all__ = [
    "BINARY_SNIFF_LENGTH",
    "MAX_ARCHIVE_BYTES",
    "TOP_FILE_LIMIT",
    "UPLOAD_CHUNK_SIZE",
    "WORKSPACE_PREFIX",
]
