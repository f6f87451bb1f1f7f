"""Fixed policy limits for archive ingestion and line counting."""

from __future__ import annotations

# 200 MiB ceiling on the uploaded archive, checked before decompression
MAX_ARCHIVE_BYTES: int = 200 * 1024 * 1024

# Prefix sampled when deciding whether a file is binary
BINARY_SNIFF_LENGTH: int = 2048

# Maximum number of entries reported in the top files ranking
TOP_FILE_LIMIT: int = 200

WORKSPACE_PREFIX: str = "loc-counter-"

UPLOAD_CHUNK_SIZE: int = 1024 * 1024
