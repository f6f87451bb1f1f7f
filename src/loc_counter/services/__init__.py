"""Services"""

from loc_counter.services.archive_analysis import (
    build_count_result,
    count_lines_from_archive,
    normalize_extensions,
    scan_extensions_from_archive,
)
from loc_counter.services.extractor import extract_archive, normalize_entry_path
from loc_counter.services.line_counter import count_lines_in_file, count_lines_in_text

__all__ = [
    "build_count_result",
    "count_lines_from_archive",
    "count_lines_in_file",
    "count_lines_in_text",
    "extract_archive",
    "normalize_entry_path",
    "normalize_extensions",
    "scan_extensions_from_archive",
]
