"""Utility functions and helpers"""

from loc_counter.utils.display import display_count_result, display_extensions
from loc_counter.utils.logging_utils import configure_logging

__all__ = [
    "configure_logging",
    "display_count_result",
    "display_extensions",
]
