"""Route handlers for the API."""

from loc_counter.api.routes import archives, health

__all__ = [
    "archives",
    "health",
]
