"""Per-request temporary workspaces for archive extraction."""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from loc_counter.constants.archive_constants import WORKSPACE_PREFIX

logger = logging.getLogger(__name__)


def get_workspace_root() -> Path | None:
    """Return the parent directory for workspaces, or None for the system default."""
    env_root = os.getenv("LOC_COUNTER_TEMP_DIR")
    if not env_root:
        return None
    root = Path(env_root).expanduser().resolve()
    root.mkdir(parents=True, exist_ok=True)
    return root


def remove_workspace(path: Path) -> None:
    """Recursively delete a workspace, logging instead of raising on failure."""
    try:
        shutil.rmtree(path)
    except FileNotFoundError:
        return
    except OSError:
        logger.warning("Failed to remove workspace %s", path, exc_info=True)


@contextmanager
def workspace() -> Iterator[Path]:
    """Create a uniquely named temporary directory and always remove it.

    The directory name comes from ``tempfile.mkdtemp``, which picks a random
    suffix and creates the directory exclusively, so concurrent requests never
    share a workspace.

    Yields:
        Absolute, resolved path to the new workspace directory.
    """
    path = Path(tempfile.mkdtemp(prefix=WORKSPACE_PREFIX, dir=get_workspace_root())).resolve()
    logger.debug("Created workspace %s", path)
    try:
        yield path
    finally:
        remove_workspace(path)
        logger.debug("Removed workspace %s", path)
