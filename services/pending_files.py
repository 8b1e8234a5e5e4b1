"""
Pending file set.

Tracks the files physically written to upload storage for one in-flight
intake request so they can be removed as a unit on any abort branch.
"""

import logging
from pathlib import Path
from typing import Iterator, List

from services.intake_models import StoredFile

logger = logging.getLogger(__name__)


class PendingFileSet:
    """Files written for the current request, not yet owned by committed rows."""

    def __init__(self) -> None:
        self._files: List[StoredFile] = []
        self._released = False

    def add(self, stored: StoredFile) -> None:
        self._files.append(stored)

    def __iter__(self) -> Iterator[StoredFile]:
        return iter(self._files)

    def __len__(self) -> int:
        return len(self._files)

    @property
    def released(self) -> bool:
        return self._released

    def release(self) -> None:
        """Mark the files as owned by committed document rows."""
        self._released = True

    def discard(self) -> List[Path]:
        """
        Delete every tracked file, best-effort.

        Failures are logged and never raised so they cannot mask the error
        that triggered the cleanup. A released set is left untouched.

        Returns:
            Paths that could not be removed
        """
        if self._released:
            return []

        failed: List[Path] = []
        for stored in self._files:
            try:
                stored.path.unlink(missing_ok=True)
            except OSError as e:
                logger.error(f"Failed to delete pending upload {stored.path}: {e}")
                failed.append(stored.path)
            else:
                logger.debug(f"Deleted pending upload {stored.path}")
        self._files = [stored for stored in self._files if stored.path in failed]
        return failed
