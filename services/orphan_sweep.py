"""
Reconciliation sweep for orphaned uploads.

A request that dies between writing its files and reaching commit or
cleanup leaves files that no document row references. This sweep finds
and removes them once they are older than a grace period, so files of
requests still in flight are never touched.
"""

import logging
import time
from pathlib import Path
from typing import List, Optional

from sqlmodel import Session

from repositories.document_repository import DocumentRepository

logger = logging.getLogger(__name__)


def find_orphan_uploads(
    db_session: Session,
    directory: Path,
    grace_seconds: int,
    now: Optional[float] = None,
) -> List[Path]:
    """
    List unreferenced upload files older than the grace period.

    Args:
        db_session: Database session
        directory: Upload directory
        grace_seconds: Minimum age (by modification time) before a file counts
        now: Current epoch time, for tests

    Returns:
        Sorted list of orphaned file paths
    """
    directory = Path(directory)
    if not directory.is_dir():
        return []

    now = time.time() if now is None else now
    referenced = DocumentRepository(db_session).get_referenced_file_names()

    orphans = []
    for path in directory.iterdir():
        if not path.is_file() or path.name in referenced:
            continue
        if now - path.stat().st_mtime < grace_seconds:
            continue
        orphans.append(path)
    return sorted(orphans)


def sweep_orphan_uploads(
    db_session: Session,
    directory: Path,
    grace_seconds: int,
    dry_run: bool = False,
    now: Optional[float] = None,
) -> List[Path]:
    """
    Delete orphaned uploads.

    Returns:
        Paths that were deleted (or would be, in dry-run mode)
    """
    orphans = find_orphan_uploads(db_session, directory, grace_seconds, now=now)
    if dry_run:
        return orphans

    deleted = []
    for path in orphans:
        try:
            path.unlink()
        except FileNotFoundError:
            continue
        except OSError as e:
            logger.error(f"Failed to delete orphaned upload {path}: {e}")
            continue
        logger.info(f"Deleted orphaned upload {path}")
        deleted.append(path)
    return deleted
