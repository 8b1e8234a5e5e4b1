"""
Unit tests for the orphaned upload sweep.

Run: pytest tests/unit/test_orphan_sweep.py -v
"""

import os
import time

from services.candidate_intake_service import CandidateIntakeService
from services.orphan_sweep import find_orphan_uploads, sweep_orphan_uploads
from services.pending_files import PendingFileSet

GRACE = 3600


def _age(path, seconds):
    old = time.time() - seconds
    os.utime(path, (old, old))


def _pending(stored):
    pending = PendingFileSet()
    pending.add(stored)
    return pending


class TestOrphanSweep:

    def test_only_old_unreferenced_files_are_orphans(
        self, db_session, upload_dir, payload_factory, stored_file_factory
    ):
        owned = stored_file_factory("resume-1-owned.pdf")
        CandidateIntakeService(db_session).create_candidate(payload_factory(), _pending(owned))
        _age(owned.path, GRACE * 2)

        stale = stored_file_factory("resume-2-stale.pdf")
        _age(stale.path, GRACE * 2)
        stored_file_factory("resume-3-fresh.pdf")

        assert find_orphan_uploads(db_session, upload_dir, GRACE) == [stale.path]

    def test_sweep_deletes_orphans(self, db_session, upload_dir, stored_file_factory):
        stale = stored_file_factory("resume-2-stale.pdf")
        _age(stale.path, GRACE * 2)

        deleted = sweep_orphan_uploads(db_session, upload_dir, GRACE)

        assert deleted == [stale.path]
        assert not stale.path.exists()

    def test_dry_run_keeps_files(self, db_session, upload_dir, stored_file_factory):
        stale = stored_file_factory("resume-2-stale.pdf")
        _age(stale.path, GRACE * 2)

        listed = sweep_orphan_uploads(db_session, upload_dir, GRACE, dry_run=True)

        assert listed == [stale.path]
        assert stale.path.exists()

    def test_missing_directory(self, db_session, tmp_path):
        assert find_orphan_uploads(db_session, tmp_path / "absent", GRACE) == []

    def test_explicit_now(self, db_session, upload_dir, stored_file_factory):
        stored = stored_file_factory("resume-4-x.pdf")
        mtime = stored.path.stat().st_mtime

        assert find_orphan_uploads(db_session, upload_dir, GRACE, now=mtime + GRACE - 1) == []
        assert find_orphan_uploads(db_session, upload_dir, GRACE, now=mtime + GRACE + 1) == [stored.path]
