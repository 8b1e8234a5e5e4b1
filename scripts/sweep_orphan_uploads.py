"""Delete uploaded files that no document row references.

Files younger than the grace period are kept because they may belong to a
request that has not finished yet.

Usage:
  python scripts/sweep_orphan_uploads.py --dry-run
  python scripts/sweep_orphan_uploads.py --grace-seconds 7200
"""
import argparse
import logging
import sys
from pathlib import Path

# When running the script directly (e.g. `python scripts/sweep_orphan_uploads.py`),
# ensure the repository root is on `sys.path` so local package imports
# like `config.settings` resolve correctly without setting `PYTHONPATH`.
project_root = Path(__file__).resolve().parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from sqlmodel import Session

from config.settings import settings
from services.orphan_sweep import sweep_orphan_uploads
from utils.database import get_engine


def main() -> int:
    parser = argparse.ArgumentParser(description="Remove orphaned candidate uploads")
    parser.add_argument("--dry-run", action="store_true", help="Only list the files that would be deleted")
    parser.add_argument("--grace-seconds", type=int, default=settings.ORPHAN_GRACE_SECONDS,
                        help="Minimum file age before it may be deleted")
    parser.add_argument("--upload-dir", default=settings.UPLOAD_DIR, help="Upload directory to sweep")
    args = parser.parse_args()

    logging.basicConfig(level=settings.LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    with Session(get_engine()) as db:
        paths = sweep_orphan_uploads(db, Path(args.upload_dir), args.grace_seconds, dry_run=args.dry_run)

    verb = "Would delete" if args.dry_run else "Deleted"
    for path in paths:
        print(f"{verb}: {path}")
    print(f"{verb} {len(paths)} orphaned upload(s)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
