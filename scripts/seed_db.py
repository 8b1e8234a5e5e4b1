"""Seed script to insert a sample candidate through the intake service.

Creates tables if missing, then submits one candidate with an education
and an experience entry. Re-running reports the duplicate email instead
of inserting twice.

Usage:
  python scripts/seed_db.py
  python scripts/seed_db.py --dry-run
"""
import argparse
import json
import sys
from pathlib import Path

# When running the script directly (e.g. `python scripts/seed_db.py`),
# ensure the repository root is on `sys.path` so local package imports
# like `config.settings` resolve correctly without setting `PYTHONPATH`.
project_root = Path(__file__).resolve().parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from sqlmodel import Session

from services import CandidateIntakeService, ConflictExists, ValidationFailed, PendingFileSet
from utils.database import get_engine, init_db


SAMPLE_CANDIDATE = {
    "firstName": "Miguel",
    "lastName": "Santos",
    "email": "miguel.santos@example.com",
    "phone": "+34 612 345678",
    "address": "Calle Mayor 1, Madrid",
    "linkedIn": "https://www.linkedin.com/in/miguel-santos",
    "educations": [
        {
            "institution": "Universidad Politécnica de Madrid",
            "degree": "MSc",
            "fieldOfStudy": "Computer Science",
            "startDate": "2012-09-01",
            "endDate": "2014-06-30",
            "current": False,
        }
    ],
    "experiences": [
        {
            "company": "Acme Health Analytics",
            "position": "Senior Data Platform Engineer",
            "startDate": "2018-02-01",
            "current": True,
            "description": "Data pipelines for hospital billing and compliance reporting.",
        }
    ],
}


def seed(dry_run: bool = False) -> bool:
    if dry_run:
        print("DRY RUN: would seed the following candidate:")
        print(json.dumps(SAMPLE_CANDIDATE, indent=2, ensure_ascii=False))
        return True

    engine = get_engine()
    # ensure tables exist for local/dev seeding
    init_db(engine)

    with Session(engine) as db:
        service = CandidateIntakeService(db)
        try:
            candidate = service.create_candidate(SAMPLE_CANDIDATE, PendingFileSet())
        except ConflictExists as e:
            print(f"Skipped: {e}")
            return True
        except ValidationFailed as e:
            print(f"ERROR: sample candidate is invalid: {e.errors}", file=sys.stderr)
            return False

    print(f"Seeded candidate id={candidate.id} email={candidate.email}")
    return True


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed a sample candidate")
    parser.add_argument("--dry-run", action="store_true", help="Print the payload without writing")
    args = parser.parse_args()
    sys.exit(0 if seed(dry_run=args.dry_run) else 1)
