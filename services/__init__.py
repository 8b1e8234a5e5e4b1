"""
Services module - Business Logic Layer.

Contains application services that orchestrate business logic,
sitting between the API layer (routes) and the data layer (repositories).

Services handle:
- Field validation of candidate submissions
- Uniqueness prechecks
- Transaction management for the candidate aggregate
- Cleanup of uploaded files when a submission is rejected

Usage:
    from services import CandidateIntakeService

    service = CandidateIntakeService(db_session)
    candidate = service.create_candidate(payload, pending_files)
"""

from services.candidate_intake_service import CandidateIntakeService
from services.candidate_validator import validate_candidate, clean_candidate
from services.exceptions import (
    CandidateIntakeError,
    ValidationFailed,
    ConflictExists,
    PersistenceFailed,
    FileRejected,
)
from services.pending_files import PendingFileSet

__all__ = [
    "CandidateIntakeService",
    "validate_candidate",
    "clean_candidate",
    "CandidateIntakeError",
    "ValidationFailed",
    "ConflictExists",
    "PersistenceFailed",
    "FileRejected",
    "PendingFileSet",
]
