"""
Candidate intake service.

Turns a raw payload plus the files already written to upload storage into
either one committed candidate aggregate with matching document rows, or no
database change and no retained files.

Files are written before the database transaction because their generated
name and size are part of the document rows. Storage cannot roll back with
the store, so every abort branch (validation, conflict, persistence error)
runs the same compensating cleanup of the pending file set.
"""

import logging
from typing import Any

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session

from models.candidate import Candidate
from models.document import Document, RESUME_DOCUMENT_TYPE
from models.education import Education
from models.experience import Experience
from repositories.candidate_repository import CandidateRepository
from services.candidate_validator import validate_candidate, clean_candidate
from services.exceptions import ValidationFailed, ConflictExists, PersistenceFailed
from services.intake_models import CandidateInput
from services.pending_files import PendingFileSet

logger = logging.getLogger(__name__)


class CandidateIntakeService:
    """
    Orchestrates validate -> precheck -> atomic write -> link documents.

    The database session is injected so the service can run against any
    store, including a throwaway SQLite database in tests.
    """

    def __init__(self, db_session: Session):
        self.db = db_session
        self.candidates = CandidateRepository(db_session)

    def create_candidate(self, payload: Any, files: PendingFileSet) -> Candidate:
        """
        Create a candidate aggregate from a submission.

        Args:
            payload: Decoded candidate JSON (camelCase keys)
            files: Files already stored for this request

        Returns:
            The committed candidate with educations, experiences and
            documents loaded

        Raises:
            ValidationFailed: payload violates field rules
            ConflictExists: email already registered (precheck or insert time)
            PersistenceFailed: any other store error
        """
        try:
            data = self._validate(payload)
            self._precheck(data.email)
            candidate_id = self._persist(data, files)
        except Exception:
            failed = files.discard()
            if failed:
                logger.error(f"Cleanup left {len(failed)} upload(s) behind: {[str(p) for p in failed]}")
            raise

        # Committed: the files now belong to document rows and must survive any later failure
        files.release()
        try:
            candidate = self.candidates.get_with_relations(candidate_id)
        except SQLAlchemyError as e:
            logger.exception(f"Candidate {candidate_id} was stored but could not be read back")
            raise PersistenceFailed("Candidate could not be loaded") from e
        logger.info(
            f"Created candidate {candidate.id} with {len(candidate.educations)} education, "
            f"{len(candidate.experiences)} experience and {len(candidate.documents)} document rows"
        )
        return candidate

    def _validate(self, payload: Any) -> CandidateInput:
        errors = validate_candidate(payload)
        if errors:
            logger.info(f"Rejected candidate submission: {sorted(errors)}")
            raise ValidationFailed(errors)
        return clean_candidate(payload)

    def _precheck(self, email: str) -> None:
        # Advisory only: the unique constraint on email is authoritative
        try:
            taken = self.candidates.exists_by_email(email)
        except SQLAlchemyError as e:
            logger.exception("Database error during email precheck")
            raise PersistenceFailed("Candidate could not be stored") from e
        if taken:
            logger.info(f"Duplicate candidate email rejected at precheck: {email}")
            raise ConflictExists(email)

    def _persist(self, data: CandidateInput, files: PendingFileSet) -> int:
        candidate = build_aggregate(data, files)
        try:
            return self.candidates.create_aggregate(candidate)
        except IntegrityError as e:
            # Lost the check-then-act race: same outcome as the precheck
            try:
                taken = self.candidates.exists_by_email(data.email)
            except SQLAlchemyError as lookup_error:
                logger.exception(f"Could not classify integrity error: email lookup failed ({lookup_error})")
                raise PersistenceFailed("Candidate could not be stored") from e
            if taken:
                logger.warning(f"Duplicate candidate email rejected at insert: {data.email}")
                raise ConflictExists(data.email) from e
            logger.exception("Integrity error while creating candidate")
            raise PersistenceFailed("Candidate could not be stored") from e
        except SQLAlchemyError as e:
            logger.exception("Database error while creating candidate")
            raise PersistenceFailed("Candidate could not be stored") from e


def build_aggregate(data: CandidateInput, files: PendingFileSet) -> Candidate:
    """Unsaved candidate with every child row attached."""
    candidate = Candidate(
        first_name=data.first_name,
        last_name=data.last_name,
        email=data.email,
        phone=data.phone,
        address=data.address,
        linked_in=data.linked_in,
        portfolio=data.portfolio,
    )
    candidate.educations = [Education(**education.model_dump()) for education in data.educations]
    candidate.experiences = [Experience(**experience.model_dump()) for experience in data.experiences]
    candidate.documents = [
        Document(
            file_name=stored.file_name,
            original_name=stored.original_name,
            file_type=stored.media_type,
            file_size=stored.size,
            document_type=RESUME_DOCUMENT_TYPE,
        )
        for stored in files
    ]
    return candidate
