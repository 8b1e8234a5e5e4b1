"""
Candidate repository for candidate persistence.

Owns the atomic write of a candidate aggregate (candidate, education,
experience and document rows) and the read projections over it.
"""

from typing import List, Optional, Tuple
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import selectinload
from sqlmodel import Session, select, col

from models.candidate import Candidate
from repositories.base_repository import BaseRepository


AGGREGATE_LOADERS = (
    selectinload(Candidate.educations),
    selectinload(Candidate.experiences),
    selectinload(Candidate.documents),
)


class CandidateRepository(BaseRepository[Candidate]):
    """Repository for managing candidates and their child records."""

    def __init__(self, db_session: Session):
        super().__init__(db_session, Candidate)

    def get_by_email(self, email: str) -> Optional[Candidate]:
        """
        Find candidate by normalized email.

        Args:
            email: Lower-cased email

        Returns:
            Candidate or None
        """
        if not email:
            return None
        query = select(Candidate).where(Candidate.email == email)
        return self.db.exec(query).first()

    def exists_by_email(self, email: str) -> bool:
        """Read-only existence check by identity key. Advisory only."""
        query = select(Candidate.id).where(Candidate.email == email)
        return self.db.exec(query).first() is not None

    def get_with_relations(self, candidate_id: int) -> Optional[Candidate]:
        """
        Get a candidate with education, experience and documents loaded.

        Args:
            candidate_id: The candidate ID

        Returns:
            Candidate if found, None otherwise
        """
        query = select(Candidate).where(Candidate.id == candidate_id).options(*AGGREGATE_LOADERS)
        return self.db.exec(query).first()

    def get_paginated(self, page: int = 1, limit: int = 10) -> Tuple[List[Candidate], int]:
        """
        Get paginated candidates, newest first, with children loaded.

        Returns:
            Tuple of (candidates, total_count)
        """
        return self.get_page(
            page,
            limit,
            *AGGREGATE_LOADERS,
            order_by=(col(Candidate.created_at).desc(), col(Candidate.id).desc()),
        )

    def create_aggregate(self, candidate: Candidate) -> int:
        """
        Insert a candidate together with the children attached to it.

        Education, experience and document rows must already be attached
        through the relationship lists. Everything is flushed and committed
        in one transaction; on any store error the transaction is rolled
        back and the error re-raised, so no partial rows survive.

        Nothing is read back after the commit.

        Args:
            candidate: Unsaved candidate with children attached

        Returns:
            ID of the committed candidate
        """
        try:
            self.db.add(candidate)
            self.db.flush()
            candidate_id = candidate.id
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        return candidate_id
