"""
Repositories module - Data Access Layer.

Provides repository classes for database operations following the Repository pattern.
Each repository handles queries for a specific domain entity.

Usage:
    from repositories import CandidateRepository, EducationRepository

    # Initialize with a database session
    candidate_repo = CandidateRepository(db_session)
    education_repo = EducationRepository(db_session)

    # Use repository methods
    candidate = candidate_repo.get_with_relations(candidate_id)
    institutions = education_repo.suggest_institutions("harv")
"""

from repositories.base_repository import BaseRepository
from repositories.candidate_repository import CandidateRepository
from repositories.document_repository import DocumentRepository
from repositories.suggestion_repository import EducationRepository, ExperienceRepository

__all__ = [
    "BaseRepository",
    "CandidateRepository",
    "DocumentRepository",
    "EducationRepository",
    "ExperienceRepository",
]
