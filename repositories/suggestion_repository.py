"""
Suggestion lookups over free-text institution and company names.

Distinct, case-insensitive substring matches used for autocomplete.
"""

from typing import List
from sqlmodel import Session, select, func

from models.education import Education
from models.experience import Experience
from repositories.base_repository import BaseRepository

MAX_SUGGESTIONS = 10


class EducationRepository(BaseRepository[Education]):
    """Repository for education rows."""

    def __init__(self, db_session: Session):
        super().__init__(db_session, Education)

    def suggest_institutions(self, query: str, limit: int = MAX_SUGGESTIONS) -> List[str]:
        """
        Distinct institution names containing `query`, case-insensitively.

        Args:
            query: Free text typed by the user
            limit: Maximum number of suggestions

        Returns:
            Sorted list of institution names
        """
        statement = (
            select(Education.institution)
            .where(func.lower(Education.institution).contains(query.lower(), autoescape=True))
            .distinct()
            .order_by(Education.institution)
            .limit(limit)
        )
        return list(self.db.exec(statement).all())


class ExperienceRepository(BaseRepository[Experience]):
    """Repository for experience rows."""

    def __init__(self, db_session: Session):
        super().__init__(db_session, Experience)

    def suggest_companies(self, query: str, limit: int = MAX_SUGGESTIONS) -> List[str]:
        """Distinct company names containing `query`, case-insensitively."""
        statement = (
            select(Experience.company)
            .where(func.lower(Experience.company).contains(query.lower(), autoescape=True))
            .distinct()
            .order_by(Experience.company)
            .limit(limit)
        )
        return list(self.db.exec(statement).all())
