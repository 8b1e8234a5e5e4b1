from datetime import date, datetime, timezone
from typing import Optional

from sqlmodel import SQLModel, Field, Relationship, Column
from sqlalchemy import Text


class Education(SQLModel, table=True):
    """
    Education history entry owned by a single candidate.

    end_date is NULL exactly when the entry is current.
    """
    __tablename__ = "educations"

    id: Optional[int] = Field(default=None, primary_key=True)
    candidate_id: int = Field(foreign_key="candidates.id", ondelete="CASCADE", index=True)

    institution: str = Field(index=True)
    degree: str
    field_of_study: str
    start_date: date
    end_date: Optional[date] = None
    current: bool = Field(default=False)
    description: Optional[str] = Field(default=None, sa_column=Column(Text))

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    # Relationships
    candidate: "Candidate" = Relationship(back_populates="educations")
