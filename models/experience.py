from datetime import date, datetime, timezone
from typing import Optional

from sqlmodel import SQLModel, Field, Relationship, Column
from sqlalchemy import Text


class Experience(SQLModel, table=True):
    """Work experience entry owned by a single candidate."""
    __tablename__ = "experiences"

    id: Optional[int] = Field(default=None, primary_key=True)
    candidate_id: int = Field(foreign_key="candidates.id", ondelete="CASCADE", index=True)

    company: str = Field(index=True)
    position: str
    start_date: date
    end_date: Optional[date] = None  # NULL while current
    current: bool = Field(default=False)
    description: Optional[str] = Field(default=None, sa_column=Column(Text))

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    # Relationships
    candidate: "Candidate" = Relationship(back_populates="experiences")
