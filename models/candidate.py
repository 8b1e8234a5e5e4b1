from datetime import datetime, timezone
from typing import List, Optional

from sqlmodel import SQLModel, Field, Relationship
import sqlalchemy as sa


class Candidate(SQLModel, table=True):
    """Job candidate with owned education, experience and document rows.

    Email is the identity key: stored lower-cased and unique across all
    candidates. The unique constraint is the authoritative duplicate guard.
    """
    __tablename__ = "candidates"

    id: Optional[int] = Field(default=None, primary_key=True)
    first_name: str = Field(max_length=50)
    last_name: str = Field(max_length=50)
    email: str = Field(sa_column=sa.Column(sa.String(255), nullable=False, unique=True, index=True))
    phone: str = Field(max_length=32)
    address: Optional[str] = Field(default=None, max_length=200)
    linked_in: Optional[str] = Field(default=None)
    portfolio: Optional[str] = Field(default=None)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), nullable=False)
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), nullable=False)

    # Relationships
    educations: List["Education"] = Relationship(back_populates="candidate", cascade_delete=True)
    experiences: List["Experience"] = Relationship(back_populates="candidate", cascade_delete=True)
    documents: List["Document"] = Relationship(back_populates="candidate", cascade_delete=True)
