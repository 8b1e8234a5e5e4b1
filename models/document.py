from datetime import datetime, timezone
from typing import Optional

from sqlmodel import SQLModel, Field, Relationship


RESUME_DOCUMENT_TYPE = "resume"


class Document(SQLModel, table=True):
    """
    Uploaded document metadata.

    file_name is the generated storage name and the only addressable path;
    original_name is the client-supplied name, kept for display only.
    A row exists only while its backing file is retained in upload storage.
    """
    __tablename__ = "documents"

    id: Optional[int] = Field(default=None, primary_key=True)
    candidate_id: int = Field(foreign_key="candidates.id", ondelete="CASCADE", index=True)

    file_name: str = Field(unique=True, index=True)
    original_name: str
    file_type: str
    file_size: int
    document_type: str = Field(default=RESUME_DOCUMENT_TYPE)

    uploaded_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    # Relationships
    candidate: "Candidate" = Relationship(back_populates="documents")
