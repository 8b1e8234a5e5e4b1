"""
Document repository.

Documents are only ever inserted as part of a candidate aggregate; this
repository serves lookups over stored file names.
"""

from typing import Optional, Set
from sqlmodel import Session, select

from models.document import Document
from repositories.base_repository import BaseRepository


class DocumentRepository(BaseRepository[Document]):
    """Repository for document metadata."""

    def __init__(self, db_session: Session):
        super().__init__(db_session, Document)

    def get_by_file_name(self, file_name: str) -> Optional[Document]:
        query = select(Document).where(Document.file_name == file_name)
        return self.db.exec(query).first()

    def get_referenced_file_names(self) -> Set[str]:
        """All generated file names currently owned by a document row."""
        return set(self.db.exec(select(Document.file_name)).all())
