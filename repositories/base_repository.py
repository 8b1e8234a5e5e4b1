"""
Base repository with common read operations.

Provides a foundation for all domain-specific repositories. Writes that
must be atomic across several tables live on the owning repository.
"""

from typing import TypeVar, Generic, Optional, List, Sequence, Tuple, Type, Any
from sqlmodel import Session, select, func, SQLModel

T = TypeVar("T", bound=SQLModel)


class BaseRepository(Generic[T]):
    """
    Generic base repository.

    Type Parameters:
        T: SQLModel entity type
    """

    def __init__(self, db_session: Session, model_class: Type[T]):
        """
        Initialize repository.

        Args:
            db_session: SQLModel database session
            model_class: The SQLModel class this repository manages
        """
        self.db = db_session
        self.model_class = model_class

    def get_by_id(self, id: Any) -> Optional[T]:
        """
        Get entity by primary key.

        Args:
            id: Primary key

        Returns:
            Entity if found, None otherwise
        """
        return self.db.get(self.model_class, id)

    def count(self) -> int:
        """Count all rows of the managed table."""
        return self.db.exec(select(func.count()).select_from(self.model_class)).one()

    def get_page(self, page: int = 1, limit: int = 10, *options, order_by: Sequence = ()) -> Tuple[List[T], int]:
        """
        Get one page of entities plus the total row count.

        Args:
            page: 1-based page number
            limit: Page size
            options: Loader options (e.g. selectinload) applied to the page query
            order_by: Ordering clauses

        Returns:
            Tuple of (entities, total_count)
        """
        offset = (page - 1) * limit
        query = select(self.model_class)
        if options:
            query = query.options(*options)
        if order_by:
            query = query.order_by(*order_by)
        items = list(self.db.exec(query.offset(offset).limit(limit)).all())
        return items, self.count()

    def exists(self, id: Any) -> bool:
        """
        Check if entity exists.

        Args:
            id: Primary key

        Returns:
            True if exists
        """
        return self.get_by_id(id) is not None
