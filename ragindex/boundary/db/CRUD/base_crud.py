"""
Base CRUD operations for SQLAlchemy models.

Provides generic Create, Read, Delete operations that can be
inherited and extended by model-specific CRUD classes.

Dependencies: sqlalchemy
System role: Foundation for all database CRUD operations
"""

from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from ragindex.boundary.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    """
    Generic base class for CRUD operations.

    Provides standard database operations that work with any SQLAlchemy model.
    Subclasses should specify the model class and can override or extend
    these methods for model-specific behavior.

    Type Parameters:
        ModelT: SQLAlchemy model class inheriting from Base

    Attributes:
        model: The SQLAlchemy model class to operate on
        pk_name: Name of the primary key attribute
    """

    def __init__(self, model: type[ModelT], pk_name: str = "id") -> None:
        """
        Initialize CRUD with target model.

        Args:
            model: SQLAlchemy model class for database operations
            pk_name: Primary key attribute name
        """
        self.model = model
        self.pk_name = pk_name

    @property
    def _pk(self):
        return getattr(self.model, self.pk_name)

    def create(self, session: Session, **kwargs) -> ModelT:
        """
        Create a new record in the database.

        Args:
            session: Database session
            **kwargs: Model field values

        Returns:
            Created model instance with generated ID
        """
        instance = self.model(**kwargs)
        session.add(instance)
        session.flush()
        session.refresh(instance)
        return instance

    def get_by_id(self, session: Session, id: Any) -> ModelT | None:
        """
        Retrieve a single record by primary key.

        Args:
            session: Database session
            id: Primary key value

        Returns:
            Model instance if found, None otherwise
        """
        stmt = select(self.model).where(self._pk == id)
        return session.execute(stmt).scalar_one_or_none()

    def get_all(
        self,
        session: Session,
        limit: int | None = None,
        offset: int = 0,
    ) -> Sequence[ModelT]:
        """
        Retrieve all records ordered by primary key, with optional pagination.

        Args:
            session: Database session
            limit: Maximum number of records to return (None for all)
            offset: Number of records to skip

        Returns:
            Sequence of model instances
        """
        stmt = select(self.model).order_by(self._pk).offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        return session.execute(stmt).scalars().all()

    def count(self, session: Session) -> int:
        """
        Count all records of the model.

        Args:
            session: Database session

        Returns:
            Number of rows in the table
        """
        stmt = select(func.count()).select_from(self.model)
        return session.execute(stmt).scalar_one()

    def delete_by_id(self, session: Session, id: Any) -> bool:
        """
        Delete a record by primary key.

        Args:
            session: Database session
            id: Primary key value

        Returns:
            True if record was deleted, False if not found
        """
        stmt = (
            delete(self.model)
            .where(self._pk == id)
            .execution_options(synchronize_session=False)
        )
        result = session.execute(stmt)
        return result.rowcount > 0

    def delete_all(self, session: Session) -> int:
        """
        Delete every record of the model.

        Args:
            session: Database session

        Returns:
            Number of rows deleted
        """
        result = session.execute(
            delete(self.model).execution_options(synchronize_session=False)
        )
        return result.rowcount
