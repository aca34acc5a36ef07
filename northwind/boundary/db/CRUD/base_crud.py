"""
Base CRUD operations for SQLAlchemy models.

Provides generic Create, Read, Update, Delete operations that can be
inherited and extended by model-specific CRUD classes. Methods flush
but never commit; the caller owns the unit of work.

Dependencies: sqlalchemy
System role: Foundation for all database CRUD operations
"""

from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import select
from sqlalchemy.orm import Session

from northwind.boundary.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    """
    Generic base class for CRUD operations.

    Provides standard database operations that work with any SQLAlchemy model
    having a single-column primary key.

    Type Parameters:
        ModelT: SQLAlchemy model class inheriting from Base

    Attributes:
        model: The SQLAlchemy model class to operate on
    """

    def __init__(self, model: type[ModelT]) -> None:
        """
        Initialize CRUD with target model.

        Args:
            model: SQLAlchemy model class for database operations
        """
        self.model = model

    def create(self, session: Session, **kwargs: Any) -> ModelT:
        """
        Create a new record in the database.

        Args:
            session: Database session
            **kwargs: Model field values

        Returns:
            Created model instance with generated primary key
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
            Model instance if found, None otherwise (including id=None)
        """
        if id is None:
            return None
        return session.get(self.model, id)

    def get_all(self, session: Session) -> Sequence[ModelT]:
        """
        Retrieve all records.

        No ORDER BY is applied; rows come back in storage order.

        Args:
            session: Database session

        Returns:
            Sequence of model instances
        """
        return session.scalars(select(self.model)).all()

    def update(self, session: Session, instance: ModelT, **kwargs: Any) -> ModelT:
        """
        Overwrite attributes on a loaded instance.

        Args:
            session: Database session the instance belongs to
            instance: Loaded model instance
            **kwargs: Fields to update with new values

        Returns:
            The same instance, flushed
        """
        for field, value in kwargs.items():
            setattr(instance, field, value)
        session.flush()
        return instance

    def delete(self, session: Session, instance: ModelT) -> None:
        """
        Delete a loaded instance.

        Args:
            session: Database session the instance belongs to
            instance: Loaded model instance
        """
        session.delete(instance)
        session.flush()
