# backoffice/repositories/base.py
from typing import Any, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, SQLModel

RowT = TypeVar("RowT", bound=SQLModel)


class BaseRepository:
    """
    Shared write helpers.

    A failed flush/commit is rolled back before the error propagates, so the
    session stays usable and the stored row keeps its previous state.
    """

    def save(self, session: Session, row: RowT) -> RowT:
        session.add(row)
        self.commit(session)
        session.refresh(row)
        return row

    def stage(self, session: Session, row: RowT) -> RowT:
        """Add + flush without committing (multi-row writes)."""
        session.add(row)
        self.flush(session)
        return row

    def delete(self, session: Session, row: Any) -> None:
        session.delete(row)
        self.commit(session)

    @staticmethod
    def flush(session: Session) -> None:
        try:
            session.flush()
        except SQLAlchemyError:
            session.rollback()
            raise

    @staticmethod
    def commit(session: Session) -> None:
        try:
            session.commit()
        except SQLAlchemyError:
            session.rollback()
            raise
