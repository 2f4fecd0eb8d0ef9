# backoffice/repositories/stats_repo.py
from datetime import datetime

from sqlalchemy import func
from sqlmodel import Session, col, select

from backoffice.models.blog import BlogPost
from backoffice.models.catalog import Brand, Category, Product
from backoffice.models.lead import Lead


class StatsRepository:
    """
    Read-only aggregated queries for admin dashboard.

    Only portable SQL (no date_trunc / extract) so the same queries run on
    Postgres and on the SQLite test database.
    """

    def _count(self, session: Session, model, *conditions) -> int:
        stmt = select(func.count()).select_from(model)
        if conditions:
            stmt = stmt.where(*conditions)
        # SQLModel's Session.exec() -> ScalarResult -> use .one()
        value = session.exec(stmt).one()
        return int(value or 0)

    def count_products(self, session: Session, only_active: bool = False) -> int:
        if only_active:
            return self._count(session, Product, Product.is_active == True)
        return self._count(session, Product)

    def count_brands(self, session: Session) -> int:
        return self._count(session, Brand)

    def count_categories(self, session: Session) -> int:
        return self._count(session, Category)

    def count_posts(self, session: Session, published: bool) -> int:
        return self._count(session, BlogPost, BlogPost.is_published == published)

    def count_leads(self, session: Session) -> int:
        return self._count(session, Lead)

    def leads_by_status(self, session: Session) -> list[tuple]:
        stmt = select(Lead.status, func.count(Lead.id)).group_by(Lead.status)
        return list(session.exec(stmt).all())

    def daily_leads(
        self,
        session: Session,
        start: datetime,
        end: datetime,
    ) -> list[tuple]:
        """
        Lead count per calendar day in [start, end).
        """
        day_expr = func.date(Lead.created_at)

        stmt = (
            select(
                day_expr.label("day"),
                func.count(Lead.id).label("lead_count"),
            )
            .where(Lead.created_at >= start, Lead.created_at < end)
            .group_by(day_expr)
            .order_by(day_expr)
        )

        return list(session.exec(stmt).all())

    def latest_leads(
        self,
        session: Session,
        limit: int = 5,
    ) -> list[Lead]:
        """
        Latest N leads by created_at (any status).
        """
        stmt = (
            select(Lead)
            .order_by(col(Lead.created_at).desc())
            .limit(limit)
        )
        return list(session.exec(stmt).all())
