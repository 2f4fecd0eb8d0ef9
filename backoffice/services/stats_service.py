# backoffice/services/stats_service.py
from datetime import date, datetime, timezone
from typing import get_args

from fastapi import HTTPException, status
from sqlmodel import Session

from backoffice.repositories.stats_repo import StatsRepository
from backoffice.schemas.lead import LeadStatus
from backoffice.schemas.stats import (
    AdminDashboardStats,
    DailyLeads,
    LatestLeadSummary,
)

LEAD_STATUSES: tuple[str, ...] = get_args(LeadStatus)


class StatsService:
    """
    Orchestrates aggregated admin dashboard statistics.
    """

    def __init__(self, repo: StatsRepository):
        self.repo = repo

    @staticmethod
    def _month_range(year: int, month: int) -> tuple[datetime, datetime]:
        start = datetime(year, month, 1, tzinfo=timezone.utc)
        if month == 12:
            end = datetime(year + 1, 1, 1, tzinfo=timezone.utc)
        else:
            end = datetime(year, month + 1, 1, tzinfo=timezone.utc)
        return start, end

    def get_admin_dashboard_stats(
        self,
        session: Session,
        year: int | None = None,
        month: int | None = None,
        latest_n_leads: int = 5,
    ) -> AdminDashboardStats:
        # Default to current month/year if not provided
        today = datetime.now(timezone.utc).date()
        if year is None:
            year = today.year
        if month is None:
            month = today.month

        if not 1 <= month <= 12:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="month must be between 1 and 12",
            )

        # Every known status is present, even with zero leads
        by_status = {s: 0 for s in LEAD_STATUSES}
        for lead_status, count in self.repo.leads_by_status(session):
            by_status[lead_status] = int(count or 0)

        start, end = self._month_range(year, month)
        daily_leads: list[DailyLeads] = []
        for day, lead_count in self.repo.daily_leads(session, start, end):
            # date() is a DATE on Postgres, an ISO string on SQLite
            if isinstance(day, str):
                day = date.fromisoformat(day)
            elif isinstance(day, datetime):
                day = day.date()
            daily_leads.append(DailyLeads(date=day, lead_count=int(lead_count or 0)))

        latest_leads = [
            LatestLeadSummary(
                id=lead.id,
                created_at=lead.created_at,
                full_name=lead.full_name,
                email=lead.email,
                subject=lead.subject,
                status=lead.status,
            )
            for lead in self.repo.latest_leads(session, limit=latest_n_leads)
        ]

        return AdminDashboardStats(
            total_products=self.repo.count_products(session),
            active_products=self.repo.count_products(session, only_active=True),
            total_brands=self.repo.count_brands(session),
            total_categories=self.repo.count_categories(session),
            published_posts=self.repo.count_posts(session, published=True),
            draft_posts=self.repo.count_posts(session, published=False),
            total_leads=self.repo.count_leads(session),
            leads_by_status=by_status,
            daily_leads=daily_leads,
            latest_leads=latest_leads,
        )
