# backoffice/routers/admin_stats.py
from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from backoffice.core.auth import require_admin
from backoffice.database import get_session
from backoffice.repositories.stats_repo import StatsRepository
from backoffice.schemas.stats import AdminDashboardStats
from backoffice.services.stats_service import StatsService

router = APIRouter(
    prefix="/admin/stats",
    tags=["Admin Stats"],
    dependencies=[Depends(require_admin)],
)

service = StatsService(StatsRepository())


@router.get("", response_model=AdminDashboardStats)
def get_dashboard(
    year: int | None = None,
    month: int | None = None,
    latest: int = Query(5, ge=0, le=50),
    session: Session = Depends(get_session),
):
    """
    Dashboard counters: catalog size, posts, leads per status.

    `year` / `month` pick the month of the daily lead series (current month
    by default); `latest` is how many recent leads to list.
    """
    return service.get_admin_dashboard_stats(
        session=session,
        year=year,
        month=month,
        latest_n_leads=latest,
    )
