# backoffice/schemas/stats.py
import uuid
from datetime import date, datetime

from pydantic import ConfigDict
from sqlmodel import SQLModel


class DailyLeads(SQLModel):
    """
    Leads received per day for a given month/year.
    """
    model_config = ConfigDict(extra="forbid")

    date: date
    lead_count: int


class LatestLeadSummary(SQLModel):
    """
    Lightweight info for last N leads.
    """
    model_config = ConfigDict(extra="forbid")

    id: uuid.UUID
    created_at: datetime
    full_name: str
    email: str
    subject: str
    status: str


class AdminDashboardStats(SQLModel):
    """
    Full payload for admin dashboard.
    """
    model_config = ConfigDict(extra="forbid")

    total_products: int
    active_products: int
    total_brands: int
    total_categories: int
    published_posts: int
    draft_posts: int
    total_leads: int
    leads_by_status: dict[str, int]
    daily_leads: list[DailyLeads]
    latest_leads: list[LatestLeadSummary]
