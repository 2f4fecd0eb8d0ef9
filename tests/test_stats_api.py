# =============================================================================
# tests/test_stats_api.py - Admin Dashboard Stats Tests
# =============================================================================

from datetime import datetime, timezone

from backoffice.models.blog import BlogPost
from backoffice.models.catalog import Brand, Category, Product
from backoffice.models.lead import Lead

STATS = "/api/v1/admin/stats"


def make_lead(name: str, status: str, created_at: datetime) -> Lead:
    return Lead(
        full_name=name,
        email=f"{name.lower()}@example.com",
        subject="Consulta general",
        message="Mensaje de prueba",
        status=status,
        created_at=created_at,
    )


def seed(session):
    session.add_all(
        [
            Brand(name="HP", slug="hp"),
            Category(name="Impresoras", slug="impresoras"),
            Category(name="Redes", slug="redes"),
            Product(name="A", slug="a"),
            Product(name="B", slug="b", is_active=False),
            BlogPost(title="Uno", slug="uno", content="x", is_published=True),
            BlogPost(title="Dos", slug="dos", content="x"),
            BlogPost(title="Tres", slug="tres", content="x"),
            make_lead("Ana", "new", datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc)),
            make_lead("Beto", "new", datetime(2024, 3, 1, 15, 0, tzinfo=timezone.utc)),
            make_lead("Cata", "contacted", datetime(2024, 3, 4, 11, 0, tzinfo=timezone.utc)),
            make_lead("Dani", "new", datetime(2024, 4, 2, 11, 0, tzinfo=timezone.utc)),
        ]
    )
    session.commit()


class TestDashboardStats:
    """GET /admin/stats."""

    def test_counts(self, client, session):
        seed(session)

        body = client.get(STATS, params={"year": 2024, "month": 3}).json()

        assert body["total_products"] == 2
        assert body["active_products"] == 1
        assert body["total_brands"] == 1
        assert body["total_categories"] == 2
        assert body["published_posts"] == 1
        assert body["draft_posts"] == 2
        assert body["total_leads"] == 4

    def test_leads_by_status_zero_filled(self, client, session):
        seed(session)

        body = client.get(STATS, params={"year": 2024, "month": 3}).json()

        assert body["leads_by_status"] == {
            "new": 3,
            "in_progress": 0,
            "contacted": 1,
            "discarded": 0,
        }

    def test_daily_leads_for_month(self, client, session):
        seed(session)

        body = client.get(STATS, params={"year": 2024, "month": 3}).json()

        assert body["daily_leads"] == [
            {"date": "2024-03-01", "lead_count": 2},
            {"date": "2024-03-04", "lead_count": 1},
        ]

    def test_latest_leads(self, client, session):
        seed(session)

        body = client.get(STATS, params={"year": 2024, "month": 3, "latest": 2}).json()

        assert [lead["full_name"] for lead in body["latest_leads"]] == ["Dani", "Cata"]

    def test_empty_database(self, client):
        body = client.get(STATS).json()

        assert body["total_leads"] == 0
        assert set(body["leads_by_status"]) == {"new", "in_progress", "contacted", "discarded"}
        assert body["daily_leads"] == []

    def test_invalid_month(self, client):
        assert client.get(STATS, params={"month": 13}).status_code == 400

    def test_requires_admin(self, anon_client):
        assert anon_client.get(STATS).status_code == 401
