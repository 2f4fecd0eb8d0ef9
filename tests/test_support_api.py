# =============================================================================
# tests/test_support_api.py - Complaints Book & Call Center Tests
# =============================================================================

import uuid
from datetime import datetime, timezone

import pytest

from backoffice.models.support import Complaint

API = "/api/v1"
COMPLAINTS = f"{API}/admin/complaints"
CALL_CENTER = f"{API}/admin/call-center"


def complaint_payload(**changes) -> dict:
    payload = {
        "first_name": "Rosa",
        "last_name_1": "Huamán",
        "last_name_2": "Quispe",
        "document_type": "DNI",
        "document_number": "45678912",
        "email": "rosa.huaman@example.com",
        "phone": "987654321",
        "department": "Lima",
        "province": "Lima",
        "district": "Miraflores",
        "address": "Av. Larco 123",
        "reference": "",
        "is_minor": False,
        "consumption_type": "Producto",
        "order_number": "OC-2024-001",
        "claimed_amount": 1250.5,
        "purchase_date": "2024-03-01",
        "description": "Impresora láser comprada en tienda",
        "claim_type": "Reclamación",
        "claim_details": "La impresora llegó con la bandeja rota.",
        "customer_request": "Cambio del equipo por uno nuevo.",
    }
    payload.update(changes)
    return payload


@pytest.fixture
def seeded(session):
    """Three complaints on different days and statuses."""
    rows = []
    for day, name, status in ((1, "Ana", "pendiente"), (5, "Luis", "resuelto"), (9, "Rosa", "pendiente")):
        data = complaint_payload(first_name=name, reference=None)
        rows.append(
            Complaint(
                **data,
                status=status,
                created_at=datetime(2024, 3, day, 10, 0, tzinfo=timezone.utc),
            )
        )
    session.add_all(rows)
    session.commit()
    return rows


class TestComplaintFiling:
    """POST /complaints."""

    def test_create_starts_as_pending(self, anon_client):
        response = anon_client.post(f"{API}/complaints", json=complaint_payload())

        assert response.status_code == 201
        body = response.json()
        assert body["status"] == "pendiente"
        assert body["reference"] is None
        assert body["claimed_amount"] == 1250.5

    def test_status_is_not_accepted(self, anon_client):
        response = anon_client.post(f"{API}/complaints", json=complaint_payload(status="resuelto"))
        assert response.status_code == 422

    @pytest.mark.parametrize(
        "changes",
        [
            {"first_name": "R"},
            {"last_name_2": ""},
            {"document_number": "1234567"},
            {"document_type": "RUC"},
            {"phone": "98765432"},
            {"address": "Av."},
            {"email": "no-es-correo"},
            {"description": "Corto"},
            {"claim_details": "Mal"},
            {"customer_request": "Cambio"},
            {"claim_type": "Sugerencia"},
            {"consumption_type": "Otro"},
            {"claimed_amount": -1},
        ],
    )
    def test_field_validation(self, anon_client, changes):
        response = anon_client.post(f"{API}/complaints", json=complaint_payload(**changes))
        assert response.status_code == 422

    def test_minor_and_service_claim(self, anon_client):
        response = anon_client.post(
            f"{API}/complaints",
            json=complaint_payload(is_minor=True, consumption_type="Servicio", claim_type="Queja"),
        )

        body = response.json()
        assert body["is_minor"] is True
        assert body["claim_type"] == "Queja"


class TestAdminComplaints:
    """Admin list, detail and status changes."""

    def test_newest_first(self, client, seeded):
        names = [c["first_name"] for c in client.get(COMPLAINTS).json()]
        assert names == ["Rosa", "Luis", "Ana"]

    def test_status_filter(self, client, seeded):
        names = [c["first_name"] for c in client.get(COMPLAINTS, params={"status": "pendiente"}).json()]
        assert names == ["Rosa", "Ana"]

    def test_status_change(self, client, seeded):
        complaint_id = seeded[0].id

        first = client.patch(f"{COMPLAINTS}/{complaint_id}/status", json={"status": "en_proceso"})
        second = client.patch(f"{COMPLAINTS}/{complaint_id}/status", json={"status": "rechazado"})

        assert first.json()["status"] == "en_proceso"
        assert second.json()["status"] == "rechazado"
        assert client.get(f"{COMPLAINTS}/{complaint_id}").json()["status"] == "rechazado"

    def test_invalid_status_is_422(self, client, seeded):
        response = client.patch(f"{COMPLAINTS}/{seeded[0].id}/status", json={"status": "cerrado"})
        assert response.status_code == 422

    def test_unknown_is_404(self, client):
        assert client.get(f"{COMPLAINTS}/{uuid.uuid4()}").status_code == 404

    def test_requires_admin(self, anon_client, seeded):
        assert anon_client.get(COMPLAINTS).status_code == 401


class TestCallCenter:
    """Bulk editor save + public list."""

    def test_save_numbers_by_position(self, client):
        response = client.put(
            CALL_CENTER,
            json=[
                {"name": "Ventas", "phone": "+51 987 654 321", "type": "whatsapp"},
                {"name": "Soporte", "phone": "01 555 1234", "type": "call"},
            ],
        )

        assert response.status_code == 200
        body = response.json()
        assert [(n["name"], n["sort_order"]) for n in body] == [("Ventas", 0), ("Soporte", 1)]

    def test_reorder_updates_existing_rows(self, client):
        first = client.put(
            CALL_CENTER,
            json=[
                {"name": "Ventas", "phone": "987654321"},
                {"name": "Soporte", "phone": "912345678"},
            ],
        ).json()
        ventas, soporte = first

        response = client.put(
            CALL_CENTER,
            json=[
                {"id": soporte["id"], "name": "Soporte", "phone": "912345678"},
                {"id": ventas["id"], "name": "Ventas Lima", "phone": "987654321"},
            ],
        )

        body = response.json()
        assert [n["id"] for n in body] == [soporte["id"], ventas["id"]]
        assert body[1]["name"] == "Ventas Lima"
        assert len(client.get(CALL_CENTER).json()) == 2

    def test_public_list_is_active_only(self, client, anon_client):
        client.put(
            CALL_CENTER,
            json=[
                {"name": "Ventas", "phone": "987654321"},
                {"name": "Nocturno", "phone": "912345678", "is_active": False},
            ],
        )

        names = [n["name"] for n in anon_client.get(f"{API}/call-center").json()]

        assert names == ["Ventas"]

    @pytest.mark.parametrize(
        "item",
        [
            {"name": "  ", "phone": "987654321"},
            {"name": "Ventas", "phone": ""},
            {"name": "Ventas", "phone": "987654321", "type": "sms"},
        ],
    )
    def test_item_validation(self, client, item):
        assert client.put(CALL_CENTER, json=[item]).status_code == 422

    def test_delete(self, client):
        line = client.put(CALL_CENTER, json=[{"name": "Ventas", "phone": "987654321"}]).json()[0]

        assert client.delete(f"{CALL_CENTER}/{line['id']}").status_code == 204
        assert client.get(CALL_CENTER).json() == []
        assert client.delete(f"{CALL_CENTER}/{line['id']}").status_code == 404
