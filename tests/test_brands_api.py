# =============================================================================
# tests/test_brands_api.py - Brand & Category Endpoint Tests
# =============================================================================

import json
import uuid

from backoffice.core.assets import MAX_LOGO_BYTES
from conftest import PNG_BYTES

API = "/api/v1"
BRANDS = f"{API}/admin/brands"
CATEGORIES = f"{API}/admin/categories"


def form(payload: dict) -> dict:
    return {"data": json.dumps(payload)}


def logo():
    return ("logo.png", PNG_BYTES, "image/png")


class TestBrands:
    """Brand CRUD + logo lifecycle."""

    def test_create_generates_slug_and_uploads_logo(self, client, bucket, store):
        response = client.post(BRANDS, data=form({"name": "Hewlett Packard Enterprise"}), files={"logo": logo()})

        assert response.status_code == 201
        body = response.json()
        assert body["slug"] == "hewlett-packard-enterprise"
        assert store.path_from_url(body["logo_url"]) == f"brands/{body['id']}"
        assert f"brands/{body['id']}" in bucket.files

    def test_duplicate_slug_gets_suffix(self, client):
        client.post(BRANDS, data=form({"name": "Epson"}))
        response = client.post(BRANDS, data=form({"name": "Epson", "slug": "epson"}))

        assert response.json()["slug"] == "epson-2"

    def test_upsert_by_id_creates_then_updates(self, client):
        brand_id = str(uuid.uuid4())

        created = client.put(f"{BRANDS}/{brand_id}", data=form({"name": "Canon"}))
        updated = client.put(f"{BRANDS}/{brand_id}", data=form({"name": "Canon Perú", "order": 3}))

        assert created.json()["id"] == brand_id
        assert updated.json()["id"] == brand_id
        assert updated.json()["slug"] == "canon-peru"
        assert len(client.get(BRANDS).json()) == 1

    def test_replace_logo_keeps_single_file(self, client, bucket):
        brand = client.post(BRANDS, data=form({"name": "Lenovo"}), files={"logo": logo()}).json()

        response = client.put(
            f"{BRANDS}/{brand['id']}",
            data=form({"name": "Lenovo", "logo_url": brand["logo_url"]}),
            files={"logo": logo()},
        )

        assert response.status_code == 200
        assert list(bucket.files) == [f"brands/{brand['id']}"]
        assert bucket.removed == []

    def test_clear_logo_via_payload(self, client, bucket):
        brand = client.post(BRANDS, data=form({"name": "Dell"}), files={"logo": logo()}).json()

        response = client.put(f"{BRANDS}/{brand['id']}", data=form({"name": "Dell", "logo_url": None}))

        assert response.json()["logo_url"] is None
        assert bucket.files == {}

    def test_logo_limit_is_2mb(self, client, bucket):
        big = ("big.png", b"0" * (MAX_LOGO_BYTES + 1), "image/png")

        response = client.post(BRANDS, data=form({"name": "Xerox"}), files={"logo": big})

        assert response.status_code == 413
        assert bucket.files == {}
        assert client.get(BRANDS).json() == []

    def test_remove_logo_endpoint(self, client, bucket):
        brand = client.post(BRANDS, data=form({"name": "Asus"}), files={"logo": logo()}).json()

        response = client.delete(f"{BRANDS}/{brand['id']}/logo")

        assert response.json()["logo_url"] is None
        assert bucket.files == {}

    def test_delete_removes_logo_and_row(self, client, bucket):
        brand = client.post(BRANDS, data=form({"name": "Acer"}), files={"logo": logo()}).json()

        response = client.delete(f"{BRANDS}/{brand['id']}")

        assert response.status_code == 204
        assert bucket.files == {}
        assert client.get(f"{BRANDS}/{brand['id']}").status_code == 404

    def test_admin_search_and_public_active_list(self, client, anon_client):
        client.post(BRANDS, data=form({"name": "Samsung", "order": 2}))
        client.post(BRANDS, data=form({"name": "LG", "order": 1}))
        client.post(BRANDS, data=form({"name": "Sony", "is_active": False}))

        search = client.get(BRANDS, params={"search": "sam"}).json()
        public = anon_client.get(f"{API}/brands").json()

        assert [b["name"] for b in search] == ["Samsung"]
        assert [b["name"] for b in public] == ["LG", "Samsung"]

    def test_empty_name_is_422(self, client):
        response = client.post(BRANDS, data=form({"name": "  "}))
        assert response.status_code == 422

    def test_requires_admin(self, anon_client):
        assert anon_client.post(BRANDS, data=form({"name": "HP"})).status_code == 401


class TestCategories:
    """Category CRUD + image lifecycle."""

    def test_create_with_image(self, client, store):
        response = client.post(
            CATEGORIES,
            data=form({"name": "Impresoras Láser", "icon": "Printer"}),
            files={"image": logo()},
        )

        body = response.json()
        assert response.status_code == 201
        assert body["slug"] == "impresoras-laser"
        assert store.path_from_url(body["image_url"]) == f"categories/{body['id']}"

    def test_remove_image_and_delete(self, client, bucket):
        category = client.post(CATEGORIES, data=form({"name": "Redes"}), files={"image": logo()}).json()

        cleared = client.delete(f"{CATEGORIES}/{category['id']}/image")
        deleted = client.delete(f"{CATEGORIES}/{category['id']}")

        assert cleared.json()["image_url"] is None
        assert deleted.status_code == 204
        assert bucket.files == {}

    def test_public_list_only_active(self, client, anon_client):
        client.post(CATEGORIES, data=form({"name": "Cómputo"}))
        client.post(CATEGORIES, data=form({"name": "Archivada", "is_active": False}))

        names = [c["name"] for c in anon_client.get(f"{API}/categories").json()]

        assert names == ["Cómputo"]
