# =============================================================================
# tests/test_products_api.py - Product Endpoint Tests
# =============================================================================
# Covers the asset rules of the product editor: main image, gallery,
# datasheet, category reconciliation and delete cleanup.
# =============================================================================

import itertools
import json

import pytest

from conftest import PDF_BYTES, PNG_BYTES

API = "/api/v1"
PRODUCTS = f"{API}/admin/products"


@pytest.fixture(autouse=True)
def ticking_clock(monkeypatch):
    ticks = itertools.count(1_700_000_000_000)
    monkeypatch.setattr("backoffice.services.product_service.now_ms", lambda: next(ticks))


def form(payload: dict) -> dict:
    return {"data": json.dumps(payload)}


def png(name="img.png"):
    return (name, PNG_BYTES, "image/png")


@pytest.fixture
def brand(client):
    return client.post(f"{API}/admin/brands", data=form({"name": "HP"})).json()


@pytest.fixture
def categories(client):
    return [
        client.post(f"{API}/admin/categories", data=form({"name": name})).json()
        for name in ("Impresoras", "Escáneres", "Suministros")
    ]


@pytest.fixture
def full_product(client, brand, categories):
    """Product with main image, two gallery images and a datasheet."""
    payload = {
        "name": "LaserJet Pro M404",
        "description": "Impresora monocromática",
        "brand_id": brand["id"],
        "category_ids": [categories[0]["id"], categories[1]["id"]],
        "specifications": [{"label": "Velocidad", "value": "40 ppm"}],
        "price": "Consultar",
        "is_new": True,
    }
    files = [
        ("main_image", png("main.png")),
        ("datasheet", ("ficha.pdf", PDF_BYTES, "application/pdf")),
        ("gallery", png("g1.png")),
        ("gallery", png("g2.png")),
    ]
    response = client.post(PRODUCTS, data=form(payload), files=files)
    assert response.status_code == 201
    return response.json()


def save_payload(product: dict, **changes) -> dict:
    keys = (
        "name",
        "description",
        "brand_id",
        "category_ids",
        "main_image_url",
        "images",
        "specifications",
        "datasheet_url",
        "price",
        "is_new",
        "is_active",
        "order",
    )
    payload = {key: product[key] for key in keys}
    payload.update(changes)
    return payload


class TestProductCreate:
    """Creating products with files."""

    def test_paths_and_fields(self, full_product, bucket, store):
        pid = full_product["id"]

        assert full_product["slug"] == "laserjet-pro-m404"
        assert store.path_from_url(full_product["main_image_url"]) == f"products/{pid}/main"
        assert store.path_from_url(full_product["datasheet_url"]) == f"products/{pid}/datasheet.pdf"
        gallery_paths = [store.path_from_url(u) for u in full_product["images"]]
        assert all(p.startswith(f"products/{pid}/gallery-") for p in gallery_paths)
        assert len(set(gallery_paths)) == 2
        assert set(bucket.files) == {
            f"products/{pid}/main",
            f"products/{pid}/datasheet.pdf",
            *gallery_paths,
        }
        assert full_product["specifications"] == [{"label": "Velocidad", "value": "40 ppm"}]
        assert len(full_product["category_ids"]) == 2

    def test_datasheet_must_be_pdf(self, client, bucket):
        response = client.post(
            PRODUCTS,
            data=form({"name": "Scanner"}),
            files={"datasheet": ("ficha.docx", b"PK..", "application/msword")},
        )

        assert response.status_code == 400
        assert bucket.files == {}

    def test_unknown_category_rejected_before_upload(self, client, bucket):
        response = client.post(
            PRODUCTS,
            data=form({"name": "Scanner", "category_ids": ["00000000-0000-0000-0000-000000000000"]}),
            files={"main_image": png()},
        )

        assert response.status_code == 400
        assert bucket.files == {}


class TestProductSave:
    """Editing an existing product."""

    def test_save_without_files_keeps_everything(self, client, full_product, bucket):
        before = dict(bucket.files)

        response = client.put(
            f"{PRODUCTS}/{full_product['id']}",
            data=form(save_payload(full_product, name="LaserJet Pro M404dn")),
        )

        body = response.json()
        assert response.status_code == 200
        assert body["main_image_url"] == full_product["main_image_url"]
        assert body["images"] == full_product["images"]
        assert body["datasheet_url"] == full_product["datasheet_url"]
        assert body["slug"] == "laserjet-pro-m404dn"
        assert bucket.files == before

    def test_gallery_removal_and_addition(self, client, full_product, bucket, store):
        kept, dropped = full_product["images"]

        response = client.put(
            f"{PRODUCTS}/{full_product['id']}",
            data=form(save_payload(full_product, images=[kept])),
            files=[("gallery", png("g3.png"))],
        )

        images = response.json()["images"]
        assert images[0] == kept
        assert len(images) == 2
        assert store.path_from_url(dropped) not in bucket.files
        assert store.path_from_url(images[1]) in bucket.files

    def test_replace_main_image_overwrites_in_place(self, client, full_product, bucket):
        pid = full_product["id"]

        response = client.put(
            f"{PRODUCTS}/{pid}",
            data=form(save_payload(full_product)),
            files={"main_image": png("new-main.png")},
        )

        assert response.status_code == 200
        assert f"products/{pid}/main" in bucket.files
        assert f"products/{pid}/main" not in bucket.removed

    def test_clear_main_image_and_datasheet(self, client, full_product, bucket):
        pid = full_product["id"]

        response = client.put(
            f"{PRODUCTS}/{pid}",
            data=form(save_payload(full_product, main_image_url=None, datasheet_url=None)),
        )

        assert response.json()["main_image_url"] is None
        assert response.json()["datasheet_url"] is None
        assert f"products/{pid}/main" not in bucket.files
        assert f"products/{pid}/datasheet.pdf" not in bucket.files

    def test_categories_reconciled(self, client, full_product, categories):
        response = client.put(
            f"{PRODUCTS}/{full_product['id']}",
            data=form(save_payload(full_product, category_ids=[categories[1]["id"], categories[2]["id"]])),
        )

        assert set(response.json()["category_ids"]) == {categories[1]["id"], categories[2]["id"]}

    def test_foreign_gallery_url_rejected(self, client, full_product):
        response = client.put(
            f"{PRODUCTS}/{full_product['id']}",
            data=form(save_payload(full_product, images=["https://cdn.example.com/x.png"])),
        )
        assert response.status_code == 400


class TestProductAssetsAndDelete:
    """Single asset removal and full delete."""

    def test_remove_gallery_image_endpoint(self, client, full_product, bucket, store):
        url = full_product["images"][0]

        response = client.delete(f"{PRODUCTS}/{full_product['id']}/images", params={"url": url})

        assert response.json()["images"] == full_product["images"][1:]
        assert store.path_from_url(url) not in bucket.files

    def test_remove_datasheet_endpoint(self, client, full_product, bucket):
        response = client.delete(f"{PRODUCTS}/{full_product['id']}/files/datasheet_url")

        assert response.json()["datasheet_url"] is None
        assert f"products/{full_product['id']}/datasheet.pdf" not in bucket.files

    def test_delete_cleans_storage_and_links(self, client, full_product, bucket, categories):
        response = client.delete(f"{PRODUCTS}/{full_product['id']}")

        assert response.status_code == 204
        assert bucket.files == {}
        assert client.get(f"{PRODUCTS}/{full_product['id']}").status_code == 404
        # category still deletable: no dangling links
        assert client.delete(f"{API}/admin/categories/{categories[0]['id']}").status_code == 204


class TestPublicCatalog:
    """Public product listing + detail."""

    def test_filters_by_category_and_brand(self, client, anon_client, full_product, brand, categories):
        client.post(PRODUCTS, data=form({"name": "Tóner 58A", "category_ids": [categories[2]["id"]]}))
        client.post(PRODUCTS, data=form({"name": "Oculto", "is_active": False}))

        everything = anon_client.get(f"{API}/products").json()
        by_slug = anon_client.get(f"{API}/products", params={"category": "impresoras"}).json()
        by_id = anon_client.get(f"{API}/products", params={"category": categories[2]["id"]}).json()
        by_brand = anon_client.get(f"{API}/products", params={"brand": brand["slug"]}).json()

        assert {p["name"] for p in everything} == {"LaserJet Pro M404", "Tóner 58A"}
        assert [p["name"] for p in by_slug] == ["LaserJet Pro M404"]
        assert [p["name"] for p in by_id] == ["Tóner 58A"]
        assert [p["name"] for p in by_brand] == ["LaserJet Pro M404"]

    def test_detail_by_slug(self, anon_client, full_product):
        response = anon_client.get(f"{API}/products/{full_product['slug']}")

        assert response.status_code == 200
        assert response.json()["id"] == full_product["id"]

    def test_inactive_detail_is_404(self, client, anon_client):
        client.post(PRODUCTS, data=form({"name": "Borrador", "is_active": False}))
        assert anon_client.get(f"{API}/products/borrador").status_code == 404
