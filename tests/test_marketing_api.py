# =============================================================================
# tests/test_marketing_api.py - Hero Slide & Banner Endpoint Tests
# =============================================================================
# Both keep one image per record, overwritten in place at a fixed path.
# =============================================================================

import json
import uuid

from conftest import PNG_BYTES, public_url

API = "/api/v1"
SLIDES = f"{API}/admin/hero-slides"
BANNERS = f"{API}/admin/banners"


def form(payload: dict) -> dict:
    return {"data": json.dumps(payload)}


def image():
    return ("slide.png", PNG_BYTES, "image/png")


class TestHeroSlides:
    """Slide CRUD + image lifecycle."""

    def test_create_uploads_to_fixed_path(self, client, bucket, store):
        response = client.post(SLIDES, data=form({"title": "Impresoras 2024"}), files={"image": image()})

        assert response.status_code == 201
        body = response.json()
        assert store.path_from_url(body["image_url"]) == f"hero-slides/{body['id']}"
        assert f"hero-slides/{body['id']}" in bucket.files

    def test_title_only_is_enough(self, client):
        response = client.post(SLIDES, data=form({"title": "Bienvenidos"}))

        assert response.status_code == 201
        assert response.json()["image_url"] is None

    def test_needs_title_or_image(self, client, bucket):
        response = client.post(SLIDES, data=form({"title": "   ", "button_text": "Ver más"}))

        assert response.status_code == 400
        assert bucket.files == {}
        assert client.get(SLIDES).json() == []

    def test_replace_image_in_place(self, client, bucket):
        slide = client.post(SLIDES, data=form({"title": "Promo"}), files={"image": image()}).json()

        response = client.put(
            f"{SLIDES}/{slide['id']}",
            data=form({"title": "Promo", "image_url": slide["image_url"]}),
            files={"image": image()},
        )

        assert response.status_code == 200
        assert list(bucket.files) == [f"hero-slides/{slide['id']}"]
        assert bucket.removed == []

    def test_clear_image_keeps_titled_slide(self, client, bucket):
        slide = client.post(SLIDES, data=form({"title": "Promo"}), files={"image": image()}).json()

        response = client.put(f"{SLIDES}/{slide['id']}", data=form({"title": "Promo", "image_url": None}))

        assert response.json()["image_url"] is None
        assert bucket.files == {}

    def test_clear_last_image_without_title_is_rejected(self, client, bucket):
        slide = client.post(SLIDES, data=form({}), files={"image": image()}).json()

        response = client.put(f"{SLIDES}/{slide['id']}", data=form({"image_url": None}))

        assert response.status_code == 400
        assert f"hero-slides/{slide['id']}" in bucket.files

    def test_foreign_image_url_rejected(self, client):
        response = client.post(
            SLIDES, data=form({"title": "Promo", "image_url": public_url("hero-slides/other")})
        )
        assert response.status_code == 400

    def test_public_list_is_active_in_order(self, client, anon_client):
        client.post(SLIDES, data=form({"title": "Segundo", "order": 2}))
        client.post(SLIDES, data=form({"title": "Primero", "order": 1}))
        client.post(SLIDES, data=form({"title": "Oculto", "order": 0, "is_active": False}))

        titles = [s["title"] for s in anon_client.get(f"{API}/hero-slides").json()]

        assert titles == ["Primero", "Segundo"]
        assert len(client.get(SLIDES).json()) == 3

    def test_delete_removes_file_and_row(self, client, bucket):
        slide = client.post(SLIDES, data=form({"title": "Promo"}), files={"image": image()}).json()

        response = client.delete(f"{SLIDES}/{slide['id']}")

        assert response.status_code == 204
        assert bucket.files == {}
        assert client.get(f"{SLIDES}/{slide['id']}").status_code == 404

    def test_requires_admin(self, anon_client):
        assert anon_client.get(SLIDES).status_code == 401


class TestBanners:
    """Banner CRUD; the image is mandatory."""

    def test_create_requires_image(self, client, bucket):
        response = client.post(BANNERS, data=form({"title": "Cyber Days"}))

        assert response.status_code == 400
        assert client.get(BANNERS).json() == []

    def test_create_uploads_to_fixed_path(self, client, bucket, store):
        response = client.post(BANNERS, data=form({"title": "Cyber Days"}), files={"image": image()})

        assert response.status_code == 201
        body = response.json()
        assert store.path_from_url(body["image_url"]) == f"banners/{body['id']}"

    def test_update_keeps_stored_image(self, client, bucket):
        banner = client.post(BANNERS, data=form({}), files={"image": image()}).json()

        response = client.put(
            f"{BANNERS}/{banner['id']}",
            data=form({"title": "Nuevo título", "image_url": banner["image_url"], "link": "/productos"}),
        )

        assert response.status_code == 200
        assert response.json()["image_url"] == banner["image_url"]
        assert response.json()["link"] == "/productos"
        assert bucket.removed == []

    def test_clearing_image_is_rejected(self, client, bucket):
        banner = client.post(BANNERS, data=form({}), files={"image": image()}).json()

        response = client.put(f"{BANNERS}/{banner['id']}", data=form({"image_url": None}))

        assert response.status_code == 400
        assert f"banners/{banner['id']}" in bucket.files

    def test_cleared_and_reuploaded_in_same_save(self, client, bucket):
        banner = client.post(BANNERS, data=form({}), files={"image": image()}).json()

        response = client.put(
            f"{BANNERS}/{banner['id']}", data=form({"image_url": None}), files={"image": image()}
        )

        assert response.status_code == 200
        assert list(bucket.files) == [f"banners/{banner['id']}"]
        assert bucket.removed == []

    def test_upsert_by_id(self, client):
        banner_id = str(uuid.uuid4())

        response = client.put(f"{BANNERS}/{banner_id}", data=form({}), files={"image": image()})

        assert response.json()["id"] == banner_id

    def test_public_list_order(self, client, anon_client):
        client.post(BANNERS, data=form({"title": "B", "sort_order": 1}), files={"image": image()})
        client.post(BANNERS, data=form({"title": "A", "sort_order": 0}), files={"image": image()})
        client.post(
            BANNERS, data=form({"title": "Off", "is_active": False}), files={"image": image()}
        )

        titles = [b["title"] for b in anon_client.get(f"{API}/banners").json()]

        assert titles == ["A", "B"]

    def test_delete_removes_file(self, client, bucket):
        banner = client.post(BANNERS, data=form({}), files={"image": image()}).json()

        assert client.delete(f"{BANNERS}/{banner['id']}").status_code == 204
        assert bucket.files == {}
