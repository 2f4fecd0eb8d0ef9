# =============================================================================
# tests/test_assets.py - Asset Lifecycle Tests
# =============================================================================
# Upload -> write -> delete stale, and cleanup of fresh uploads when the write
# fails.
# =============================================================================

import pytest
from fastapi import HTTPException

from backoffice.core.assets import (
    MAX_LOGO_BYTES,
    AssetLifecycle,
    UploadedAsset,
    resolve_kept_url,
    resolve_kept_urls,
    validate_document,
    validate_image,
)
from conftest import PDF_BYTES, PNG_BYTES, public_url


def png() -> UploadedAsset:
    return UploadedAsset(data=PNG_BYTES, content_type="image/png", filename="a.png")


class Row:
    """Minimal record with one URL field."""

    def __init__(self, image_url=None):
        self.image_url = image_url


class TestValidation:
    """Tests for validate_image() / validate_document()."""

    def test_accepts_supported_image(self):
        assert validate_image(png()) == "png"

    def test_no_upload_is_fine(self):
        assert validate_image(None) is None
        assert validate_document(None) is None

    def test_rejects_unsupported_type(self):
        with pytest.raises(HTTPException) as exc_info:
            validate_image(UploadedAsset(data=b"x", content_type="text/plain"))
        assert exc_info.value.status_code == 400

    def test_rejects_oversized_logo(self):
        big = UploadedAsset(data=b"0" * (MAX_LOGO_BYTES + 1), content_type="image/png")
        with pytest.raises(HTTPException) as exc_info:
            validate_image(big, MAX_LOGO_BYTES)
        assert exc_info.value.status_code == 413

    def test_datasheet_must_be_pdf(self):
        assert validate_document(UploadedAsset(data=PDF_BYTES, content_type="application/pdf")) == "pdf"
        with pytest.raises(HTTPException):
            validate_document(png())


class TestFormState:
    """Payload URL fields can only keep or clear the stored file."""

    def test_keep_and_clear(self):
        stored = public_url("cta/bg-1")
        assert resolve_kept_url(stored, stored, "cta_bg_image") == stored
        assert resolve_kept_url(stored, None, "cta_bg_image") is None
        assert resolve_kept_url(stored, "", "cta_bg_image") is None

    def test_other_url_is_rejected(self):
        with pytest.raises(HTTPException) as exc_info:
            resolve_kept_url(public_url("cta/bg-1"), "https://evil.example.com/x.png", "cta_bg_image")
        assert exc_info.value.status_code == 400

    def test_gallery_subset_keeps_payload_order(self):
        a, b, c = public_url("p/a"), public_url("p/b"), public_url("p/c")
        assert resolve_kept_urls([a, b, c], [c, a, c], "images") == [c, a]

    def test_gallery_unknown_url_rejected(self):
        with pytest.raises(HTTPException):
            resolve_kept_urls([public_url("p/a")], [public_url("p/z")], "images")


class TestAssetLifecycle:
    """Tests for AssetLifecycle."""

    def test_replace_without_upload_keeps_url(self, store, bucket):
        with AssetLifecycle(store) as assets:
            assert assets.replace(public_url("blog/x-1"), None, "blog/x-2") == public_url("blog/x-1")
        assert bucket.removed == []

    def test_replace_deletes_old_file_after_success(self, store, bucket):
        bucket.files["cta/bg-1"] = b"old"
        row = Row(public_url("cta/bg-1"))

        with AssetLifecycle(store) as assets:
            row.image_url = assets.replace(row.image_url, png(), "cta/bg-2")
            # still there while the record is being written
            assert "cta/bg-1" in bucket.files

        assert row.image_url.startswith(public_url("cta/bg-2") + "?t=")
        assert "cta/bg-1" not in bucket.files
        assert "cta/bg-2" in bucket.files

    def test_overwrite_in_place_is_not_deleted(self, store, bucket):
        bucket.files["brands/b1"] = b"old"

        with AssetLifecycle(store) as assets:
            url = assets.replace(public_url("brands/b1") + "?t=1", png(), "brands/b1")

        assert url.startswith(public_url("brands/b1") + "?t=")
        assert bucket.files["brands/b1"] == PNG_BYTES
        assert bucket.removed == []

    def test_failure_discards_new_uploads_and_keeps_old(self, store, bucket):
        bucket.files["cta/bg-1"] = b"old"

        with pytest.raises(RuntimeError):
            with AssetLifecycle(store) as assets:
                assets.replace(public_url("cta/bg-1"), png(), "cta/bg-2")
                assets.add(png(), "products/p/gallery-1-0")
                raise RuntimeError("row write failed")

        assert bucket.files == {"cta/bg-1": b"old"}

    def test_failure_keeps_file_overwritten_in_place(self, store, bucket):
        bucket.files["brands/b1"] = b"old"

        with pytest.raises(RuntimeError):
            with AssetLifecycle(store) as assets:
                assets.replace(public_url("brands/b1"), png(), "brands/b1")
                raise RuntimeError("row write failed")

        assert "brands/b1" in bucket.files

    def test_failure_keeps_stored_path_when_cleared_and_reuploaded(self, store, bucket):
        bucket.files["brands/b1"] = b"old"
        row = Row(public_url("brands/b1") + "?t=1")

        with pytest.raises(RuntimeError):
            with AssetLifecycle(store) as assets:
                assets.sync_field(row, "image_url", None, png(), "brands/b1")
                raise RuntimeError("row write failed")

        assert "brands/b1" in bucket.files
        assert bucket.removed == []

    def test_sync_field_clear(self, store, bucket):
        bucket.files["about/hero_image_url-1"] = b"old"
        row = Row(public_url("about/hero_image_url-1"))

        with AssetLifecycle(store) as assets:
            assets.sync_field(row, "image_url", None, None, "about/hero_image_url-2")

        assert row.image_url is None
        assert bucket.files == {}

    def test_sync_field_keep(self, store, bucket):
        stored = public_url("about/hero_image_url-1") + "?t=5"
        bucket.files["about/hero_image_url-1"] = b"old"
        row = Row(stored)

        with AssetLifecycle(store) as assets:
            assets.sync_field(row, "image_url", stored, None, "about/hero_image_url-2")

        assert row.image_url == stored
        assert bucket.removed == []

    def test_stale_paths_removed_once(self, store, bucket):
        bucket.files["blog/a"] = b"old"

        with AssetLifecycle(store) as assets:
            assets.drop(public_url("blog/a"))
            assets.drop(public_url("blog/a") + "?t=2")
            removed = assets.commit()

        assert removed == ["blog/a"]
        assert bucket.removed == ["blog/a"]

    def test_storage_cleanup_failure_does_not_raise(self, store, bucket):
        bucket.files["blog/a"] = b"old"
        bucket.fail_remove = True

        with AssetLifecycle(store) as assets:
            assets.drop(public_url("blog/a"))

        assert "blog/a" in bucket.files
