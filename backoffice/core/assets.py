# backoffice/core/assets.py
"""
Asset lifecycle for records that point at files in the site-assets bucket.

Every admin save that touches an image (brand logo, product gallery, CTA
background, ...) goes through one `AssetLifecycle`:

    with AssetLifecycle(store) as assets:
        brand.logo_url = assets.replace(brand.logo_url, upload, f"brands/{brand.id}")
        repo.save(session, brand)

Order of operations:
  1. `replace` uploads the new file and returns its cache-busted URL.
  2. The caller writes the row.
  3. Leaving the block without an exception deletes the files that are no
     longer referenced. Leaving it with an exception deletes only the files
     uploaded inside the block, so the stored row never points at a missing
     file.
"""

import logging
from dataclasses import dataclass
from typing import Any

from fastapi import HTTPException, UploadFile, status

from backoffice.core.storage_utils import AssetStore, with_cache_buster

logger = logging.getLogger(__name__)


MAX_IMAGE_BYTES = 5 * 1024 * 1024
MAX_LOGO_BYTES = 2 * 1024 * 1024
MAX_DOCUMENT_BYTES = 10 * 1024 * 1024

ALLOWED_IMAGE_CONTENT_TYPES: dict[str, str] = {
    "image/jpeg": "jpg",
    "image/png": "png",
    "image/webp": "webp",
    "image/gif": "gif",
    "image/svg+xml": "svg",
    "image/x-icon": "ico",
    "image/vnd.microsoft.icon": "ico",
}

ALLOWED_DOCUMENT_CONTENT_TYPES: dict[str, str] = {
    "application/pdf": "pdf",
}


@dataclass
class UploadedAsset:
    """File bytes received from the admin form, already read into memory."""

    data: bytes
    content_type: str
    filename: str = ""

    @classmethod
    def from_upload(cls, file: UploadFile | None) -> "UploadedAsset | None":
        """
        Read an optional multipart file.

        Browsers submit an empty part when no file was picked; that is
        treated the same as "no new file".
        """
        if file is None or not file.filename:
            return None
        data = file.file.read()
        if not data:
            return None
        return cls(
            data=data,
            content_type=file.content_type or "application/octet-stream",
            filename=file.filename,
        )

    @classmethod
    def from_uploads(cls, files: list[UploadFile] | None) -> list["UploadedAsset"]:
        assets = [cls.from_upload(f) for f in files or []]
        return [a for a in assets if a is not None]


def _validate(
    asset: UploadedAsset,
    allowed: dict[str, str],
    max_bytes: int,
    kind: str,
) -> str:
    if asset.content_type not in allowed:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unsupported {kind} type: {asset.content_type}",
        )
    if len(asset.data) > max_bytes:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"{kind.capitalize()} too large (max {max_bytes // (1024 * 1024)}MB).",
        )
    return allowed[asset.content_type]


def validate_image(asset: UploadedAsset | None, max_bytes: int = MAX_IMAGE_BYTES) -> str | None:
    """Check content type + size; return the file extension."""
    if asset is None:
        return None
    return _validate(asset, ALLOWED_IMAGE_CONTENT_TYPES, max_bytes, "image")


def validate_document(asset: UploadedAsset | None, max_bytes: int = MAX_DOCUMENT_BYTES) -> str | None:
    if asset is None:
        return None
    return _validate(asset, ALLOWED_DOCUMENT_CONTENT_TYPES, max_bytes, "document")


class AssetLifecycle:
    """
    Keeps object-store files in sync with the URL fields of one record save.
    """

    def __init__(self, store: AssetStore):
        self.store = store
        self._uploads: list[str] = []
        self._stale: list[str] = []
        # paths the stored row points at before this save
        self._referenced: set[str] = set()

    # ----- Scheduling -----

    def replace(
        self,
        current_url: str | None,
        upload: UploadedAsset | None,
        path: str,
    ) -> str | None:
        """
        Upload `upload` to `path` and return the new cache-busted URL.

        With no upload the current URL is returned untouched. The previous
        file is scheduled for deletion when it lives at a different path.
        """
        if upload is None:
            return current_url

        previous_path = self.store.path_from_url(current_url)
        self.keep(current_url)
        url = self.store.upload(path, upload.data, content_type=upload.content_type)
        self._uploads.append(path)

        if current_url and previous_path != path:
            self._stale.append(current_url)
        return with_cache_buster(url)

    def add(self, upload: UploadedAsset, path: str) -> str:
        """Upload a file that does not replace anything (gallery entry)."""
        url = self.store.upload(path, upload.data, content_type=upload.content_type)
        self._uploads.append(path)
        return with_cache_buster(url)

    def drop(self, url: str | None) -> None:
        """The record stops referencing `url`; delete it after the write."""
        if url:
            self.keep(url)
            self._stale.append(url)

    def keep(self, url: str | None) -> None:
        """Mark `url` as referenced by the stored row; a failed save never deletes it."""
        path = self.store.path_from_url(url)
        if path:
            self._referenced.add(path)

    def track(self, old_url: str | None, new_url: str | None) -> None:
        """Schedule `old_url` when the field now points somewhere else."""
        if not old_url or old_url == new_url:
            return
        if new_url and self.store.path_from_url(old_url) == self.store.path_from_url(new_url):
            return
        self._stale.append(old_url)

    def sync_field(
        self,
        row: Any,
        field: str,
        submitted: str | None,
        upload: UploadedAsset | None,
        path: str,
    ) -> str | None:
        """
        Apply one URL field of a form save to `row`:
        keep or clear per `submitted`, then replace with `upload` if given.
        """
        stored = getattr(row, field)
        self.keep(stored)
        kept = resolve_kept_url(stored, submitted, field)
        new_url = self.replace(kept, upload, path)
        self.track(stored, new_url)
        setattr(row, field, new_url)
        return new_url

    # ----- Outcome -----

    @property
    def uploaded_paths(self) -> list[str]:
        return list(self._uploads)

    def commit(self) -> list[str]:
        """
        Row write succeeded: delete every stale file that this save did not
        upload again. Returns the removed paths.
        """
        live = set(self.uploaded_paths)
        removed: list[str] = []
        for url in self._stale:
            path = self.store.path_from_url(url)
            if not path or path in live or path in removed:
                continue
            if self.store.remove(path):
                removed.append(path)
        self._reset()
        return removed

    def discard(self) -> list[str]:
        """
        Row write failed: remove the files uploaded by this save unless they
        overwrote a file the stored row still points at.
        """
        removed: list[str] = []
        for path in dict.fromkeys(self._uploads):
            if path in self._referenced:
                continue
            if self.store.remove(path):
                removed.append(path)
        if removed:
            logger.info(f"Discarded {len(removed)} upload(s) after failed save")
        self._reset()
        return removed

    def _reset(self) -> None:
        self._stale.clear()
        self._uploads.clear()
        self._referenced.clear()

    def __enter__(self) -> "AssetLifecycle":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc_type is None:
            self.commit()
        else:
            self.discard()
        return False


# ----- Form state -----


def resolve_kept_url(stored: str | None, submitted: str | None, field: str) -> str | None:
    """
    Asset fields in a form payload can only keep the stored file or clear it.
    New files always arrive as uploads.

    Raises:
        HTTPException(400): if the payload points the field at another URL.
    """
    if not submitted:
        return None
    if submitted == stored:
        return stored
    raise HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=f"{field} can only keep the current file or be cleared",
    )


def resolve_kept_urls(stored: list[str], submitted: list[str], field: str) -> list[str]:
    """Same rule for URL lists (product gallery); order follows the payload."""
    known = set(stored)
    unknown = [url for url in submitted if url not in known]
    if unknown:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"{field} contains URLs that are not part of this record",
        )
    kept: list[str] = []
    for url in submitted:
        if url not in kept:
            kept.append(url)
    return kept
