# backoffice/core/storage_utils.py
import logging
import time
from functools import lru_cache
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from backoffice.core.config import get_settings
from backoffice.core.errors import StorageError
from backoffice.core.supabase_client import supabase_admin

logger = logging.getLogger(__name__)

PUBLIC_PREFIX = "/storage/v1/object/public/"


class AssetStore:
    """
    Thin wrapper around one Supabase Storage bucket.

    `bucket` is whatever `client.storage.from_(name)` returns: anything with
    `upload(path, file, file_options)`, `get_public_url(path)` and
    `remove([paths])`.
    """

    def __init__(self, bucket: Any, bucket_name: str):
        self.bucket = bucket
        self.bucket_name = bucket_name

    def path_from_url(self, url: str | None) -> str | None:
        """
        Given a public URL, extract the object path relative to the bucket.

        Example:
            https://<proj>.supabase.co/storage/v1/object/public/site-assets/brands/b1?t=17
            -> 'brands/b1'

        Returns None for empty URLs and URLs outside this bucket.
        """
        if not url:
            return None
        bare = url.split("?", 1)[0].split("#", 1)[0]
        marker = f"{PUBLIC_PREFIX}{self.bucket_name}/"
        idx = bare.find(marker)
        if idx == -1:
            return None
        path = bare[idx + len(marker) :]
        return path or None

    def public_url(self, path: str) -> str:
        return self.bucket.get_public_url(path)

    def upload(
        self,
        path: str,
        data: bytes,
        content_type: str | None = None,
        overwrite: bool = True,
    ) -> str:
        """
        Upload raw bytes and return the public URL.

        Raises:
            StorageError: if the bucket rejects the upload.
        """
        options = {"upsert": "true" if overwrite else "false"}
        if content_type:
            options["content-type"] = content_type

        try:
            self.bucket.upload(path, data, options)
        except Exception as e:
            logger.error(f"Storage upload failed for {path}: {e}")
            raise StorageError(f"Upload failed: {e}", path=path)

        logger.info(f"Uploaded {len(data)} bytes to {self.bucket_name}/{path}")
        return self.public_url(path)

    def remove(self, path: str) -> bool:
        """
        Best-effort delete. Never raises; returns False when the bucket
        reported an error.
        """
        try:
            self.bucket.remove([path])
        except Exception as e:
            logger.warning(f"Storage cleanup failed for {path}: {e}")
            return False
        logger.info(f"Removed {self.bucket_name}/{path}")
        return True

    def remove_url(self, url: str | None) -> bool:
        """
        Delete a file by its public URL.
        No-op if the URL does not belong to this bucket.
        """
        path = self.path_from_url(url)
        if not path:
            return False
        return self.remove(path)


def now_ms() -> int:
    return int(time.time() * 1000)


def with_cache_buster(url: str, ts: int | None = None) -> str:
    """
    Append (or replace) the `t=<milliseconds>` query parameter so browsers
    refetch a file that was overwritten in place.
    """
    if ts is None:
        ts = now_ms()
    parts = urlsplit(url)
    query = [(k, v) for k, v in parse_qsl(parts.query, keep_blank_values=True) if k != "t"]
    query.append(("t", str(ts)))
    return urlunsplit(parts._replace(query=urlencode(query)))


@lru_cache
def get_asset_store() -> AssetStore:
    """
    FastAPI dependency: the shared site-assets bucket, through the
    service-role client.
    """
    settings = get_settings()
    bucket = supabase_admin().storage.from_(settings.STORAGE_BUCKET)
    return AssetStore(bucket, settings.STORAGE_BUCKET)
