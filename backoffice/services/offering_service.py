# backoffice/services/offering_service.py
import logging
import uuid
from datetime import datetime, timezone

from fastapi import HTTPException, status
from sqlmodel import Session

from backoffice.core.assets import AssetLifecycle, UploadedAsset, resolve_kept_urls, validate_image
from backoffice.core.slugs import ensure_unique_slug, slugify
from backoffice.core.storage_utils import AssetStore, now_ms
from backoffice.models.offering import Service
from backoffice.repositories.offering_repo import ServiceRepository
from backoffice.schemas.offering import ServiceSave

logger = logging.getLogger(__name__)


class OfferingService:
    """
    Business logic for the services the company offers.

    Responsibilities:
      - slug generation & uniqueness
      - main image (services/<id>/main, overwritten in place) and gallery
        (services/<id>/gallery-<ts>-<i>) orchestration with Supabase
    """

    def __init__(self, repo: ServiceRepository):
        self.repo = repo

    def list_services(
        self,
        session: Session,
        only_active: bool = False,
        search: str | None = None,
    ) -> list[Service]:
        return self.repo.list_services(session, only_active=only_active, search=search)

    def get_service(self, session: Session, service_id: uuid.UUID) -> Service:
        service = self.repo.get_by_id(session, service_id)
        if not service:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Service not found",
            )
        return service

    def get_active_by_slug(self, session: Session, slug: str) -> Service:
        service = self.repo.get_by_slug(session, slug)
        if not service or not service.is_active:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Service not found",
            )
        return service

    def save_service(
        self,
        session: Session,
        store: AssetStore,
        payload: ServiceSave,
        service_id: uuid.UUID | None = None,
        main_image: UploadedAsset | None = None,
        gallery: list[UploadedAsset] | None = None,
    ) -> Service:
        """
        Create (no id / unknown id) or update a service from the admin form.

        Gallery URLs left out of `payload.gallery_images` are deleted once
        the row is saved; new gallery files are appended after the kept ones.
        """
        gallery = gallery or []
        validate_image(main_image)
        for upload in gallery:
            validate_image(upload)

        service = self.repo.get_by_id(session, service_id) if service_id else None
        if service is None:
            service = Service(id=service_id or uuid.uuid4(), name=payload.name, slug="")

        slug = ensure_unique_slug(
            session,
            Service,
            slugify(payload.slug or payload.name, fallback="service"),
            exclude_id=service.id,
        )
        stored_gallery = list(service.gallery_images or [])
        kept_gallery = resolve_kept_urls(stored_gallery, payload.gallery_images, "gallery_images")
        base = f"services/{service.id}"
        ts = now_ms()

        with AssetLifecycle(store) as assets:
            assets.sync_field(service, "image_url", payload.image_url, main_image, f"{base}/main")

            for url in stored_gallery:
                assets.keep(url)
                if url not in kept_gallery:
                    assets.drop(url)
            new_gallery = list(kept_gallery)
            for i, upload in enumerate(gallery):
                new_gallery.append(assets.add(upload, f"{base}/gallery-{ts}-{i}"))

            service.name = payload.name
            service.slug = slug
            service.subtitle = payload.subtitle
            service.description = payload.description
            service.gallery_images = new_gallery
            service.benefits = list(payload.benefits)
            service.features = [f.model_dump() for f in payload.features]
            service.is_active = payload.is_active
            service.order = payload.order
            service.updated_at = datetime.now(timezone.utc)
            service = self.repo.save(session, service)

        logger.info(f"Saved service {service.id} ({service.slug})")
        return service

    def remove_main_image(self, session: Session, store: AssetStore, service_id: uuid.UUID) -> Service:
        service = self.get_service(session, service_id)
        if not service.image_url:
            return service

        with AssetLifecycle(store) as assets:
            assets.drop(service.image_url)
            service.image_url = None
            service.updated_at = datetime.now(timezone.utc)
            return self.repo.save(session, service)

    def remove_gallery_image(
        self,
        session: Session,
        store: AssetStore,
        service_id: uuid.UUID,
        url: str,
    ) -> Service:
        """
        Drop one gallery entry by URL.

        - 404 if the URL is not part of this service's gallery.
        """
        service = self.get_service(session, service_id)
        images = list(service.gallery_images or [])
        if url not in images:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Image not found for this service",
            )

        with AssetLifecycle(store) as assets:
            assets.drop(url)
            service.gallery_images = [u for u in images if u != url]
            service.updated_at = datetime.now(timezone.utc)
            return self.repo.save(session, service)

    def delete_service(self, session: Session, store: AssetStore, service_id: uuid.UUID) -> None:
        """
        Delete storage files (main + gallery), then the row.
        """
        service = self.get_service(session, service_id)

        for url in [service.image_url, *(service.gallery_images or [])]:
            if url:
                store.remove_url(url)

        self.repo.delete(session, service)
        logger.info(f"Deleted service {service_id}")
