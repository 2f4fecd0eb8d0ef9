# backoffice/services/brand_service.py
import logging
import uuid
from datetime import datetime, timezone

from fastapi import HTTPException, status
from sqlmodel import Session

from backoffice.core.assets import MAX_LOGO_BYTES, AssetLifecycle, UploadedAsset, validate_image
from backoffice.core.slugs import ensure_unique_slug, slugify
from backoffice.core.storage_utils import AssetStore
from backoffice.models.catalog import Brand
from backoffice.repositories.catalog_repo import BrandRepository, ProductRepository
from backoffice.schemas.catalog import BrandSave

logger = logging.getLogger(__name__)


class BrandService:
    """
    Business logic for Brand.

    Responsibilities:
      - slug generation & uniqueness
      - logo upload/replace/delete against brands/<id> (overwritten in place)
      - detaching products when a brand is deleted
    """

    def __init__(self, repo: BrandRepository, product_repo: ProductRepository):
        self.repo = repo
        self.product_repo = product_repo

    def list_brands(
        self,
        session: Session,
        only_active: bool = False,
        search: str | None = None,
    ) -> list[Brand]:
        return self.repo.list_brands(session, only_active=only_active, search=search)

    def get_brand(self, session: Session, brand_id: uuid.UUID) -> Brand:
        brand = self.repo.get_by_id(session, brand_id)
        if not brand:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Brand not found",
            )
        return brand

    def save_brand(
        self,
        session: Session,
        store: AssetStore,
        payload: BrandSave,
        brand_id: uuid.UUID | None = None,
        logo: UploadedAsset | None = None,
    ) -> Brand:
        """
        Create (no id / unknown id) or update a brand.

        - Logo validated before any storage call (max 2MB).
        - New logo uploaded to brands/<id> before the row write.
        - Clearing the logo deletes the file once the row is saved.
        """
        validate_image(logo, MAX_LOGO_BYTES)

        brand = self.repo.get_by_id(session, brand_id) if brand_id else None
        if brand is None:
            brand = Brand(id=brand_id or uuid.uuid4(), name=payload.name, slug="")

        slug = ensure_unique_slug(
            session,
            Brand,
            slugify(payload.slug or payload.name, fallback="brand"),
            exclude_id=brand.id,
        )

        with AssetLifecycle(store) as assets:
            assets.sync_field(brand, "logo_url", payload.logo_url, logo, f"brands/{brand.id}")
            brand.name = payload.name
            brand.slug = slug
            brand.description = payload.description
            brand.is_active = payload.is_active
            brand.order = payload.order
            brand.updated_at = datetime.now(timezone.utc)
            brand = self.repo.save(session, brand)

        logger.info(f"Saved brand {brand.id} ({brand.slug})")
        return brand

    def remove_logo(self, session: Session, store: AssetStore, brand_id: uuid.UUID) -> Brand:
        """
        Clear logo_url, save, then delete the file.
        """
        brand = self.get_brand(session, brand_id)
        if not brand.logo_url:
            return brand

        with AssetLifecycle(store) as assets:
            assets.drop(brand.logo_url)
            brand.logo_url = None
            brand.updated_at = datetime.now(timezone.utc)
            return self.repo.save(session, brand)

    def delete_brand(self, session: Session, store: AssetStore, brand_id: uuid.UUID) -> None:
        """
        Delete the logo file, then the row. Products of the brand are kept
        with brand_id cleared.
        """
        brand = self.get_brand(session, brand_id)

        if brand.logo_url:
            store.remove_url(brand.logo_url)

        self.product_repo.detach_brand(session, brand.id)
        self.repo.flush(session)
        self.repo.delete(session, brand)
        logger.info(f"Deleted brand {brand_id}")
