# backoffice/services/category_service.py
import logging
import uuid

from fastapi import HTTPException, status
from sqlmodel import Session

from backoffice.core.assets import AssetLifecycle, UploadedAsset, validate_image
from backoffice.core.slugs import ensure_unique_slug, slugify
from backoffice.core.storage_utils import AssetStore
from backoffice.models.catalog import Category
from backoffice.repositories.catalog_repo import CategoryRepository, ProductRepository
from backoffice.schemas.catalog import CategorySave

logger = logging.getLogger(__name__)


class CategoryService:
    """
    Business logic for product categories. Image lives at categories/<id>.
    """

    def __init__(self, repo: CategoryRepository, product_repo: ProductRepository):
        self.repo = repo
        self.product_repo = product_repo

    def list_categories(
        self,
        session: Session,
        only_active: bool = False,
        search: str | None = None,
    ) -> list[Category]:
        return self.repo.list_categories(session, only_active=only_active, search=search)

    def get_category(self, session: Session, category_id: uuid.UUID) -> Category:
        category = self.repo.get_by_id(session, category_id)
        if not category:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Category not found",
            )
        return category

    def save_category(
        self,
        session: Session,
        store: AssetStore,
        payload: CategorySave,
        category_id: uuid.UUID | None = None,
        image: UploadedAsset | None = None,
    ) -> Category:
        validate_image(image)

        category = self.repo.get_by_id(session, category_id) if category_id else None
        if category is None:
            category = Category(id=category_id or uuid.uuid4(), name=payload.name, slug="")

        slug = ensure_unique_slug(
            session,
            Category,
            slugify(payload.slug or payload.name, fallback="category"),
            exclude_id=category.id,
        )

        with AssetLifecycle(store) as assets:
            assets.sync_field(
                category, "image_url", payload.image_url, image, f"categories/{category.id}"
            )
            category.name = payload.name
            category.slug = slug
            category.description = payload.description
            category.icon = payload.icon
            category.is_active = payload.is_active
            category.order = payload.order
            category = self.repo.save(session, category)

        logger.info(f"Saved category {category.id} ({category.slug})")
        return category

    def remove_image(
        self,
        session: Session,
        store: AssetStore,
        category_id: uuid.UUID,
    ) -> Category:
        category = self.get_category(session, category_id)
        if not category.image_url:
            return category

        with AssetLifecycle(store) as assets:
            assets.drop(category.image_url)
            category.image_url = None
            return self.repo.save(session, category)

    def delete_category(
        self,
        session: Session,
        store: AssetStore,
        category_id: uuid.UUID,
    ) -> None:
        """
        Delete the image file, the product links, then the row.
        """
        category = self.get_category(session, category_id)

        if category.image_url:
            store.remove_url(category.image_url)

        self.product_repo.delete_links_for_category(session, category.id)
        self.repo.flush(session)
        self.repo.delete(session, category)
        logger.info(f"Deleted category {category_id}")
