# backoffice/services/product_service.py
import logging
import uuid
from datetime import datetime, timezone
from typing import Literal

from fastapi import HTTPException, status
from sqlmodel import Session

from backoffice.core.assets import (
    AssetLifecycle,
    UploadedAsset,
    resolve_kept_urls,
    validate_document,
    validate_image,
)
from backoffice.core.slugs import ensure_unique_slug, slugify
from backoffice.core.storage_utils import AssetStore, now_ms
from backoffice.models.catalog import Product
from backoffice.repositories.catalog_repo import (
    BrandRepository,
    CategoryRepository,
    ProductRepository,
)
from backoffice.schemas.catalog import ProductRead, ProductSave

logger = logging.getLogger(__name__)

ProductFileField = Literal["main_image_url", "datasheet_url"]


class ProductService:
    """
    Business logic for Product.

    Responsibilities:
      - slug generation & uniqueness
      - brand / category references check
      - main image, gallery and datasheet orchestration with Supabase
      - product_categories reconciliation in the product's transaction
    """

    def __init__(
        self,
        repo: ProductRepository,
        brand_repo: BrandRepository,
        category_repo: CategoryRepository,
    ):
        self.repo = repo
        self.brand_repo = brand_repo
        self.category_repo = category_repo

    # ----- Helpers -----

    def _to_read(
        self,
        session: Session,
        product: Product,
        category_ids: list[uuid.UUID] | None = None,
    ) -> ProductRead:
        if category_ids is None:
            category_ids = self.repo.list_category_ids(session, product.id)
        return ProductRead.model_validate(product, update={"category_ids": category_ids})

    def _check_references(self, session: Session, payload: ProductSave) -> None:
        if payload.brand_id and not self.brand_repo.get_by_id(session, payload.brand_id):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Unknown brand_id",
            )
        wanted = set(payload.category_ids)
        if self.category_repo.count_existing(session, list(wanted)) != len(wanted):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Unknown category id in category_ids",
            )

    def _get_row(self, session: Session, product_id: uuid.UUID) -> Product:
        product = self.repo.get_by_id(session, product_id)
        if not product:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Product not found",
            )
        return product

    # ----- Products -----

    def list_products(
        self,
        session: Session,
        skip: int = 0,
        limit: int = 50,
        only_active: bool = True,
        search: str | None = None,
        category: str | None = None,
        brand: str | None = None,
    ) -> list[ProductRead]:
        """
        `category` / `brand` accept either an id or a slug.
        """
        filters: dict = {}
        if category:
            try:
                filters["category_id"] = uuid.UUID(category)
            except ValueError:
                filters["category_slug"] = category
        if brand:
            try:
                filters["brand_id"] = uuid.UUID(brand)
            except ValueError:
                filters["brand_slug"] = brand

        products = self.repo.list_products(
            session,
            skip=skip,
            limit=limit,
            only_active=only_active,
            search=search,
            **filters,
        )
        links = self.repo.map_category_ids(session, [p.id for p in products])
        return [self._to_read(session, p, links[p.id]) for p in products]

    def get_product(self, session: Session, product_id: uuid.UUID) -> ProductRead:
        return self._to_read(session, self._get_row(session, product_id))

    def get_active_by_slug(self, session: Session, slug: str) -> ProductRead:
        product = self.repo.get_by_slug(session, slug)
        if not product or not product.is_active:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Product not found",
            )
        return self._to_read(session, product)

    def save_product(
        self,
        session: Session,
        store: AssetStore,
        payload: ProductSave,
        product_id: uuid.UUID | None = None,
        main_image: UploadedAsset | None = None,
        datasheet: UploadedAsset | None = None,
        gallery: list[UploadedAsset] | None = None,
    ) -> ProductRead:
        """
        Create (no id / unknown id) or update a product from the admin form.

        Paths:
            products/<id>/main
            products/<id>/datasheet.pdf
            products/<id>/gallery-<ts>-<i>

        Files are uploaded first, then the product row and its category
        links are written in one transaction, then files the record no
        longer references are deleted.
        """
        gallery = gallery or []
        validate_image(main_image)
        validate_document(datasheet)
        for upload in gallery:
            validate_image(upload)
        self._check_references(session, payload)

        product = self.repo.get_by_id(session, product_id) if product_id else None
        if product is None:
            product = Product(id=product_id or uuid.uuid4(), name=payload.name, slug="")

        slug = ensure_unique_slug(
            session,
            Product,
            slugify(payload.slug or payload.name, fallback="product"),
            exclude_id=product.id,
        )
        stored_gallery = list(product.images or [])
        kept_gallery = resolve_kept_urls(stored_gallery, payload.images, "images")
        base = f"products/{product.id}"
        ts = now_ms()

        with AssetLifecycle(store) as assets:
            assets.sync_field(
                product, "main_image_url", payload.main_image_url, main_image, f"{base}/main"
            )
            assets.sync_field(
                product, "datasheet_url", payload.datasheet_url, datasheet, f"{base}/datasheet.pdf"
            )

            for url in stored_gallery:
                assets.keep(url)
                if url not in kept_gallery:
                    assets.drop(url)
            new_gallery = list(kept_gallery)
            for i, upload in enumerate(gallery):
                new_gallery.append(assets.add(upload, f"{base}/gallery-{ts}-{i}"))

            product.name = payload.name
            product.slug = slug
            product.description = payload.description
            product.brand_id = payload.brand_id
            product.images = new_gallery
            product.specifications = [s.model_dump() for s in payload.specifications]
            product.price = payload.price
            product.is_new = payload.is_new
            product.is_active = payload.is_active
            product.order = payload.order
            product.updated_at = datetime.now(timezone.utc)

            self.repo.stage(session, product)
            self.repo.reconcile_categories(session, product.id, payload.category_ids)
            product = self.repo.save(session, product)

        logger.info(f"Saved product {product.id} ({product.slug})")
        return self._to_read(session, product)

    def remove_file(
        self,
        session: Session,
        store: AssetStore,
        product_id: uuid.UUID,
        field: ProductFileField,
    ) -> ProductRead:
        """
        Clear the main image or datasheet, save, then delete the file.
        """
        product = self._get_row(session, product_id)
        if getattr(product, field):
            with AssetLifecycle(store) as assets:
                assets.drop(getattr(product, field))
                setattr(product, field, None)
                product.updated_at = datetime.now(timezone.utc)
                product = self.repo.save(session, product)
        return self._to_read(session, product)

    def remove_gallery_image(
        self,
        session: Session,
        store: AssetStore,
        product_id: uuid.UUID,
        url: str,
    ) -> ProductRead:
        """
        Drop one gallery entry by URL.

        - 404 if the URL is not part of this product's gallery.
        """
        product = self._get_row(session, product_id)
        images = list(product.images or [])
        if url not in images:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Image not found for this product",
            )

        with AssetLifecycle(store) as assets:
            assets.drop(url)
            product.images = [u for u in images if u != url]
            product.updated_at = datetime.now(timezone.utc)
            product = self.repo.save(session, product)
        return self._to_read(session, product)

    def delete_product(
        self,
        session: Session,
        store: AssetStore,
        product_id: uuid.UUID,
    ) -> None:
        """
        Delete a product: storage files first (main, gallery, datasheet),
        then category links and the row.
        """
        product = self._get_row(session, product_id)

        for url in [product.main_image_url, *(product.images or []), product.datasheet_url]:
            if url:
                store.remove_url(url)

        self.repo.delete_with_links(session, product)
        logger.info(f"Deleted product {product_id}")
