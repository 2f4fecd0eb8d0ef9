# backoffice/repositories/catalog_repo.py
import uuid

from sqlmodel import Session, col, select

from backoffice.models.catalog import Brand, Category, Product, ProductCategory
from backoffice.repositories.base import BaseRepository


class BrandRepository(BaseRepository):
    """
    Data access layer for Brand.
    """

    def get_by_id(self, session: Session, brand_id: uuid.UUID) -> Brand | None:
        return session.get(Brand, brand_id)

    def get_by_slug(self, session: Session, slug: str) -> Brand | None:
        stmt = select(Brand).where(Brand.slug == slug)
        return session.exec(stmt).first()

    def list_brands(
        self,
        session: Session,
        only_active: bool = False,
        search: str | None = None,
    ) -> list[Brand]:
        stmt = select(Brand)
        if only_active:
            stmt = stmt.where(Brand.is_active == True)
        if search:
            stmt = stmt.where(col(Brand.name).ilike(f"%{search}%"))
        stmt = stmt.order_by(Brand.order, Brand.name)
        return session.exec(stmt).all()


class CategoryRepository(BaseRepository):
    """
    Data access layer for Category.
    """

    def get_by_id(self, session: Session, category_id: uuid.UUID) -> Category | None:
        return session.get(Category, category_id)

    def get_by_slug(self, session: Session, slug: str) -> Category | None:
        stmt = select(Category).where(Category.slug == slug)
        return session.exec(stmt).first()

    def list_categories(
        self,
        session: Session,
        only_active: bool = False,
        search: str | None = None,
    ) -> list[Category]:
        stmt = select(Category)
        if only_active:
            stmt = stmt.where(Category.is_active == True)
        if search:
            stmt = stmt.where(col(Category.name).ilike(f"%{search}%"))
        stmt = stmt.order_by(Category.order, Category.name)
        return session.exec(stmt).all()

    def count_existing(self, session: Session, ids: list[uuid.UUID]) -> int:
        if not ids:
            return 0
        stmt = select(Category.id).where(col(Category.id).in_(ids))
        return len(session.exec(stmt).all())


class ProductRepository(BaseRepository):
    """
    Data access layer for Product & its category links.

    - Pure DB operations (CRUD + queries).
    - No FastAPI, no business logic.
    """

    # ----- Products -----

    def get_by_id(self, session: Session, product_id: uuid.UUID) -> Product | None:
        return session.get(Product, product_id)

    def get_by_slug(self, session: Session, slug: str) -> Product | None:
        stmt = select(Product).where(Product.slug == slug)
        return session.exec(stmt).first()

    def list_products(
        self,
        session: Session,
        skip: int = 0,
        limit: int = 50,
        only_active: bool = True,
        search: str | None = None,
        category_id: uuid.UUID | None = None,
        category_slug: str | None = None,
        brand_id: uuid.UUID | None = None,
        brand_slug: str | None = None,
    ) -> list[Product]:
        stmt = select(Product)
        if only_active:
            stmt = stmt.where(Product.is_active == True)
        if search:
            stmt = stmt.where(col(Product.name).ilike(f"%{search}%"))

        if category_id is not None or category_slug:
            linked = select(ProductCategory.product_id)
            if category_id is not None:
                linked = linked.where(ProductCategory.category_id == category_id)
            if category_slug:
                linked = linked.join(
                    Category, Category.id == ProductCategory.category_id
                ).where(Category.slug == category_slug)
            stmt = stmt.where(col(Product.id).in_(linked))

        if brand_id is not None:
            stmt = stmt.where(Product.brand_id == brand_id)
        if brand_slug:
            stmt = stmt.join(Brand, Brand.id == Product.brand_id).where(Brand.slug == brand_slug)

        stmt = stmt.order_by(Product.order, Product.name).offset(skip).limit(limit)
        return session.exec(stmt).all()

    # ----- Category links -----

    def list_category_ids(self, session: Session, product_id: uuid.UUID) -> list[uuid.UUID]:
        stmt = select(ProductCategory.category_id).where(
            ProductCategory.product_id == product_id
        )
        return list(session.exec(stmt).all())

    def map_category_ids(
        self,
        session: Session,
        product_ids: list[uuid.UUID],
    ) -> dict[uuid.UUID, list[uuid.UUID]]:
        """product_id -> category ids, for a page of products."""
        result: dict[uuid.UUID, list[uuid.UUID]] = {pid: [] for pid in product_ids}
        if not product_ids:
            return result
        stmt = select(ProductCategory).where(col(ProductCategory.product_id).in_(product_ids))
        for link in session.exec(stmt).all():
            result[link.product_id].append(link.category_id)
        return result

    def reconcile_categories(
        self,
        session: Session,
        product_id: uuid.UUID,
        category_ids: list[uuid.UUID],
    ) -> None:
        """
        Make the product's links match `category_ids` by diff: stale links
        are deleted, missing ones inserted. Nothing is committed here; the
        caller commits together with the product row.
        """
        stmt = select(ProductCategory).where(ProductCategory.product_id == product_id)
        current = {link.category_id: link for link in session.exec(stmt).all()}
        wanted = list(dict.fromkeys(category_ids))

        for category_id, link in current.items():
            if category_id not in wanted:
                session.delete(link)
        for category_id in wanted:
            if category_id not in current:
                session.add(ProductCategory(product_id=product_id, category_id=category_id))

    def delete_links_for_category(self, session: Session, category_id: uuid.UUID) -> None:
        stmt = select(ProductCategory).where(ProductCategory.category_id == category_id)
        for link in session.exec(stmt).all():
            session.delete(link)

    def delete_with_links(self, session: Session, product: Product) -> None:
        """Delete association rows, then the product, in one commit."""
        stmt = select(ProductCategory).where(ProductCategory.product_id == product.id)
        for link in session.exec(stmt).all():
            session.delete(link)
        self.flush(session)
        session.delete(product)
        self.commit(session)

    def detach_brand(self, session: Session, brand_id: uuid.UUID) -> None:
        stmt = select(Product).where(Product.brand_id == brand_id)
        for product in session.exec(stmt).all():
            product.brand_id = None
            session.add(product)
