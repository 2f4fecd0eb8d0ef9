# backoffice/services/blog_service.py
import logging
import uuid
from datetime import datetime, timezone

from fastapi import HTTPException, status
from sqlmodel import Session

from backoffice.core.assets import AssetLifecycle, UploadedAsset, validate_image
from backoffice.core.auth import AuthContext
from backoffice.core.slugs import ensure_unique_slug, slugify
from backoffice.core.storage_utils import AssetStore, now_ms
from backoffice.models.blog import BlogCategory, BlogPost
from backoffice.repositories.blog_repo import BlogRepository
from backoffice.schemas.blog import BlogCategorySave, BlogPostSave

logger = logging.getLogger(__name__)


class BlogService:
    """
    Business logic for blog posts and blog categories.

    Responsibilities:
      - slug normalisation & uniqueness
      - publish bookkeeping (published_at stamped once, cleared on unpublish)
      - author / SEO defaults
      - cover image at blog/<id>-<ts>
    """

    def __init__(self, repo: BlogRepository):
        self.repo = repo

    # ----- Posts -----

    def list_posts(
        self,
        session: Session,
        skip: int = 0,
        limit: int = 50,
        only_published: bool = False,
        category: str | None = None,
        search: str | None = None,
    ) -> list[BlogPost]:
        """
        `category` accepts either an id or a slug.
        """
        category_id = None
        category_slug = None
        if category:
            try:
                category_id = uuid.UUID(category)
            except ValueError:
                category_slug = category

        return self.repo.list_posts(
            session,
            skip=skip,
            limit=limit,
            only_published=only_published,
            category_id=category_id,
            category_slug=category_slug,
            search=search,
        )

    def get_post(self, session: Session, post_id: uuid.UUID) -> BlogPost:
        post = self.repo.get_post(session, post_id)
        if not post:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Post not found",
            )
        return post

    def get_published_by_slug(self, session: Session, slug: str) -> BlogPost:
        post = self.repo.get_post_by_slug(session, slug)
        if not post or not post.is_published:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Post not found",
            )
        return post

    def save_post(
        self,
        session: Session,
        store: AssetStore,
        ctx: AuthContext,
        payload: BlogPostSave,
        post_id: uuid.UUID | None = None,
        image: UploadedAsset | None = None,
    ) -> BlogPost:
        """
        Create (no id / unknown id) or update a post.
        """
        validate_image(image)
        if payload.category_id and not self.repo.get_category(session, payload.category_id):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Unknown category_id",
            )

        post = self.repo.get_post(session, post_id) if post_id else None
        if post is None:
            post = BlogPost(id=post_id or uuid.uuid4(), title=payload.title, slug="", content="")

        slug = ensure_unique_slug(
            session,
            BlogPost,
            slugify(payload.slug, fallback="post"),
            exclude_id=post.id,
        )
        now = datetime.now(timezone.utc)

        with AssetLifecycle(store) as assets:
            assets.sync_field(
                post, "image_url", payload.image_url, image, f"blog/{post.id}-{now_ms()}"
            )

            post.title = payload.title
            post.slug = slug
            post.excerpt = payload.excerpt
            post.content = payload.content
            post.category_id = payload.category_id
            post.author = (payload.author or "").strip() or ctx.author_name

            if payload.is_published:
                post.published_at = post.published_at or now
            else:
                post.published_at = None
            post.is_published = payload.is_published

            post.meta_title = payload.meta_title or payload.title
            post.meta_description = payload.meta_description or payload.excerpt or None
            post.meta_keywords = payload.meta_keywords
            post.updated_at = now
            post = self.repo.save(session, post)

        logger.info(f"Saved blog post {post.id} ({post.slug})")
        return post

    def remove_image(self, session: Session, store: AssetStore, post_id: uuid.UUID) -> BlogPost:
        post = self.get_post(session, post_id)
        if not post.image_url:
            return post

        with AssetLifecycle(store) as assets:
            assets.drop(post.image_url)
            post.image_url = None
            post.updated_at = datetime.now(timezone.utc)
            return self.repo.save(session, post)

    def delete_post(self, session: Session, store: AssetStore, post_id: uuid.UUID) -> None:
        """
        Delete the cover image, then the row.
        """
        post = self.get_post(session, post_id)
        if post.image_url:
            store.remove_url(post.image_url)
        self.repo.delete(session, post)
        logger.info(f"Deleted blog post {post_id}")

    # ----- Categories -----

    def list_categories(self, session: Session) -> list[BlogCategory]:
        return self.repo.list_categories(session)

    def get_category(self, session: Session, category_id: uuid.UUID) -> BlogCategory:
        category = self.repo.get_category(session, category_id)
        if not category:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Blog category not found",
            )
        return category

    def save_category(
        self,
        session: Session,
        payload: BlogCategorySave,
        category_id: uuid.UUID | None = None,
    ) -> BlogCategory:
        category = self.repo.get_category(session, category_id) if category_id else None
        if category is None:
            category = BlogCategory(id=category_id or uuid.uuid4(), name=payload.name, slug="")

        category.slug = ensure_unique_slug(
            session,
            BlogCategory,
            slugify(payload.name, fallback="category"),
            exclude_id=category.id,
        )
        category.name = payload.name
        return self.repo.save(session, category)

    def delete_category(self, session: Session, category_id: uuid.UUID) -> None:
        """
        Posts of the category are kept, uncategorised.
        """
        category = self.get_category(session, category_id)
        self.repo.detach_category(session, category.id)
        self.repo.flush(session)
        self.repo.delete(session, category)
