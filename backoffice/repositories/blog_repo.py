# backoffice/repositories/blog_repo.py
import uuid

from sqlmodel import Session, col, select

from backoffice.models.blog import BlogCategory, BlogPost
from backoffice.repositories.base import BaseRepository


class BlogRepository(BaseRepository):
    """
    Data access layer for BlogPost & BlogCategory.
    """

    # ----- Posts -----

    def get_post(self, session: Session, post_id: uuid.UUID) -> BlogPost | None:
        return session.get(BlogPost, post_id)

    def get_post_by_slug(self, session: Session, slug: str) -> BlogPost | None:
        stmt = select(BlogPost).where(BlogPost.slug == slug)
        return session.exec(stmt).first()

    def list_posts(
        self,
        session: Session,
        skip: int = 0,
        limit: int = 50,
        only_published: bool = False,
        category_id: uuid.UUID | None = None,
        category_slug: str | None = None,
        search: str | None = None,
    ) -> list[BlogPost]:
        stmt = select(BlogPost)
        if only_published:
            stmt = stmt.where(BlogPost.is_published == True)
            order = [col(BlogPost.published_at).desc(), col(BlogPost.created_at).desc()]
        else:
            order = [col(BlogPost.created_at).desc()]
        if category_id is not None:
            stmt = stmt.where(BlogPost.category_id == category_id)
        if category_slug:
            stmt = stmt.join(BlogCategory, BlogCategory.id == BlogPost.category_id).where(
                BlogCategory.slug == category_slug
            )
        if search:
            stmt = stmt.where(col(BlogPost.title).ilike(f"%{search}%"))
        stmt = stmt.order_by(*order).offset(skip).limit(limit)
        return session.exec(stmt).all()

    def detach_category(self, session: Session, category_id: uuid.UUID) -> None:
        stmt = select(BlogPost).where(BlogPost.category_id == category_id)
        for post in session.exec(stmt).all():
            post.category_id = None
            session.add(post)

    # ----- Categories -----

    def get_category(self, session: Session, category_id: uuid.UUID) -> BlogCategory | None:
        return session.get(BlogCategory, category_id)

    def list_categories(self, session: Session) -> list[BlogCategory]:
        stmt = select(BlogCategory).order_by(BlogCategory.name)
        return session.exec(stmt).all()
