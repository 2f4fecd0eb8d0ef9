# backoffice/routers/blog.py
import uuid

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from sqlmodel import Session

from backoffice.core.assets import UploadedAsset
from backoffice.core.auth import AuthContext, require_admin
from backoffice.core.forms import parse_form_data
from backoffice.core.storage_utils import AssetStore, get_asset_store
from backoffice.database import get_session
from backoffice.repositories.blog_repo import BlogRepository
from backoffice.schemas.blog import (
    BlogCategoryRead,
    BlogCategorySave,
    BlogPostRead,
    BlogPostSave,
)
from backoffice.services.blog_service import BlogService

router = APIRouter(prefix="/blog", tags=["Blog"])
admin_router = APIRouter(
    prefix="/admin/blog",
    tags=["Admin Blog"],
    dependencies=[Depends(require_admin)],
)

repo = BlogRepository()
service = BlogService(repo)


# -------- Public endpoints --------


@router.get("/posts", response_model=list[BlogPostRead])
def list_published_posts(
    session: Session = Depends(get_session),
    skip: int = 0,
    limit: int = 20,
    category: str | None = None,
):
    """
    Published posts, newest first. `category` is an id or a slug.
    """
    return service.list_posts(
        session,
        skip=skip,
        limit=limit,
        only_published=True,
        category=category,
    )


@router.get("/posts/{slug}", response_model=BlogPostRead)
def get_published_post(slug: str, session: Session = Depends(get_session)):
    return service.get_published_by_slug(session, slug)


@router.get("/categories", response_model=list[BlogCategoryRead])
def list_public_categories(session: Session = Depends(get_session)):
    return service.list_categories(session)


# -------- Admin: posts --------


@admin_router.get("/posts", response_model=list[BlogPostRead])
def list_posts(
    session: Session = Depends(get_session),
    skip: int = 0,
    limit: int = 50,
    category: str | None = None,
    search: str | None = None,
):
    """
    All posts (drafts included), newest first.
    """
    return service.list_posts(
        session,
        skip=skip,
        limit=limit,
        category=category,
        search=search,
    )


@admin_router.get("/posts/{post_id}", response_model=BlogPostRead)
def get_post(post_id: uuid.UUID, session: Session = Depends(get_session)):
    return service.get_post(session, post_id)


@admin_router.post("/posts", response_model=BlogPostRead, status_code=status.HTTP_201_CREATED)
def create_post(
    data: str = Form(...),
    image: UploadFile | None = File(None),
    ctx: AuthContext = Depends(require_admin),
    session: Session = Depends(get_session),
    store: AssetStore = Depends(get_asset_store),
):
    """
    Multipart:
      - data: JSON BlogPostSave
      - image: optional cover image
    """
    payload = parse_form_data(BlogPostSave, data)
    return service.save_post(session, store, ctx, payload, image=UploadedAsset.from_upload(image))


@admin_router.put("/posts/{post_id}", response_model=BlogPostRead)
def save_post(
    post_id: uuid.UUID,
    data: str = Form(...),
    image: UploadFile | None = File(None),
    ctx: AuthContext = Depends(require_admin),
    session: Session = Depends(get_session),
    store: AssetStore = Depends(get_asset_store),
):
    payload = parse_form_data(BlogPostSave, data)
    return service.save_post(
        session,
        store,
        ctx,
        payload,
        post_id=post_id,
        image=UploadedAsset.from_upload(image),
    )


@admin_router.delete("/posts/{post_id}/image", response_model=BlogPostRead)
def remove_post_image(
    post_id: uuid.UUID,
    session: Session = Depends(get_session),
    store: AssetStore = Depends(get_asset_store),
):
    return service.remove_image(session, store, post_id)


@admin_router.delete("/posts/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_post(
    post_id: uuid.UUID,
    session: Session = Depends(get_session),
    store: AssetStore = Depends(get_asset_store),
):
    service.delete_post(session, store, post_id)
    return None


# -------- Admin: categories --------


@admin_router.get("/categories", response_model=list[BlogCategoryRead])
def list_categories(session: Session = Depends(get_session)):
    return service.list_categories(session)


@admin_router.post(
    "/categories",
    response_model=BlogCategoryRead,
    status_code=status.HTTP_201_CREATED,
)
def create_category(
    payload: BlogCategorySave,
    session: Session = Depends(get_session),
):
    return service.save_category(session, payload)


@admin_router.put("/categories/{category_id}", response_model=BlogCategoryRead)
def save_category(
    category_id: uuid.UUID,
    payload: BlogCategorySave,
    session: Session = Depends(get_session),
):
    return service.save_category(session, payload, category_id=category_id)


@admin_router.delete("/categories/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_category(
    category_id: uuid.UUID,
    session: Session = Depends(get_session),
):
    """
    Delete a category; its posts become uncategorised.
    """
    service.delete_category(session, category_id)
    return None
