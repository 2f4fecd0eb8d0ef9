# backoffice/services/marketing_service.py
import logging
import uuid
from datetime import datetime, timezone

from fastapi import HTTPException, status
from sqlmodel import Session

from backoffice.core.assets import AssetLifecycle, UploadedAsset, resolve_kept_url, validate_image
from backoffice.core.storage_utils import AssetStore
from backoffice.models.marketing import HeroSlide, PromotionalBanner
from backoffice.repositories.marketing_repo import BannerRepository, HeroSlideRepository
from backoffice.schemas.marketing import BannerSave, HeroSlideSave

logger = logging.getLogger(__name__)


class HeroSlideService:
    """
    Business logic for the home carousel.

    Image lives at hero-slides/<id> (overwritten in place).
    """

    def __init__(self, repo: HeroSlideRepository):
        self.repo = repo

    def list_slides(self, session: Session, only_active: bool = False) -> list[HeroSlide]:
        return self.repo.list_slides(session, only_active=only_active)

    def get_slide(self, session: Session, slide_id: uuid.UUID) -> HeroSlide:
        slide = self.repo.get_by_id(session, slide_id)
        if not slide:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Slide not found",
            )
        return slide

    def save_slide(
        self,
        session: Session,
        store: AssetStore,
        payload: HeroSlideSave,
        slide_id: uuid.UUID | None = None,
        image: UploadedAsset | None = None,
    ) -> HeroSlide:
        """
        Create (no id / unknown id) or update a slide.

        - 400 when the slide would end up with neither title nor image.
        """
        validate_image(image)

        slide = self.repo.get_by_id(session, slide_id) if slide_id else None
        if slide is None:
            slide = HeroSlide(id=slide_id or uuid.uuid4())

        kept = resolve_kept_url(slide.image_url, payload.image_url, "image_url")
        if not payload.title and image is None and not kept:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="A slide needs a title or an image",
            )

        with AssetLifecycle(store) as assets:
            assets.sync_field(slide, "image_url", payload.image_url, image, f"hero-slides/{slide.id}")
            slide.title = payload.title
            slide.description = payload.description
            slide.button_text = payload.button_text
            slide.button_link = payload.button_link
            slide.is_active = payload.is_active
            slide.order = payload.order
            slide.updated_at = datetime.now(timezone.utc)
            slide = self.repo.save(session, slide)

        logger.info(f"Saved hero slide {slide.id}")
        return slide

    def delete_slide(self, session: Session, store: AssetStore, slide_id: uuid.UUID) -> None:
        """
        Delete the image file, then the row.
        """
        slide = self.get_slide(session, slide_id)
        if slide.image_url:
            store.remove_url(slide.image_url)
        self.repo.delete(session, slide)
        logger.info(f"Deleted hero slide {slide_id}")


class BannerService:
    """
    Business logic for promotional banners.

    Image is mandatory and lives at banners/<id> (overwritten in place).
    """

    def __init__(self, repo: BannerRepository):
        self.repo = repo

    def list_banners(self, session: Session, only_active: bool = False) -> list[PromotionalBanner]:
        return self.repo.list_banners(session, only_active=only_active)

    def get_banner(self, session: Session, banner_id: uuid.UUID) -> PromotionalBanner:
        banner = self.repo.get_by_id(session, banner_id)
        if not banner:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Banner not found",
            )
        return banner

    def save_banner(
        self,
        session: Session,
        store: AssetStore,
        payload: BannerSave,
        banner_id: uuid.UUID | None = None,
        image: UploadedAsset | None = None,
    ) -> PromotionalBanner:
        """
        Create (no id / unknown id) or update a banner.

        - 400 when there is neither a kept image nor a new one.
        """
        validate_image(image)

        banner = self.repo.get_by_id(session, banner_id) if banner_id else None
        if banner is None:
            banner = PromotionalBanner(id=banner_id or uuid.uuid4(), image_url="")

        kept = resolve_kept_url(banner.image_url or None, payload.image_url, "image_url")
        if image is None and not kept:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="A banner needs an image",
            )

        with AssetLifecycle(store) as assets:
            assets.sync_field(banner, "image_url", payload.image_url, image, f"banners/{banner.id}")
            banner.title = payload.title
            banner.link = payload.link
            banner.is_active = payload.is_active
            banner.sort_order = payload.sort_order
            banner = self.repo.save(session, banner)

        logger.info(f"Saved banner {banner.id}")
        return banner

    def delete_banner(self, session: Session, store: AssetStore, banner_id: uuid.UUID) -> None:
        """
        Delete the image file, then the row.
        """
        banner = self.get_banner(session, banner_id)
        store.remove_url(banner.image_url)
        self.repo.delete(session, banner)
        logger.info(f"Deleted banner {banner_id}")
