# backoffice/repositories/marketing_repo.py
import uuid

from sqlmodel import Session, col, select

from backoffice.models.marketing import HeroSlide, PromotionalBanner
from backoffice.repositories.base import BaseRepository


class HeroSlideRepository(BaseRepository):
    """
    Data access layer for HeroSlide.
    """

    def get_by_id(self, session: Session, slide_id: uuid.UUID) -> HeroSlide | None:
        return session.get(HeroSlide, slide_id)

    def list_slides(self, session: Session, only_active: bool = False) -> list[HeroSlide]:
        """
        Public (active) slides follow `order`; the admin list is newest first.
        """
        stmt = select(HeroSlide)
        if only_active:
            stmt = stmt.where(HeroSlide.is_active == True)
            stmt = stmt.order_by(HeroSlide.order, HeroSlide.created_at)
        else:
            stmt = stmt.order_by(col(HeroSlide.created_at).desc())
        return session.exec(stmt).all()


class BannerRepository(BaseRepository):
    """
    Data access layer for PromotionalBanner.
    """

    def get_by_id(self, session: Session, banner_id: uuid.UUID) -> PromotionalBanner | None:
        return session.get(PromotionalBanner, banner_id)

    def list_banners(self, session: Session, only_active: bool = False) -> list[PromotionalBanner]:
        stmt = select(PromotionalBanner)
        if only_active:
            stmt = stmt.where(PromotionalBanner.is_active == True)
        stmt = stmt.order_by(
            PromotionalBanner.sort_order,
            col(PromotionalBanner.created_at).desc(),
        )
        return session.exec(stmt).all()
