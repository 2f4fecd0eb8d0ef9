# backoffice/services/settings_service.py
from datetime import datetime, timezone

from sqlmodel import Session

from backoffice.core.assets import (
    MAX_LOGO_BYTES,
    AssetLifecycle,
    UploadedAsset,
    validate_image,
)
from backoffice.core.storage_utils import AssetStore, now_ms
from backoffice.models.settings import AboutSettings, BlogSettings, SiteSettings
from backoffice.repositories.settings_repo import SettingsRepository
from backoffice.schemas.settings import (
    SHARE_NETWORKS,
    AboutSettingsUpdate,
    BlogSettingsUpdate,
    ContactSettingsUpdate,
    CtaSettingsUpdate,
    FooterSettingsUpdate,
    SocialSettingsUpdate,
)

PAGE_HEADER_FIELDS: dict[str, str] = {
    "products": "products_bg_url",
    "services": "services_bg_url",
}


class SettingsService:
    """
    Business logic for the singleton settings rows.

    Responsibilities:
      - treat "no row yet" as defaults, create the row on first save
      - keep image fields and the site-assets bucket in sync
      - section-wise updates of site_settings (CTA, contact, footer, ...)
    """

    def __init__(self, repo: SettingsRepository):
        self.repo = repo

    @staticmethod
    def _touch(row) -> None:
        row.updated_at = datetime.now(timezone.utc)

    def _clear_image(self, session: Session, store: AssetStore, row, field: str):
        """
        Explicit "remove image": clear the field, save, then delete the file.
        """
        if not getattr(row, field):
            return row

        with AssetLifecycle(store) as assets:
            assets.drop(getattr(row, field))
            setattr(row, field, None)
            self._touch(row)
            return self.repo.save(session, row)

    # ----- site_settings -----

    def get_site_settings(self, session: Session) -> SiteSettings:
        return self.repo.get_site(session) or SiteSettings()

    def update_cta(
        self,
        session: Session,
        store: AssetStore,
        payload: CtaSettingsUpdate,
        background: UploadedAsset | None = None,
    ) -> SiteSettings:
        """
        Save the CTA block.

        - A new background is uploaded to cta/bg-<ts> before the row write.
        - The previous background is deleted only once the row is saved.
        """
        validate_image(background)
        row = self.get_site_settings(session)

        with AssetLifecycle(store) as assets:
            assets.sync_field(
                row,
                "cta_bg_image",
                payload.cta_bg_image,
                background,
                f"cta/bg-{now_ms()}",
            )
            for field, value in payload.model_dump(exclude={"cta_bg_image"}).items():
                setattr(row, field, value)
            self._touch(row)
            return self.repo.save(session, row)

    def update_contact(self, session: Session, payload: ContactSettingsUpdate) -> SiteSettings:
        row = self.get_site_settings(session)
        for field, value in payload.model_dump().items():
            setattr(row, field, value)
        self._touch(row)
        return self.repo.save(session, row)

    def update_footer(self, session: Session, payload: FooterSettingsUpdate) -> SiteSettings:
        row = self.get_site_settings(session)
        data = payload.model_dump()
        row.footer_description = data["footer_description"]
        row.footer_copyright = data["footer_copyright"]
        # JSON columns: assign a new list so the change is flushed
        row.footer_company_links = list(data["footer_company_links"])
        self._touch(row)
        return self.repo.save(session, row)

    def update_social(self, session: Session, payload: SocialSettingsUpdate) -> SiteSettings:
        row = self.get_site_settings(session)
        row.social_links = list(payload.model_dump()["social_links"])
        self._touch(row)
        return self.repo.save(session, row)

    def upload_branding_image(
        self,
        session: Session,
        store: AssetStore,
        field: str,
        upload: UploadedAsset,
    ) -> SiteSettings:
        """
        Upload a logo/favicon and save it immediately.

        Fixed path brand/<field> with overwrite, so replacing never leaves
        an old file behind; the cache buster makes browsers refetch it.
        """
        validate_image(upload, MAX_LOGO_BYTES)
        row = self.get_site_settings(session)

        with AssetLifecycle(store) as assets:
            setattr(row, field, assets.replace(getattr(row, field), upload, f"brand/{field}"))
            self._touch(row)
            return self.repo.save(session, row)

    def upload_page_header(
        self,
        session: Session,
        store: AssetStore,
        page: str,
        upload: UploadedAsset,
    ) -> SiteSettings:
        """
        Replace the background image of a public page header
        (page-headers/<page>-<ts>). Saved immediately.
        """
        validate_image(upload)
        field = PAGE_HEADER_FIELDS[page]
        row = self.get_site_settings(session)

        with AssetLifecycle(store) as assets:
            new_url = assets.replace(getattr(row, field), upload, f"page-headers/{page}-{now_ms()}")
            setattr(row, field, new_url)
            self._touch(row)
            return self.repo.save(session, row)

    def remove_site_image(self, session: Session, store: AssetStore, field: str) -> SiteSettings:
        """
        Clear an image field, save, then delete the file.
        """
        row = self.repo.get_site(session)
        if row is None:
            return SiteSettings()
        return self._clear_image(session, store, row, field)

    # ----- about_settings -----

    def get_about(self, session: Session) -> AboutSettings:
        return self.repo.get_about(session) or AboutSettings()

    def update_about(
        self,
        session: Session,
        store: AssetStore,
        payload: AboutSettingsUpdate,
        hero: UploadedAsset | None = None,
        intro: UploadedAsset | None = None,
    ) -> AboutSettings:
        validate_image(hero)
        validate_image(intro)
        row = self.get_about(session)
        ts = now_ms()

        with AssetLifecycle(store) as assets:
            assets.sync_field(
                row, "hero_image_url", payload.hero_image_url, hero, f"about/hero_image_url-{ts}"
            )
            assets.sync_field(
                row, "intro_image_url", payload.intro_image_url, intro, f"about/intro_image_url-{ts}"
            )
            data = payload.model_dump(exclude={"hero_image_url", "intro_image_url"})
            for field, value in data.items():
                setattr(row, field, value)
            self._touch(row)
            return self.repo.save(session, row)

    def remove_about_image(self, session: Session, store: AssetStore, field: str) -> AboutSettings:
        row = self.repo.get_about(session)
        if row is None:
            return AboutSettings()
        return self._clear_image(session, store, row, field)

    # ----- blog_settings -----

    def get_blog_settings(self, session: Session) -> BlogSettings:
        return self.repo.get_blog(session) or BlogSettings()

    def update_blog_settings(
        self,
        session: Session,
        store: AssetStore,
        payload: BlogSettingsUpdate,
        hero: UploadedAsset | None = None,
        logos: dict[str, UploadedAsset | None] | None = None,
    ) -> BlogSettings:
        """
        Save blog hero + share buttons.

        `logos` maps a network name (facebook, twitter, ...) to a new icon.
        """
        logos = logos or {}
        validate_image(hero)
        for upload in logos.values():
            validate_image(upload, MAX_LOGO_BYTES)

        row = self.get_blog_settings(session)
        ts = now_ms()
        image_fields = {"hero_image_url"} | {f"logo_{n}" for n in SHARE_NETWORKS}

        with AssetLifecycle(store) as assets:
            assets.sync_field(
                row, "hero_image_url", payload.hero_image_url, hero, f"blog/settings-hero-{ts}"
            )
            for network in SHARE_NETWORKS:
                field = f"logo_{network}"
                assets.sync_field(
                    row,
                    field,
                    getattr(payload, field),
                    logos.get(network),
                    f"blog/share-{network}-{ts}",
                )
            for field, value in payload.model_dump(exclude=image_fields).items():
                setattr(row, field, value)
            self._touch(row)
            return self.repo.save(session, row)

    def remove_blog_settings_image(
        self,
        session: Session,
        store: AssetStore,
        field: str,
    ) -> BlogSettings:
        row = self.repo.get_blog(session)
        if row is None:
            return BlogSettings()
        return self._clear_image(session, store, row, field)
