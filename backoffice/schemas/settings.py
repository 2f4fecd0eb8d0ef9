# backoffice/schemas/settings.py
import uuid
from datetime import datetime
from typing import Literal

from pydantic import ConfigDict, field_validator
from sqlmodel import SQLModel, Field

BrandingField = Literal["logo_url_light", "logo_url_dark", "favicon_url", "favicon_url_dark"]
PageHeader = Literal["products", "services"]
SiteImageField = Literal[
    "logo_url_light",
    "logo_url_dark",
    "favicon_url",
    "favicon_url_dark",
    "cta_bg_image",
    "products_bg_url",
    "services_bg_url",
]
AboutImageField = Literal["hero_image_url", "intro_image_url"]
ShareNetwork = Literal["facebook", "twitter", "linkedin", "whatsapp"]
BlogSettingsImageField = Literal[
    "hero_image_url",
    "logo_facebook",
    "logo_twitter",
    "logo_linkedin",
    "logo_whatsapp",
]

SHARE_NETWORKS: tuple[str, ...] = ("facebook", "twitter", "linkedin", "whatsapp")


class LinkItem(SQLModel):
    label: str = ""
    url: str = ""


class SocialLink(SQLModel):
    platform: str
    url: str
    icon: str | None = None


class AboutValue(SQLModel):
    title: str = ""
    desc: str = ""
    icon: str = "Shield"


# ----- site_settings -----


class SiteSettingsRead(SQLModel):
    """
    Full site_settings row as consumed by the public site and the admin.
    """

    id: uuid.UUID

    logo_url_light: str | None
    logo_url_dark: str | None
    favicon_url: str | None
    favicon_url_dark: str | None

    cta_badge: str
    cta_title: str
    cta_description: str
    cta_button_primary_text: str
    cta_button_primary_url: str
    cta_button_secondary_text: str
    cta_button_secondary_url: str
    cta_bg_image: str | None

    contact_address: str
    contact_phone_1: str
    contact_phone_2: str
    contact_email_1: str
    contact_email_2: str
    contact_schedule_week: str
    contact_schedule_weekend: str
    contact_map_url: str
    contact_response_time: str
    contact_title: str
    contact_subtitle: str
    contact_hero_title: str
    contact_hero_subtitle: str

    footer_description: str
    footer_copyright: str
    footer_company_links: list[LinkItem]
    social_links: list[SocialLink]

    products_bg_url: str | None
    services_bg_url: str | None

    updated_at: datetime


class CtaSettingsUpdate(SQLModel):
    """
    CTA block form state.

    `cta_bg_image` is the URL the form currently shows: the stored URL to
    keep it, null to clear it. A new background is sent as a file.
    """

    model_config = ConfigDict(extra="forbid")

    cta_badge: str = ""
    cta_title: str
    cta_description: str = ""
    cta_button_primary_text: str = ""
    cta_button_primary_url: str = ""
    cta_button_secondary_text: str = ""
    cta_button_secondary_url: str = ""
    cta_bg_image: str | None = None

    @field_validator("cta_title")
    @classmethod
    def not_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("cta_title cannot be empty")
        return v


class ContactSettingsUpdate(SQLModel):
    model_config = ConfigDict(extra="forbid")

    contact_address: str = ""
    contact_phone_1: str = ""
    contact_phone_2: str = ""
    contact_email_1: str = ""
    contact_email_2: str = ""
    contact_schedule_week: str = ""
    contact_schedule_weekend: str = ""
    contact_map_url: str = ""
    contact_response_time: str = ""
    contact_title: str = ""
    contact_subtitle: str = ""
    contact_hero_title: str = ""
    contact_hero_subtitle: str = ""


class FooterSettingsUpdate(SQLModel):
    model_config = ConfigDict(extra="forbid")

    footer_description: str = ""
    footer_copyright: str = ""
    footer_company_links: list[LinkItem] = Field(default_factory=list)


class SocialSettingsUpdate(SQLModel):
    model_config = ConfigDict(extra="forbid")

    social_links: list[SocialLink] = Field(default_factory=list)


# ----- about_settings -----


class AboutSettingsBase(SQLModel):
    hero_title: str = ""
    hero_subtitle: str = ""
    hero_image_url: str | None = None
    intro_title: str = ""
    intro_text: str = ""
    intro_image_url: str | None = None
    mission_title: str = ""
    mission_text: str = ""
    vision_title: str = ""
    vision_text: str = ""
    values: list[AboutValue] = Field(default_factory=list)
    benefits: list[str] = Field(default_factory=list)


class AboutSettingsRead(AboutSettingsBase):
    id: uuid.UUID
    updated_at: datetime


class AboutSettingsUpdate(AboutSettingsBase):
    """
    About page form state. Image fields follow the same keep/clear rule
    as the CTA background; new images arrive as files.
    """

    model_config = ConfigDict(extra="forbid")


# ----- blog_settings -----


class BlogSettingsBase(SQLModel):
    hero_title: str = "Blog"
    hero_subtitle: str = ""
    hero_image_url: str | None = None
    share_facebook: bool = True
    share_twitter: bool = True
    share_linkedin: bool = True
    share_whatsapp: bool = True
    logo_facebook: str | None = None
    logo_twitter: str | None = None
    logo_linkedin: str | None = None
    logo_whatsapp: str | None = None


class BlogSettingsRead(BlogSettingsBase):
    id: uuid.UUID
    updated_at: datetime


class BlogSettingsUpdate(BlogSettingsBase):
    model_config = ConfigDict(extra="forbid")
