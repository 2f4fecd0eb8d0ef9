# backoffice/models/settings.py
import uuid
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import JSON, Column
from sqlmodel import SQLModel, Field

DEFAULT_FOOTER_LINKS: list[dict[str, str]] = [
    {"label": "Nosotros", "url": "/nosotros"},
    {"label": "Productos", "url": "/productos"},
    {"label": "Servicios", "url": "/servicios"},
    {"label": "Contacto", "url": "/contacto"},
]


class SiteSettings(SQLModel, table=True):
    """
    Singleton row with site-wide configuration.

    Sections sharing this row:
      - branding: logos + favicons (brand/<field>)
      - CTA block (cta/bg-<ts>)
      - contact page texts
      - footer texts + company links
      - social links
      - page header backgrounds (page-headers/<page>-<ts>)
    """

    __tablename__ = "site_settings"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
    )

    # ----- Branding -----
    logo_url_light: str | None = None
    logo_url_dark: str | None = None
    favicon_url: str | None = None
    favicon_url_dark: str | None = None

    # ----- CTA -----
    cta_badge: str = "¿Listo para transformar tu empresa?"
    cta_title: str = "Impulsa tu negocio con tecnología de vanguardia"
    cta_description: str = (
        "Nuestro equipo de expertos está listo para ayudarte a encontrar las "
        "mejores soluciones tecnológicas para tus necesidades empresariales."
    )
    cta_button_primary_text: str = "Solicitar Consulta Gratuita"
    cta_button_primary_url: str = "/contacto"
    cta_button_secondary_text: str = "Ver Catálogo Completo"
    cta_button_secondary_url: str = "/productos"
    cta_bg_image: str | None = None

    # ----- Contact page -----
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

    # ----- Footer -----
    footer_description: str = ""
    footer_copyright: str = ""
    footer_company_links: list[dict[str, Any]] = Field(
        default_factory=lambda: [dict(link) for link in DEFAULT_FOOTER_LINKS],
        sa_column=Column(JSON, nullable=False),
    )

    social_links: list[dict[str, Any]] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False),
    )

    # ----- Page headers -----
    products_bg_url: str | None = None
    services_bg_url: str | None = None

    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Last save (UTC)",
    )


class AboutSettings(SQLModel, table=True):
    """
    Singleton row for the "Nosotros" page.

    Images: hero_image_url, intro_image_url (about/<field>-<ts>).
    """

    __tablename__ = "about_settings"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
    )

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

    # [{title, desc, icon}]
    values: list[dict[str, Any]] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False),
    )
    benefits: list[str] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False),
    )

    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )


class BlogSettings(SQLModel, table=True):
    """
    Singleton row for the blog landing page and share buttons.
    """

    __tablename__ = "blog_settings"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
    )

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

    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )
