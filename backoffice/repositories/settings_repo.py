# backoffice/repositories/settings_repo.py
from typing import TypeVar

from sqlmodel import Session, SQLModel, select

from backoffice.models.settings import AboutSettings, BlogSettings, SiteSettings
from backoffice.repositories.base import BaseRepository

SingletonT = TypeVar("SingletonT", bound=SQLModel)


class SettingsRepository(BaseRepository):
    """
    Data access for the singleton settings tables.

    Each table is meant to hold exactly one row. No row yet is a normal
    state (fresh project); callers fall back to model defaults.
    """

    def get_singleton(self, session: Session, model: type[SingletonT]) -> SingletonT | None:
        return session.exec(select(model).limit(1)).first()

    def get_site(self, session: Session) -> SiteSettings | None:
        return self.get_singleton(session, SiteSettings)

    def get_about(self, session: Session) -> AboutSettings | None:
        return self.get_singleton(session, AboutSettings)

    def get_blog(self, session: Session) -> BlogSettings | None:
        return self.get_singleton(session, BlogSettings)
