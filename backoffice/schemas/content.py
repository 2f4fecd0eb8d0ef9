# backoffice/schemas/content.py
import uuid
from datetime import datetime
from typing import Literal

from pydantic import ConfigDict, field_validator
from sqlmodel import SQLModel, Field

ScriptLocation = Literal["head", "body_start", "body_end"]


# ----- Legal pages -----


class LegalPageRead(SQLModel):
    id: uuid.UUID
    slug: str
    title: str
    content: str
    is_active: bool
    updated_at: datetime


class LegalPageSave(SQLModel):
    """Legal page editor; the slug comes from the URL."""

    model_config = ConfigDict(extra="forbid")

    title: str = Field(max_length=255)
    content: str = ""
    is_active: bool = True

    @field_validator("title")
    @classmethod
    def not_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title cannot be empty")
        return v


# ----- Custom scripts -----


class CustomScriptRead(SQLModel):
    id: uuid.UUID
    name: str
    description: str
    content: str
    location: str
    is_active: bool
    created_at: datetime
    updated_at: datetime


class CustomScriptSave(SQLModel):
    model_config = ConfigDict(extra="forbid")

    name: str = Field(max_length=255)
    description: str = ""
    content: str
    location: ScriptLocation = "head"
    is_active: bool = True

    @field_validator("name", "content")
    @classmethod
    def not_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("field cannot be empty")
        return v


class PublicScript(SQLModel):
    id: uuid.UUID
    name: str
    content: str


class PublicScripts(SQLModel):
    """Active scripts grouped by where the site injects them."""

    head: list[PublicScript] = Field(default_factory=list)
    body_start: list[PublicScript] = Field(default_factory=list)
    body_end: list[PublicScript] = Field(default_factory=list)
