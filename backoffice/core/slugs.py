# backoffice/core/slugs.py
import re
import unicodedata
import uuid
from typing import Any

from sqlmodel import Session, select


def slugify(raw: str, fallback: str = "item") -> str:
    """
    URL slug from a title or name:
      - lowercase, diacritics stripped ("Año" -> "ano")
      - anything outside [a-z0-9-] dropped
      - whitespace runs -> single '-'
      - repeated '-' collapsed, leading/trailing '-' stripped
    """
    value = unicodedata.normalize("NFD", raw.strip().lower())
    value = "".join(ch for ch in value if not unicodedata.combining(ch))
    value = re.sub(r"[^a-z0-9\s-]", "", value)
    value = re.sub(r"\s+", "-", value)
    value = re.sub(r"-+", "-", value)
    value = value.strip("-")
    return value or fallback


def ensure_unique_slug(
    session: Session,
    model: Any,
    base_slug: str,
    exclude_id: uuid.UUID | None = None,
) -> str:
    """
    Ensure slug is unique in `model`'s table by appending -2, -3, ... if
    needed. The row being saved (`exclude_id`) does not count as a clash.
    """
    slug = base_slug
    i = 2
    while True:
        stmt = select(model).where(model.slug == slug)
        existing = session.exec(stmt).first()
        if existing is None or existing.id == exclude_id:
            return slug
        slug = f"{base_slug}-{i}"
        i += 1
