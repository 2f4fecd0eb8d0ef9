# backoffice/schemas/auth.py
import uuid

from sqlmodel import SQLModel


class AdminMe(SQLModel):
    """
    Identity behind the current admin session.
    """

    user_id: uuid.UUID
    email: str
    author_name: str
