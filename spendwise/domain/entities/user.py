"""
User Entity

Account holder of the expense tracker.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from spendwise.domain.base import utc_now


class User(SQLModel, table=True):
    """
    User entity - one account per email address.

    Business Rules:
    - Email must be unique across all users (case-sensitive as stored)
    - Password stored as bcrypt hash, never the plaintext
    - password_hash only changes through a confirmed password reset
    - currency is a 3-letter display preference
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars
    name: Optional[str] = Field(default=None, max_length=255)
    currency: str = Field(default="USD", max_length=3)

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
