"""
PasswordResetToken Entity

Outstanding password reset grants.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from spendwise.domain.base import utc_now


class PasswordResetToken(SQLModel, table=True):
    """
    PasswordResetToken entity - a single-use grant to reset one user's password.

    Business Rules:
    - Expires 1 hour after issuance
    - Only the SHA-256 hash of the random token is stored
    - A new request for the same email deletes all previous grants
    - Deleted when consumed; expired grants are left until overwritten
    """

    __tablename__ = "password_reset_tokens"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    email: str = Field(max_length=255)
    token_hash: str = Field(unique=True, max_length=64)  # SHA-256 output

    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_password_reset_email", "email"),
        Index("idx_password_reset_expires_at", "expires_at"),
    )

    def is_live(self, now: datetime) -> bool:
        """A grant is live strictly before its expiry instant"""
        return now < self.expires_at
