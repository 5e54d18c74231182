"""
Reset Token Store

Issues, finds and deletes password reset grants on top of the
password reset token repository.
"""

import hashlib
import secrets
from datetime import datetime, timedelta
from typing import Callable, Optional

from pydantic import BaseModel

from spendwise.app.repositories.password_reset_token_repository import IPasswordResetTokenRepository
from spendwise.domain.base import utc_now
from spendwise.domain.entities import PasswordResetToken

TOKEN_BYTES = 32


class IssuedResetGrant(BaseModel):
    """A freshly created grant, carrying the raw token for out-of-band delivery"""

    token: str
    email: str
    expires_at: datetime


def hash_reset_token(token: str) -> str:
    return hashlib.sha256(token.encode()).hexdigest()


class ResetTokenStore:
    """
    Keyed storage of password reset grants.

    Business Rules:
    - Token is 32 random bytes rendered as 64 hex characters
    - Only the SHA-256 hash of the token is persisted
    - Grant expires ttl after creation (1 hour by default)
    - supersede() must run before create() to keep one grant per email
    """

    def __init__(
        self,
        repository: IPasswordResetTokenRepository,
        ttl: timedelta = timedelta(hours=1),
        clock: Callable[[], datetime] = utc_now,
    ):
        self.repository = repository
        self.ttl = ttl
        self.clock = clock

    async def supersede(self, email: str) -> None:
        await self.repository.delete_all_by_email(email)

    async def create(self, email: str) -> IssuedResetGrant:
        token = secrets.token_hex(TOKEN_BYTES)
        expires_at = self.clock() + self.ttl

        await self.repository.create(
            PasswordResetToken(
                email=email,
                token_hash=hash_reset_token(token),
                expires_at=expires_at,
            )
        )
        return IssuedResetGrant(token=token, email=email, expires_at=expires_at)

    async def lookup(self, token: str) -> Optional[PasswordResetToken]:
        return await self.repository.get_by_token_hash(hash_reset_token(token))

    async def consume(self, token: str) -> bool:
        """
        Delete the grant for a token.

        Returns False when no row was deleted, i.e. a concurrent caller
        consumed the grant after our lookup.
        """
        deleted = await self.repository.delete_by_token_hash(hash_reset_token(token))
        return deleted == 1


ResetTokenStoreFactory = Callable[[IPasswordResetTokenRepository], ResetTokenStore]
