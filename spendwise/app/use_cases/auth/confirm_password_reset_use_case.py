"""
Confirm Password Reset Use Case

Handles password reset confirmation with single-use grant validation.
"""

import logging
from datetime import datetime
from typing import Callable

from spendwise.app.services.password_hasher import (
    IPasswordHasher,
    MAX_PASSWORD_BYTES,
    exceeds_max_password_bytes,
)
from spendwise.app.services.reset_token_store import ResetTokenStore, ResetTokenStoreFactory
from spendwise.app.services.unit_of_work import UnitOfWork
from spendwise.domain.base import utc_now
from spendwise.libs.result import Error, Result, Return
from .dtos import ConfirmPasswordResetResponse

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


def _invalid_token() -> Error:
    return Error("INVALID_TOKEN", "Invalid or expired reset token")


class ConfirmPasswordResetUseCase:
    """
    Use case for confirming password reset.

    Business Rules:
    - Token must exist and be live (now < expires_at)
    - Missing, expired and consumed tokens give the same error
    - Password update and grant deletion commit together
    - Password update happens before grant deletion
    - Only the caller whose delete removes the grant may commit
    """

    def __init__(
        self,
        uow: UnitOfWork,
        password_hasher: IPasswordHasher,
        reset_token_store_factory: ResetTokenStoreFactory,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.uow = uow
        self.password_hasher = password_hasher
        self.reset_token_store_factory = reset_token_store_factory
        self.clock = clock

    def _validate_password(self, password: str) -> Result[None]:
        if len(password) < MIN_PASSWORD_LENGTH:
            return Return.err(
                Error(
                    "INVALID_PASSWORD",
                    f"Password must be at least {MIN_PASSWORD_LENGTH} characters",
                )
            )
        if exceeds_max_password_bytes(password):
            return Return.err(
                Error("INVALID_PASSWORD", f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
            )
        return Return.ok(None)

    async def execute(self, token: str, new_password: str) -> Result[ConfirmPasswordResetResponse]:
        """
        Execute confirm password reset use case.

        Args:
            token: Password reset token (plain text, delivered out-of-band)
            new_password: New password to set

        Returns:
            Result with confirmation message, or Error

        Errors:
            - INVALID_PASSWORD: Password does not meet length requirement
            - INVALID_TOKEN: Token unknown, expired or already used
        """
        password_validation = self._validate_password(new_password)
        if password_validation.is_err():
            return Return.err(password_validation.error)

        async with self.uow:
            store: ResetTokenStore = self.reset_token_store_factory(self.uow.password_reset_tokens)

            grant = await store.lookup(token)
            if grant is None or not grant.is_live(self.clock()):
                return Return.err(_invalid_token())

            user = await self.uow.users.get_by_email(grant.email)
            if user is None:
                logger.warning("Password reset grant refers to a missing user")
                return Return.err(_invalid_token())

            password_hash = self.password_hasher.hash(new_password)
            await self.uow.users.update_password_hash(user.id, password_hash)

            # Losing a concurrent consume discards our password write as well
            if not await store.consume(token):
                await self.uow.rollback()
                logger.warning("Password reset grant was consumed concurrently")
                return Return.err(_invalid_token())

            await self.uow.commit()

            logger.info(f"Password reset confirmed for user {user.id}")

            return Return.ok(ConfirmPasswordResetResponse(message="Password reset successfully"))
