"""
Request Password Reset Use Case

Handles generating password reset grants.
"""

import logging

from spendwise.app.services.reset_token_store import ResetTokenStore, ResetTokenStoreFactory
from spendwise.app.services.unit_of_work import UnitOfWork
from spendwise.libs.result import Result, Return
from .dtos import RequestPasswordResetResponse

logger = logging.getLogger(__name__)

RESET_REQUESTED_MESSAGE = "If the email exists, a password reset link has been sent"


class RequestPasswordResetUseCase:
    """
    Use case for requesting password reset.

    Business Rules:
    - No email enumeration (same response for valid/invalid emails)
    - Previous grants for the email are deleted before a new one is created
    - Grant expires in 1 hour
    - Raw token is only echoed back when expose_token is set (development)
    """

    def __init__(
        self,
        uow: UnitOfWork,
        reset_token_store_factory: ResetTokenStoreFactory,
        expose_token: bool = False,
    ):
        self.uow = uow
        self.reset_token_store_factory = reset_token_store_factory
        self.expose_token = expose_token

    async def execute(self, email: str) -> Result[RequestPasswordResetResponse]:
        """
        Execute request password reset use case.

        Args:
            email: User's email address

        Returns:
            Result with the generic acknowledgment

        Note:
            Always returns success, a grant is only created if the email exists.
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(email)

            if user is None:
                return Return.ok(RequestPasswordResetResponse(message=RESET_REQUESTED_MESSAGE))

            store: ResetTokenStore = self.reset_token_store_factory(self.uow.password_reset_tokens)
            await store.supersede(email)
            grant = await store.create(email)

            await self.uow.commit()

            # TODO: deliver grant.token by email once an outbound mail service exists
            logger.info(f"Password reset requested for user {user.id}")

            return Return.ok(
                RequestPasswordResetResponse(
                    message=RESET_REQUESTED_MESSAGE,
                    reset_token=grant.token if self.expose_token else None,
                )
            )
