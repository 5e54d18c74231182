"""
Login Use Case

Handles user authentication and returns a session token.
"""

import logging

from spendwise.app.services.password_hasher import IPasswordHasher
from spendwise.app.services.token_codec import ISessionTokenCodec
from spendwise.app.services.unit_of_work import UnitOfWork
from spendwise.libs.result import Error, Result, Return
from .dtos import LoginResponse, UserSummary

logger = logging.getLogger(__name__)


def _invalid_credentials() -> Error:
    return Error("INVALID_CREDENTIALS", "Invalid email or password")


class LoginUseCase:
    """
    Use case for user login and session token issuance.

    Business Rules:
    - Unknown email and wrong password give the same error
    - Password check costs the same whether or not the user exists
    - Session token expires 7 days after issuance
    """

    def __init__(
        self,
        uow: UnitOfWork,
        password_hasher: IPasswordHasher,
        token_codec: ISessionTokenCodec,
    ):
        self.uow = uow
        self.password_hasher = password_hasher
        self.token_codec = token_codec

    async def execute(self, email: str, password: str) -> Result[LoginResponse]:
        """
        Execute login use case.

        Args:
            email: User email
            password: Plain text password

        Returns:
            Result with LoginResponse containing user summary and token, or Error
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(email)

            if user is None:
                # Keep timing in line with the wrong-password path
                self.password_hasher.dummy_verify(password)
                logger.info("Login failed: invalid credentials")
                return Return.err(_invalid_credentials())

            if not self.password_hasher.verify(password, user.password_hash):
                logger.info("Login failed: invalid credentials")
                return Return.err(_invalid_credentials())

            token = self.token_codec.issue(user.id)

            logger.info(f"User logged in: {user.id}")

            return Return.ok(LoginResponse(user=UserSummary.from_user(user), token=token))
