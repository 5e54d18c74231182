import logging

from sqlalchemy.exc import IntegrityError

from spendwise.app.services.password_hasher import (
    IPasswordHasher,
    MAX_PASSWORD_BYTES,
    exceeds_max_password_bytes,
)
from spendwise.app.services.unit_of_work import UnitOfWork
from spendwise.domain.entities import User
from spendwise.libs.result import Error, Result, Return
from .dtos import RegisterCommand, RegisterResponse, UserSummary

logger = logging.getLogger(__name__)


def _email_already_exists() -> Error:
    return Error("EMAIL_ALREADY_EXISTS", "User with this email already exists")


class RegisterUseCase:
    """
    Register Use Case

    Business Logic:
    1. Reject passwords bcrypt cannot hash in full
    2. Check if email already exists
    3. Hash password
    4. Create User with default currency
    5. Commit and return the user summary (no session token is issued)

    A concurrent registration that wins the unique email constraint after
    step 2 is reported as EMAIL_ALREADY_EXISTS too.
    """

    def __init__(self, uow: UnitOfWork, password_hasher: IPasswordHasher, default_currency: str = "USD"):
        self.uow = uow
        self.password_hasher = password_hasher
        self.default_currency = default_currency

    async def execute(self, command: RegisterCommand) -> Result[RegisterResponse]:
        """
        Execute register use case

        Args:
            command: RegisterCommand with validated email, password, optional name

        Returns:
            Result[RegisterResponse] with the created user
            or Error(EMAIL_ALREADY_EXISTS) if email exists
            or Error(INVALID_PASSWORD) if the password is over MAX_PASSWORD_BYTES
        """
        if exceeds_max_password_bytes(command.password):
            return Return.err(
                Error("INVALID_PASSWORD", f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
            )

        async with self.uow:
            existing_user = await self.uow.users.get_by_email(command.email)
            if existing_user:
                return Return.err(_email_already_exists())

            user = User(
                email=command.email,
                password_hash=self.password_hasher.hash(command.password),
                name=command.name,
                currency=self.default_currency,
            )
            try:
                user = await self.uow.users.create(user)
                await self.uow.commit()
            except IntegrityError:
                await self.uow.rollback()
                logger.warning("Concurrent registration lost the unique email constraint")
                return Return.err(_email_already_exists())

            logger.info(f"User registered: {user.id}")

            return Return.ok(RegisterResponse(user=UserSummary.from_user(user)))
