"""
Update Currency Use Case

Changes the display currency preference of the current user.
"""

from uuid import UUID

from spendwise.app.services.unit_of_work import UnitOfWork
from spendwise.app.use_cases.auth.dtos import UserSummary
from spendwise.libs.result import Error, Result, Return
from .dtos import UpdateCurrencyResponse


class UpdateCurrencyUseCase:
    """
    Use case for updating the currency preference.

    Business Rules:
    - Currency must be a 3-letter code, stored upper-case
    - User must exist
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, currency: str) -> Result[UpdateCurrencyResponse]:
        """
        Execute update currency use case.

        Args:
            user_id: User UUID from the session token
            currency: 3-letter currency code

        Returns:
            Result with the updated user summary, or Error
        """
        if len(currency) != 3 or not currency.isalpha():
            return Return.err(Error("INVALID_CURRENCY", "Currency must be a 3-letter code"))

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            user.currency = currency.upper()
            user = await self.uow.users.update(user)

            await self.uow.commit()

            return Return.ok(
                UpdateCurrencyResponse(
                    message="Currency updated successfully",
                    user=UserSummary.from_user(user),
                )
            )
