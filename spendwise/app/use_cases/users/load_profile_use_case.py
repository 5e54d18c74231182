"""
Load Profile Use Case

Loads the user behind a verified session token.
"""

from uuid import UUID

from spendwise.app.services.unit_of_work import UnitOfWork
from spendwise.app.use_cases.auth.dtos import UserSummary
from spendwise.libs.result import Error, Result, Return
from .dtos import ProfileResponse


class LoadProfileUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[ProfileResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                # Token outlived its user
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            return Return.ok(ProfileResponse(user=UserSummary.from_user(user)))
