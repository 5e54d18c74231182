from pydantic import BaseModel

from spendwise.app.use_cases.auth.dtos import UserSummary


class ProfileResponse(BaseModel):
    """Response for load profile use case"""

    user: UserSummary


class UpdateCurrencyResponse(BaseModel):
    """Response for update currency use case"""

    message: str
    user: UserSummary
