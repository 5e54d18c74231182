from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from spendwise.api.error import ClientError, ServerError
from spendwise.app.services.unit_of_work import UnitOfWork
from spendwise.app.use_cases.users import (
    LoadProfileUseCase,
    ProfileResponse,
    UpdateCurrencyUseCase,
    UpdateCurrencyResponse,
)
from spendwise.depends import get_current_user_id, get_unit_of_work

router = APIRouter(prefix="/user", tags=["User"])


@router.get("/me", status_code=status.HTTP_200_OK, response_model=ProfileResponse)
async def get_me(
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Current User

    Raises:
        - 401 Unauthorized: Missing or invalid session token, or user no longer exists
        - 500 Internal Server Error: Server error
    """
    use_case = LoadProfileUseCase(uow)
    result = await use_case.execute(user_id)

    if result.is_err():
        error = result.error
        if error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ServerError(error)

    return result.value


class UpdateCurrencyRequest(BaseModel):
    """PUT /user/currency request payload"""

    currency: str = Field(..., min_length=3, max_length=3, description="3-letter currency code")


@router.put("/currency", status_code=status.HTTP_200_OK, response_model=UpdateCurrencyResponse)
async def update_currency(
    request: UpdateCurrencyRequest,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Currency Preference

    Raises:
        - 401 Unauthorized: Missing or invalid session token, or user no longer exists
        - 422 Unprocessable Entity: Currency is not a 3-letter code
        - 500 Internal Server Error: Server error
    """
    use_case = UpdateCurrencyUseCase(uow)
    result = await use_case.execute(user_id, request.currency)

    if result.is_err():
        error = result.error
        if error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        elif error.code == "INVALID_CURRENCY":
            raise ClientError(error, status_code=status.HTTP_422_UNPROCESSABLE_ENTITY)
        raise ServerError(error)

    return result.value
