from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from spendwise.api.error import ClientError, ServerError
from spendwise.app.services.password_hasher import IPasswordHasher
from spendwise.app.services.reset_token_store import ResetTokenStoreFactory
from spendwise.app.services.token_codec import ISessionTokenCodec
from spendwise.app.services.unit_of_work import UnitOfWork
from spendwise.app.use_cases.auth import (
    RegisterCommand,
    RegisterResponse,
    RegisterUseCase,
    LoginUseCase,
    LoginResponse,
    RequestPasswordResetUseCase,
    RequestPasswordResetResponse,
    ConfirmPasswordResetUseCase,
    ConfirmPasswordResetResponse,
)
from spendwise.config import ApplicationConfig
from spendwise.depends import (
    get_expose_reset_token,
    get_password_hasher,
    get_reset_token_store_factory,
    get_token_codec,
    get_unit_of_work,
)

router = APIRouter(prefix="/auth", tags=["Authentication"])


class RegisterRequest(BaseModel):
    """
    Register HTTP request payload

    Validates incoming HTTP request before converting to RegisterCommand.
    """

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=6, description="User password (min 6 chars)")
    name: Optional[str] = Field(None, max_length=255, description="Display name")


@router.post(
    "/register", status_code=status.HTTP_201_CREATED, response_model=RegisterResponse
)
async def register(
    request: RegisterRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    password_hasher: IPasswordHasher = Depends(get_password_hasher),
):
    """
    User Registration

    Creates a new user account. Does not log the user in.

    Raises:
        - 409 Conflict: Email already exists
        - 422 Unprocessable Entity: Invalid input (handled by FastAPI) or password over 72 bytes
        - 500 Internal Server Error: Server error
    """
    command = RegisterCommand(
        email=request.email, password=request.password, name=request.name
    )

    use_case = RegisterUseCase(uow, password_hasher, ApplicationConfig.DEFAULT_CURRENCY)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code == "EMAIL_ALREADY_EXISTS":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        elif error.code == "INVALID_PASSWORD":
            raise ClientError(error, status_code=status.HTTP_422_UNPROCESSABLE_ENTITY)
        raise ServerError(error)

    return result.value


class LoginRequest(BaseModel):
    """
    Login HTTP request payload
    """

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=1, description="User password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(
    request: LoginRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    password_hasher: IPasswordHasher = Depends(get_password_hasher),
    token_codec: ISessionTokenCodec = Depends(get_token_codec),
):
    """
    User Login

    Authenticates user and returns a 7-day session token.

    Raises:
        - 401 Unauthorized: Invalid credentials (same for unknown email and wrong password)
        - 500 Internal Server Error: Server error
    """
    use_case = LoginUseCase(uow, password_hasher, token_codec)
    result = await use_case.execute(request.email, request.password)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_CREDENTIALS":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ServerError(error)

    return result.value


class ForgotPasswordRequest(BaseModel):
    """
    Request password reset HTTP request payload
    """

    email: EmailStr = Field(..., description="User email address")


@router.post(
    "/forgot-password",
    status_code=status.HTTP_200_OK,
    response_model=RequestPasswordResetResponse,
    response_model_exclude_none=True,
)
async def forgot_password(
    request: ForgotPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    reset_token_store_factory: ResetTokenStoreFactory = Depends(get_reset_token_store_factory),
    expose_token: bool = Depends(get_expose_reset_token),
):
    """
    Request Password Reset

    Creates a password reset grant valid for 1 hour.

    Security:
        - No email enumeration (same response for valid/invalid emails)
        - Token is 32 random bytes, stored as SHA-256 hash
        - Raw token only returned when ENVIRONMENT is development

    Returns:
        - 200 OK: Always returns success (no enumeration)
        - 500 Internal Server Error: Server error
    """
    use_case = RequestPasswordResetUseCase(uow, reset_token_store_factory, expose_token)
    result = await use_case.execute(request.email)

    if result.is_err():
        raise ServerError(result.error)

    return result.value


class ResetPasswordRequest(BaseModel):
    """
    Confirm password reset HTTP request payload
    """

    token: str = Field(..., min_length=1, description="Password reset token")
    password: str = Field(..., min_length=6, description="New password (min 6 chars)")


@router.post(
    "/reset-password",
    status_code=status.HTTP_200_OK,
    response_model=ConfirmPasswordResetResponse,
)
async def reset_password(
    request: ResetPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    password_hasher: IPasswordHasher = Depends(get_password_hasher),
    reset_token_store_factory: ResetTokenStoreFactory = Depends(get_reset_token_store_factory),
):
    """
    Confirm Password Reset

    Validates the reset token, sets the new password and deletes the token.

    Raises:
        - 400 Bad Request: Invalid, expired or already used token
        - 422 Unprocessable Entity: Invalid input
        - 500 Internal Server Error: Server error
    """
    use_case = ConfirmPasswordResetUseCase(uow, password_hasher, reset_token_store_factory)
    result = await use_case.execute(request.token, request.password)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_TOKEN":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "INVALID_PASSWORD":
            raise ClientError(error, status_code=status.HTTP_422_UNPROCESSABLE_ENTITY)
        raise ServerError(error)

    return result.value
