from datetime import timedelta
from functools import lru_cache
from typing import Optional
from uuid import UUID

from fastapi import Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from spendwise.adapter.services.bcrypt_password_hasher import BcryptPasswordHasher
from spendwise.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from spendwise.api.error import ClientError
from spendwise.api.utils.identity import RequestIdentityResolver
from spendwise.api.utils.jwt import JwtSessionTokenCodec
from spendwise.app.repositories.password_reset_token_repository import IPasswordResetTokenRepository
from spendwise.app.services.password_hasher import IPasswordHasher
from spendwise.app.services.reset_token_store import ResetTokenStore, ResetTokenStoreFactory
from spendwise.app.services.token_codec import ISessionTokenCodec
from spendwise.config import ApplicationConfig
from spendwise.libs.result import Error

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


@lru_cache
def get_password_hasher() -> IPasswordHasher:
    return BcryptPasswordHasher(rounds=ApplicationConfig.BCRYPT_ROUNDS)


@lru_cache
def get_token_codec() -> ISessionTokenCodec:
    return JwtSessionTokenCodec(
        secret=ApplicationConfig.JWT_SECRET,
        algorithm=ApplicationConfig.JWT_ALGORITHM,
        ttl=timedelta(days=ApplicationConfig.SESSION_TOKEN_TTL_DAYS),
    )


def get_reset_token_store_factory() -> ResetTokenStoreFactory:
    ttl = timedelta(minutes=ApplicationConfig.PASSWORD_RESET_TTL_MINUTES)

    def factory(repository: IPasswordResetTokenRepository) -> ResetTokenStore:
        return ResetTokenStore(repository, ttl=ttl)

    return factory


def get_expose_reset_token() -> bool:
    """Echo raw reset tokens in responses, development only"""
    return ApplicationConfig.ENVIRONMENT == "development"


security = HTTPBearer(auto_error=False)


def get_identity_resolver(
    token_codec: ISessionTokenCodec = Depends(get_token_codec),
) -> RequestIdentityResolver:
    return RequestIdentityResolver(token_codec)


async def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    resolver: RequestIdentityResolver = Depends(get_identity_resolver),
) -> UUID:
    """
    Dependency to resolve the authenticated user from the Authorization header.

    Args:
        credentials: Bearer token from Authorization header, None if absent

    Returns:
        User UUID from a valid session token

    Raises:
        ClientError: 401 if the header is missing or the token is invalid
    """
    user_id = resolver.resolve(credentials)

    if user_id is None:
        raise ClientError(
            Error("UNAUTHORIZED", "Unauthorized"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    return user_id
