import pytest
from unittest.mock import AsyncMock, MagicMock

from spendwise.adapter.services.bcrypt_password_hasher import BcryptPasswordHasher
from spendwise.api.utils.jwt import JwtSessionTokenCodec

TEST_JWT_SECRET = "unit-test-secret"


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_email = AsyncMock()
    uow.users.get_by_id = AsyncMock()
    uow.users.create = AsyncMock()
    uow.users.update = AsyncMock()
    uow.users.update_password_hash = AsyncMock()

    uow.password_reset_tokens = MagicMock()
    uow.password_reset_tokens.create = AsyncMock()
    uow.password_reset_tokens.get_by_token_hash = AsyncMock()
    uow.password_reset_tokens.delete_all_by_email = AsyncMock(return_value=0)
    uow.password_reset_tokens.delete_by_token_hash = AsyncMock(return_value=1)

    return uow


@pytest.fixture
def password_hasher():
    # Minimum bcrypt cost keeps the suite fast
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def token_codec():
    return JwtSessionTokenCodec(secret=TEST_JWT_SECRET)
