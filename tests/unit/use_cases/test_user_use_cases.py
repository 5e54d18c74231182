"""
Unit tests for LoadProfileUseCase and UpdateCurrencyUseCase
"""
from uuid import uuid4

import pytest

from spendwise.app.use_cases.users import LoadProfileUseCase, UpdateCurrencyUseCase
from spendwise.domain.entities import User


@pytest.fixture
def user(mock_uow):
    user = User(id=uuid4(), email="alice@example.com", password_hash="hash", name="Alice")
    mock_uow.users.get_by_id.return_value = user
    mock_uow.users.update.side_effect = lambda updated: updated
    return user


@pytest.mark.asyncio
async def test_load_profile(mock_uow, user):
    result = await LoadProfileUseCase(mock_uow).execute(user.id)

    assert result.is_ok()
    assert result.value.user.id == str(user.id)
    assert result.value.user.name == "Alice"


@pytest.mark.asyncio
async def test_load_profile_missing_user(mock_uow):
    mock_uow.users.get_by_id.return_value = None

    result = await LoadProfileUseCase(mock_uow).execute(uuid4())

    assert result.is_err()
    assert result.error.code == "USER_NOT_FOUND"


@pytest.mark.asyncio
async def test_update_currency(mock_uow, user):
    result = await UpdateCurrencyUseCase(mock_uow).execute(user.id, "eur")

    assert result.is_ok()
    assert result.value.message == "Currency updated successfully"
    assert result.value.user.currency == "EUR"
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
@pytest.mark.parametrize("currency", ["EURO", "E1R", ""])
async def test_update_currency_rejects_invalid_code(mock_uow, user, currency):
    result = await UpdateCurrencyUseCase(mock_uow).execute(user.id, currency)

    assert result.is_err()
    assert result.error.code == "INVALID_CURRENCY"
    mock_uow.users.update.assert_not_called()


@pytest.mark.asyncio
async def test_update_currency_missing_user(mock_uow):
    mock_uow.users.get_by_id.return_value = None

    result = await UpdateCurrencyUseCase(mock_uow).execute(uuid4(), "EUR")

    assert result.is_err()
    assert result.error.code == "USER_NOT_FOUND"
    mock_uow.commit.assert_not_called()
