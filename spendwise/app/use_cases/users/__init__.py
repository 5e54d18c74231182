"""
User Use Cases
"""

from .load_profile_use_case import LoadProfileUseCase
from .update_currency_use_case import UpdateCurrencyUseCase
from .dtos import ProfileResponse, UpdateCurrencyResponse

__all__ = [
    "LoadProfileUseCase",
    "UpdateCurrencyUseCase",
    "ProfileResponse",
    "UpdateCurrencyResponse",
]
