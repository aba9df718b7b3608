"""User profile models."""
from datetime import datetime
from typing import Optional
from pydantic import Field, field_validator
from fintrack.constants import CURRENCIES, LANGUAGES
from fintrack.models.base import CamelModel


def _check_currency(value: str) -> str:
    if value not in CURRENCIES:
        raise ValueError(f"Unsupported currency: {value}")
    return value


def _check_language(value: str) -> str:
    if value not in LANGUAGES:
        raise ValueError(f"Unsupported language: {value}")
    return value


class UserCreate(CamelModel):
    """User creation model."""

    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3, description="Unique email address")
    currency: str = Field(default="USD", description="ISO 4217 code, display only")
    language: str = Field(default="en", description="Locale code, display only")

    @field_validator("currency")
    @classmethod
    def validate_currency(cls, v: str) -> str:
        return _check_currency(v)

    @field_validator("language")
    @classmethod
    def validate_language(cls, v: str) -> str:
        return _check_language(v)


class UserUpdate(CamelModel):
    """Profile settings that may be changed."""

    currency: Optional[str] = None
    language: Optional[str] = None

    @field_validator("currency")
    @classmethod
    def validate_currency(cls, v: Optional[str]) -> Optional[str]:
        return _check_currency(v) if v is not None else v

    @field_validator("language")
    @classmethod
    def validate_language(cls, v: Optional[str]) -> Optional[str]:
        return _check_language(v) if v is not None else v


class User(UserCreate):
    """Stored user."""

    id: str
    created_at: datetime
