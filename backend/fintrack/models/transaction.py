"""Transaction data models."""
from datetime import datetime
from typing import Literal, Optional
from pydantic import ConfigDict, Field, field_validator
from fintrack.constants import CATEGORIES
from fintrack.models.base import CamelModel
from fintrack.utils.money import validate_amount
from fintrack.utils.dates import parse_date

TransactionType = Literal["income", "expense"]


def _check_category(value: str) -> str:
    if value not in CATEGORIES:
        raise ValueError(f"Unknown category: {value}. Expected one of {', '.join(CATEGORIES)}")
    return value


def _check_date(value: str) -> str:
    parse_date(value)
    return value.strip()


class TransactionCreate(CamelModel):
    """Transaction creation model (request body)."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "amount": "12.50",
                "label": "Lunch",
                "category": "Food",
                "type": "expense",
                "date": "2024-03-15",
            }
        }
    )

    amount: str = Field(..., description="Positive decimal string, e.g. \"12.50\"")
    label: str = Field(..., min_length=1, description="Description")
    category: str = Field(..., description="One of the fixed category names")
    type: TransactionType = Field(..., description="'income' or 'expense'")
    date: str = Field(..., description="Calendar day, YYYY-MM-DD")

    @field_validator("amount")
    @classmethod
    def check_amount(cls, v: str) -> str:
        return validate_amount(v)

    @field_validator("category")
    @classmethod
    def validate_category(cls, v: str) -> str:
        return _check_category(v)

    @field_validator("date")
    @classmethod
    def validate_date(cls, v: str) -> str:
        return _check_date(v)


class TransactionUpdate(CamelModel):
    """Partial transaction update. Only fields that are sent are changed."""

    amount: Optional[str] = None
    label: Optional[str] = Field(None, min_length=1)
    category: Optional[str] = None
    type: Optional[TransactionType] = None
    date: Optional[str] = None

    @field_validator("amount")
    @classmethod
    def check_amount(cls, v: Optional[str]) -> Optional[str]:
        return validate_amount(v) if v is not None else v

    @field_validator("category")
    @classmethod
    def validate_category(cls, v: Optional[str]) -> Optional[str]:
        return _check_category(v) if v is not None else v

    @field_validator("date")
    @classmethod
    def validate_date(cls, v: Optional[str]) -> Optional[str]:
        return _check_date(v) if v is not None else v


class Transaction(TransactionCreate):
    """Stored transaction."""

    id: str
    user_id: str = Field(..., description="Owning user")
    created_at: datetime
