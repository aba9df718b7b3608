"""Savings goal models."""
from datetime import datetime
from typing import Optional
from pydantic import Field, field_validator
from fintrack.constants import DEFAULT_GOAL_COLOR
from fintrack.models.base import CamelModel
from fintrack.utils.money import validate_amount


class GoalCreate(CamelModel):
    """Goal creation model (request body)."""

    name: str = Field(..., min_length=1, description="Goal name")
    target: str = Field(..., description="Target amount, decimal string > 0")
    current: str = Field(default="0", description="Saved so far; may exceed target")
    color: str = Field(default=DEFAULT_GOAL_COLOR, description="Display colour")

    @field_validator("target")
    @classmethod
    def validate_target(cls, v: str) -> str:
        return validate_amount(v)

    @field_validator("current")
    @classmethod
    def validate_current(cls, v: str) -> str:
        return validate_amount(v, allow_zero=True)


class GoalUpdate(CamelModel):
    """Partial goal update."""

    name: Optional[str] = Field(None, min_length=1)
    target: Optional[str] = None
    current: Optional[str] = None
    color: Optional[str] = None

    @field_validator("target")
    @classmethod
    def validate_target(cls, v: Optional[str]) -> Optional[str]:
        return validate_amount(v) if v is not None else v

    @field_validator("current")
    @classmethod
    def validate_current(cls, v: Optional[str]) -> Optional[str]:
        return validate_amount(v, allow_zero=True) if v is not None else v


class GoalFund(CamelModel):
    """Amount to add to a goal's current savings."""

    amount: str = Field(..., description="Positive decimal string")

    @field_validator("amount")
    @classmethod
    def check_amount(cls, v: str) -> str:
        return validate_amount(v)


class Goal(GoalCreate):
    """Stored goal."""

    id: str
    user_id: str
    created_at: datetime
