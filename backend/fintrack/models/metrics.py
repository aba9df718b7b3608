"""Derived metrics and insight models."""
from decimal import Decimal, ROUND_HALF_UP
from typing import List
from pydantic import Field, field_serializer
from fintrack.models.base import CamelModel


class FinancialMetrics(CamelModel):
    """Monthly figures derived from the transaction ledger."""

    month: str = Field(..., description="Reference month, YYYY-MM")
    income: Decimal = Decimal("0")
    expenses: Decimal = Decimal("0")
    budget: Decimal = Field(..., description="Fixed monthly budget")
    used_percent: Decimal = Decimal("0")
    remaining: Decimal = Field(..., description="Budget minus expenses; negative when over budget")
    savings_rate: Decimal = Decimal("0")
    transaction_count: int = 0

    @field_serializer("used_percent", "savings_rate", when_used="json")
    def serialize_percent(self, value: Decimal) -> str:
        return str(value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


class DailyTotal(CamelModel):
    """Net movement for one calendar day."""

    date: str
    income: Decimal = Decimal("0")
    expenses: Decimal = Decimal("0")
    net: Decimal = Field(..., description="Income minus expenses")
    count: int = 0


class CalendarResponse(CamelModel):
    """Daily totals for a month."""

    month: str
    days: List[DailyTotal] = Field(default_factory=list)


class Insight(CamelModel):
    """One human-readable observation for the rotating insight card."""

    type: str = Field(..., description="savings, spending, goals, habits or budget")
    color: str = Field(..., description="Display colour hint")
    title: str
    message: str


class InsightsResponse(CamelModel):
    """Insights for a month plus the dashboard advisor tip."""

    month: str
    insights: List[Insight] = Field(default_factory=list)
    tip: str
