"""Monthly metrics derived from the transaction ledger."""
from collections import defaultdict
from decimal import Decimal
from typing import Dict, List
from fintrack.models.goal import Goal
from fintrack.models.metrics import DailyTotal, FinancialMetrics
from fintrack.models.transaction import Transaction
from fintrack.utils.money import ZERO, parse_amount

# Fixed monthly budget. Not user-configurable yet.
MONTHLY_BUDGET = Decimal("2500")

HUNDRED = Decimal("100")


class MetricsCalculator:
    """Computes monthly figures from transactions. All methods are pure."""

    budget = MONTHLY_BUDGET

    @staticmethod
    def in_month(transactions: List[Transaction], month: str) -> List[Transaction]:
        """Transactions whose date falls in ``month`` ("YYYY-MM")."""
        return [tx for tx in transactions if tx.date.startswith(month)]

    def calculate(self, transactions: List[Transaction], month: str) -> FinancialMetrics:
        """
        Calculate income, expenses, budget usage and savings rate for a month.

        Args:
            transactions: All of a user's transactions
            month: Reference month, "YYYY-MM"

        Returns:
            FinancialMetrics; all zeros (remaining = budget) for an empty month
        """
        month_tx = self.in_month(transactions, month)

        income = sum((parse_amount(tx.amount) for tx in month_tx if tx.type == "income"), ZERO)
        expenses = sum((parse_amount(tx.amount) for tx in month_tx if tx.type == "expense"), ZERO)

        used_percent = expenses / self.budget * HUNDRED if self.budget > 0 else ZERO
        remaining = self.budget - expenses
        savings_rate = (income - expenses) / income * HUNDRED if income > 0 else ZERO

        return FinancialMetrics(
            month=month,
            income=income,
            expenses=expenses,
            budget=self.budget,
            used_percent=used_percent,
            remaining=remaining,
            savings_rate=savings_rate,
            transaction_count=len(month_tx),
        )

    def category_breakdown(self, transactions: List[Transaction], month: str) -> Dict[str, Decimal]:
        """Expense totals per category for a month, in first-encountered order."""
        breakdown: Dict[str, Decimal] = {}
        for tx in self.in_month(transactions, month):
            if tx.type != "expense":
                continue
            breakdown[tx.category] = breakdown.get(tx.category, ZERO) + parse_amount(tx.amount)
        return breakdown

    def daily_totals(self, transactions: List[Transaction], month: str) -> List[DailyTotal]:
        """Per-day income, expenses and net for the calendar view, sorted by day."""
        income: Dict[str, Decimal] = defaultdict(lambda: ZERO)
        expenses: Dict[str, Decimal] = defaultdict(lambda: ZERO)
        counts: Dict[str, int] = defaultdict(int)

        for tx in self.in_month(transactions, month):
            amount = parse_amount(tx.amount)
            if tx.type == "income":
                income[tx.date] += amount
            else:
                expenses[tx.date] += amount
            counts[tx.date] += 1

        return [
            DailyTotal(
                date=day,
                income=income[day],
                expenses=expenses[day],
                net=income[day] - expenses[day],
                count=counts[day],
            )
            for day in sorted(counts)
        ]

    @staticmethod
    def goal_progress(goal: Goal) -> Decimal:
        """Percent of the target saved. Over 100 when over-funded."""
        return parse_amount(goal.current) / parse_amount(goal.target) * HUNDRED
