"""Human-readable observations about the current month."""
from decimal import Decimal
from typing import List, Optional
from fintrack.models.goal import Goal
from fintrack.models.metrics import FinancialMetrics, Insight
from fintrack.models.transaction import Transaction
from fintrack.services.metrics import MetricsCalculator
from fintrack.utils.money import format_currency

# Budget usage at or above this percentage triggers the "approaching limit" habit insight
BUDGET_WARNING_PERCENT = Decimal("80")


class InsightGenerator:
    """
    Builds the rotating insight cards shown on the dashboard.

    Stateless: every call recomputes the full list. Rotation between cards
    is left to the client.
    """

    def __init__(self, calculator: Optional[MetricsCalculator] = None):
        self.calculator = calculator or MetricsCalculator()

    def generate(
        self,
        transactions: List[Transaction],
        goals: List[Goal],
        month: str,
        metrics: FinancialMetrics,
        currency: str = "USD",
    ) -> List[Insight]:
        """
        Generate the savings, spending, goals, habits and budget insights, in that order.

        Args:
            transactions: All of the user's transactions
            goals: The user's goals
            month: Reference month, "YYYY-MM"
            metrics: Output of MetricsCalculator.calculate for the same month
            currency: Display currency for amounts

        Returns:
            List of five Insight entries
        """
        return [
            self._savings_insight(metrics),
            self._spending_insight(transactions, month, currency),
            self._goal_insight(goals),
            self._habits_insight(metrics),
            self._budget_insight(metrics),
        ]

    def _savings_insight(self, metrics: FinancialMetrics) -> Insight:
        if metrics.savings_rate > 0:
            message = f"Excellent! You're saving {metrics.savings_rate:.1f}% of your income this month."
        else:
            message = "Start tracking your income to see your savings rate."
        return Insight(type="savings", color="green", title="Savings Analysis", message=message)

    def _spending_insight(self, transactions: List[Transaction], month: str, currency: str) -> Insight:
        breakdown = self.calculator.category_breakdown(transactions, month)
        if breakdown:
            # max() keeps the first category on equal totals
            category, total = max(breakdown.items(), key=lambda item: item[1])
            message = f"Your top spending is {category}: {format_currency(total, currency)} this month."
        else:
            message = "No spending data available yet."
        return Insight(type="spending", color="red", title="Spending Pattern", message=message)

    def _goal_insight(self, goals: List[Goal]) -> Insight:
        if goals:
            top_goal = max(goals, key=self.calculator.goal_progress)
            progress = self.calculator.goal_progress(top_goal)
            message = f"{top_goal.name} is {progress:.1f}% complete - keep it up!"
        else:
            message = "Set your first goal to start tracking progress!"
        return Insight(type="goals", color="purple", title="Goal Progress", message=message)

    def _habits_insight(self, metrics: FinancialMetrics) -> Insight:
        if metrics.used_percent < BUDGET_WARNING_PERCENT:
            message = "Great spending discipline this month!"
        else:
            message = "You're approaching your budget limit - watch your spending!"
        return Insight(type="habits", color="indigo", title="Spending Habits", message=message)

    def _budget_insight(self, metrics: FinancialMetrics) -> Insight:
        message = f"Budget looking good: {metrics.used_percent:.1f}% used"
        return Insight(type="budget", color="green", title="Budget Status", message=message)

    def quick_tip(self, metrics: FinancialMetrics) -> str:
        """Single advisor tip for the dashboard, tiered on savings rate."""
        if metrics.savings_rate > 20:
            return (
                "Great financial discipline! You're saving well above average. "
                "Consider increasing your emergency fund goal."
            )
        if metrics.savings_rate > 10:
            return (
                "You're staying within budget. Consider setting up automatic "
                "transfers to boost your savings rate."
            )
        return "Your expenses are high this month. I can help you find areas to optimize - just ask!"
