"""Prompt templates and fixed texts for the AI advisor."""
from typing import List
from fintrack.constants import CURRENCIES
from fintrack.models.goal import Goal
from fintrack.models.metrics import FinancialMetrics
from fintrack.services.metrics import MetricsCalculator


class PromptBuilder:
    """Builds the advisor's system context from the user's financial state."""

    ADVISOR_PROMPT_TEMPLATE = """You are a helpful AI financial advisor for FinTrack, a personal finance application.
You have access to the user's financial data and should provide personalized, actionable advice.

Current Financial Summary:
- Monthly Income: {symbol}{income:.2f}
- Monthly Expenses: {symbol}{expenses:.2f}
- Savings Rate: {savings_rate:.1f}%
- Number of Transactions: {transaction_count}
- Active Goals: {goal_count}
{goals_section}
Provide clear, concise, and encouraging financial advice. Be specific and reference their actual data when relevant.
Keep responses under 150 words unless they ask for detailed analysis."""

    WELCOME_MESSAGE = (
        "Hi! I'm your AI financial advisor. I can help you analyze your spending, set better goals, "
        "optimize your budget, and answer any financial questions. What would you like to know about "
        "your finances?"
    )

    FALLBACK_MESSAGE = (
        "I'm your AI financial advisor! To enable full AI-powered insights, please add your "
        "Anthropic API key. In the meantime, I can see you're doing well with your finances!"
    )

    NO_TEXT_REPLY = "I apologize, I couldn't generate a response."

    # Conversation turns sent with each request
    HISTORY_LIMIT = 10

    def build_advisor_prompt(
        self,
        metrics: FinancialMetrics,
        transaction_count: int,
        goals: List[Goal],
        currency: str = "USD",
    ) -> str:
        """Build the advisor system prompt."""
        symbol = CURRENCIES[currency][1] if currency in CURRENCIES else f"{currency} "
        return self.ADVISOR_PROMPT_TEMPLATE.format(
            symbol=symbol,
            income=metrics.income,
            expenses=metrics.expenses,
            savings_rate=metrics.savings_rate,
            transaction_count=transaction_count,
            goal_count=len(goals),
            goals_section=self._format_goals(goals, symbol),
        )

    def _format_goals(self, goals: List[Goal], symbol: str) -> str:
        """Format one line per goal, or nothing when there are none."""
        if not goals:
            return ""

        lines = ["", "Goals:"]
        for goal in goals:
            progress = MetricsCalculator.goal_progress(goal)
            lines.append(f"- {goal.name}: {symbol}{goal.current} / {symbol}{goal.target} ({progress:.1f}%)")
        lines.append("")
        return "\n".join(lines)
