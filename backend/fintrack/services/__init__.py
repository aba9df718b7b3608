from .metrics import MetricsCalculator, MONTHLY_BUDGET
from .insights import InsightGenerator
from .prompts import PromptBuilder
from .advisor import AdvisorService, AdvisorError
from .goals import fund_goal

__all__ = [
    "MetricsCalculator",
    "MONTHLY_BUDGET",
    "InsightGenerator",
    "PromptBuilder",
    "AdvisorService",
    "AdvisorError",
    "fund_goal",
]
