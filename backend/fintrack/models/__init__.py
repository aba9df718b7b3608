from .transaction import Transaction, TransactionCreate, TransactionUpdate
from .goal import Goal, GoalCreate, GoalUpdate, GoalFund
from .user import User, UserCreate, UserUpdate
from .ai_message import AiMessage, ChatRequest, ChatResponse, ClearConversationResponse
from .metrics import FinancialMetrics, DailyTotal, CalendarResponse, Insight, InsightsResponse

__all__ = [
    "Transaction",
    "TransactionCreate",
    "TransactionUpdate",
    "Goal",
    "GoalCreate",
    "GoalUpdate",
    "GoalFund",
    "User",
    "UserCreate",
    "UserUpdate",
    "AiMessage",
    "ChatRequest",
    "ChatResponse",
    "ClearConversationResponse",
    "FinancialMetrics",
    "DailyTotal",
    "CalendarResponse",
    "Insight",
    "InsightsResponse",
]
