"""Ledger storage interface."""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
from fintrack.models.transaction import Transaction, TransactionCreate
from fintrack.models.goal import Goal, GoalCreate
from fintrack.models.user import User, UserCreate
from fintrack.models.ai_message import AiMessage


class LedgerStore(ABC):
    """
    Abstract base class for ledger storage backends.

    Holds users, transactions, goals and advisor messages keyed by id.
    Update methods take a dict of already-validated field changes and
    return None when the id does not exist.
    """

    # Users

    @abstractmethod
    def get_user(self, user_id: str) -> Optional[User]:
        pass

    @abstractmethod
    def create_user(self, user: UserCreate, user_id: Optional[str] = None) -> User:
        """Create a user. Raises ValueError if the email is already registered."""
        pass

    @abstractmethod
    def update_user(self, user_id: str, changes: Dict[str, Any]) -> Optional[User]:
        pass

    # Transactions

    @abstractmethod
    def get_transactions(self, user_id: str) -> List[Transaction]:
        """Get a user's transactions, newest date first (insertion order on equal dates)."""
        pass

    @abstractmethod
    def get_transaction(self, transaction_id: str) -> Optional[Transaction]:
        pass

    @abstractmethod
    def create_transaction(self, user_id: str, transaction: TransactionCreate) -> Transaction:
        pass

    @abstractmethod
    def update_transaction(self, transaction_id: str, changes: Dict[str, Any]) -> Optional[Transaction]:
        pass

    @abstractmethod
    def delete_transaction(self, transaction_id: str) -> bool:
        pass

    # Goals

    @abstractmethod
    def get_goals(self, user_id: str) -> List[Goal]:
        """Get a user's goals, most recently created first."""
        pass

    @abstractmethod
    def get_goal(self, goal_id: str) -> Optional[Goal]:
        pass

    @abstractmethod
    def create_goal(self, user_id: str, goal: GoalCreate) -> Goal:
        pass

    @abstractmethod
    def update_goal(self, goal_id: str, changes: Dict[str, Any]) -> Optional[Goal]:
        pass

    @abstractmethod
    def delete_goal(self, goal_id: str) -> bool:
        pass

    # Advisor messages

    @abstractmethod
    def get_ai_messages(self, user_id: str) -> List[AiMessage]:
        """Get the conversation, oldest first."""
        pass

    @abstractmethod
    def create_ai_message(self, user_id: str, role: str, content: str) -> AiMessage:
        pass

    @abstractmethod
    def clear_ai_messages(self, user_id: str) -> int:
        """Delete all of a user's messages. Returns the number removed."""
        pass
