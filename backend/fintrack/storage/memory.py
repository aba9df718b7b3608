"""In-process ledger storage. Nothing survives a restart."""
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from fintrack.models.transaction import Transaction, TransactionCreate
from fintrack.models.goal import Goal, GoalCreate
from fintrack.models.user import User, UserCreate
from fintrack.models.ai_message import AiMessage
from fintrack.storage.base import LedgerStore


def _now() -> datetime:
    return datetime.now(timezone.utc)


class MemoryStore(LedgerStore):
    """Ledger storage backed by dicts keyed by id."""

    def __init__(self):
        self.users: Dict[str, User] = {}
        self.transactions: Dict[str, Transaction] = {}
        self.goals: Dict[str, Goal] = {}
        self.ai_messages: Dict[str, AiMessage] = {}

    def get_user(self, user_id: str) -> Optional[User]:
        return self.users.get(user_id)

    def create_user(self, user: UserCreate, user_id: Optional[str] = None) -> User:
        if any(existing.email == user.email for existing in self.users.values()):
            raise ValueError(f"Email already registered: {user.email}")

        created = User(
            id=user_id or str(uuid.uuid4()),
            created_at=_now(),
            **user.model_dump(),
        )
        self.users[created.id] = created
        return created

    def update_user(self, user_id: str, changes: Dict[str, Any]) -> Optional[User]:
        user = self.users.get(user_id)
        if not user:
            return None

        updated = user.model_copy(update=changes)
        self.users[user_id] = updated
        return updated

    def get_transactions(self, user_id: str) -> List[Transaction]:
        owned = [tx for tx in self.transactions.values() if tx.user_id == user_id]
        # sorted() is stable, so equal dates keep insertion order
        return sorted(owned, key=lambda tx: tx.date, reverse=True)

    def get_transaction(self, transaction_id: str) -> Optional[Transaction]:
        return self.transactions.get(transaction_id)

    def create_transaction(self, user_id: str, transaction: TransactionCreate) -> Transaction:
        created = Transaction(
            id=str(uuid.uuid4()),
            user_id=user_id,
            created_at=_now(),
            **transaction.model_dump(),
        )
        self.transactions[created.id] = created
        return created

    def update_transaction(self, transaction_id: str, changes: Dict[str, Any]) -> Optional[Transaction]:
        transaction = self.transactions.get(transaction_id)
        if not transaction:
            return None

        updated = transaction.model_copy(update=changes)
        self.transactions[transaction_id] = updated
        return updated

    def delete_transaction(self, transaction_id: str) -> bool:
        return self.transactions.pop(transaction_id, None) is not None

    def get_goals(self, user_id: str) -> List[Goal]:
        owned = [goal for goal in self.goals.values() if goal.user_id == user_id]
        # Newest first, also for goals created within the same clock tick
        return sorted(reversed(owned), key=lambda goal: goal.created_at, reverse=True)

    def get_goal(self, goal_id: str) -> Optional[Goal]:
        return self.goals.get(goal_id)

    def create_goal(self, user_id: str, goal: GoalCreate) -> Goal:
        created = Goal(
            id=str(uuid.uuid4()),
            user_id=user_id,
            created_at=_now(),
            **goal.model_dump(),
        )
        self.goals[created.id] = created
        return created

    def update_goal(self, goal_id: str, changes: Dict[str, Any]) -> Optional[Goal]:
        goal = self.goals.get(goal_id)
        if not goal:
            return None

        updated = goal.model_copy(update=changes)
        self.goals[goal_id] = updated
        return updated

    def delete_goal(self, goal_id: str) -> bool:
        return self.goals.pop(goal_id, None) is not None

    def get_ai_messages(self, user_id: str) -> List[AiMessage]:
        owned = [m for m in self.ai_messages.values() if m.user_id == user_id]
        return sorted(owned, key=lambda m: m.created_at)

    def create_ai_message(self, user_id: str, role: str, content: str) -> AiMessage:
        message = AiMessage(
            id=str(uuid.uuid4()),
            user_id=user_id,
            role=role,
            content=content,
            created_at=_now(),
        )
        self.ai_messages[message.id] = message
        return message

    def clear_ai_messages(self, user_id: str) -> int:
        to_delete = [m.id for m in self.ai_messages.values() if m.user_id == user_id]
        for message_id in to_delete:
            del self.ai_messages[message_id]
        return len(to_delete)
