"""Database storage layer using SQLite."""
import sqlite3
import uuid
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Type, TypeVar
from pydantic import BaseModel
from fintrack.models.transaction import Transaction, TransactionCreate
from fintrack.models.goal import Goal, GoalCreate
from fintrack.models.user import User, UserCreate
from fintrack.models.ai_message import AiMessage
from fintrack.storage.base import LedgerStore

ModelT = TypeVar("ModelT", bound=BaseModel)

SCHEMA = """
    CREATE TABLE IF NOT EXISTS users (
        id TEXT PRIMARY KEY,
        name TEXT NOT NULL,
        email TEXT NOT NULL UNIQUE,
        currency TEXT NOT NULL DEFAULT 'USD',
        language TEXT NOT NULL DEFAULT 'en',
        created_at TEXT NOT NULL
    );
    CREATE TABLE IF NOT EXISTS transactions (
        id TEXT PRIMARY KEY,
        user_id TEXT NOT NULL,
        amount TEXT NOT NULL,
        label TEXT NOT NULL,
        category TEXT NOT NULL,
        type TEXT NOT NULL,
        date TEXT NOT NULL,
        created_at TEXT NOT NULL
    );
    CREATE INDEX IF NOT EXISTS idx_transactions_user_date
        ON transactions(user_id, date);
    CREATE TABLE IF NOT EXISTS goals (
        id TEXT PRIMARY KEY,
        user_id TEXT NOT NULL,
        name TEXT NOT NULL,
        target TEXT NOT NULL,
        "current" TEXT NOT NULL DEFAULT '0',
        color TEXT NOT NULL DEFAULT '#007aff',
        created_at TEXT NOT NULL
    );
    CREATE TABLE IF NOT EXISTS ai_messages (
        id TEXT PRIMARY KEY,
        user_id TEXT NOT NULL,
        role TEXT NOT NULL,
        content TEXT NOT NULL,
        created_at TEXT NOT NULL
    );
    CREATE INDEX IF NOT EXISTS idx_ai_messages_user_created
        ON ai_messages(user_id, created_at);
"""


class SqliteStore(LedgerStore):
    """
    Ledger storage in a SQLite file.

    Amounts are kept in TEXT columns so decimal strings round-trip exactly.
    Column names are the pydantic field names of the entity models.
    """

    def __init__(self, db_path: str = "fintrack.db"):
        self.db_path = db_path
        self._init_db()

    def _init_db(self):
        """Initialize database tables."""
        with self._get_conn() as conn:
            conn.executescript(SCHEMA)
            conn.commit()

    @contextmanager
    def _get_conn(self):
        """Get database connection."""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        try:
            yield conn
        finally:
            conn.close()

    @staticmethod
    def _to_row(model: BaseModel) -> Dict[str, Any]:
        row = model.model_dump()
        return {
            key: value.isoformat() if isinstance(value, datetime) else value
            for key, value in row.items()
        }

    @staticmethod
    def _from_row(model_cls: Type[ModelT], row: sqlite3.Row) -> ModelT:
        data = dict(row)
        data["created_at"] = datetime.fromisoformat(data["created_at"])
        return model_cls(**data)

    def _insert(self, table: str, model: BaseModel):
        row = self._to_row(model)
        columns = ", ".join(f'"{column}"' for column in row)
        placeholders = ", ".join("?" for _ in row)
        with self._get_conn() as conn:
            conn.execute(
                f"INSERT INTO {table} ({columns}) VALUES ({placeholders})",
                list(row.values()),
            )
            conn.commit()

    def _fetch_one(self, table: str, model_cls: Type[ModelT], row_id: str) -> Optional[ModelT]:
        with self._get_conn() as conn:
            row = conn.execute(f"SELECT * FROM {table} WHERE id = ?", (row_id,)).fetchone()
            return self._from_row(model_cls, row) if row else None

    def _fetch_all(self, table: str, model_cls: Type[ModelT], user_id: str, order_by: str) -> List[ModelT]:
        with self._get_conn() as conn:
            rows = conn.execute(
                f"SELECT * FROM {table} WHERE user_id = ? ORDER BY {order_by}",
                (user_id,),
            ).fetchall()
            return [self._from_row(model_cls, row) for row in rows]

    def _update(self, table: str, model_cls: Type[ModelT], row_id: str, changes: Dict[str, Any]) -> Optional[ModelT]:
        # Only model fields are accepted as column names
        unknown = set(changes) - set(model_cls.model_fields)
        if unknown:
            raise ValueError(f"Unknown fields for {table}: {', '.join(sorted(unknown))}")

        if changes:
            assignments = ", ".join(f'"{column}" = ?' for column in changes)
            with self._get_conn() as conn:
                conn.execute(
                    f"UPDATE {table} SET {assignments} WHERE id = ?",
                    [*changes.values(), row_id],
                )
                conn.commit()
        return self._fetch_one(table, model_cls, row_id)

    def _delete(self, table: str, row_id: str) -> bool:
        with self._get_conn() as conn:
            cursor = conn.execute(f"DELETE FROM {table} WHERE id = ?", (row_id,))
            conn.commit()
            return cursor.rowcount > 0

    def get_user(self, user_id: str) -> Optional[User]:
        return self._fetch_one("users", User, user_id)

    def create_user(self, user: UserCreate, user_id: Optional[str] = None) -> User:
        created = User(
            id=user_id or str(uuid.uuid4()),
            created_at=datetime.now(timezone.utc),
            **user.model_dump(),
        )
        try:
            self._insert("users", created)
        except sqlite3.IntegrityError as e:
            raise ValueError(f"Email already registered: {user.email}") from e
        return created

    def update_user(self, user_id: str, changes: Dict[str, Any]) -> Optional[User]:
        return self._update("users", User, user_id, changes)

    def get_transactions(self, user_id: str) -> List[Transaction]:
        return self._fetch_all("transactions", Transaction, user_id, "date DESC, rowid ASC")

    def get_transaction(self, transaction_id: str) -> Optional[Transaction]:
        return self._fetch_one("transactions", Transaction, transaction_id)

    def create_transaction(self, user_id: str, transaction: TransactionCreate) -> Transaction:
        created = Transaction(
            id=str(uuid.uuid4()),
            user_id=user_id,
            created_at=datetime.now(timezone.utc),
            **transaction.model_dump(),
        )
        self._insert("transactions", created)
        return created

    def update_transaction(self, transaction_id: str, changes: Dict[str, Any]) -> Optional[Transaction]:
        return self._update("transactions", Transaction, transaction_id, changes)

    def delete_transaction(self, transaction_id: str) -> bool:
        return self._delete("transactions", transaction_id)

    def get_goals(self, user_id: str) -> List[Goal]:
        return self._fetch_all("goals", Goal, user_id, "created_at DESC, rowid DESC")

    def get_goal(self, goal_id: str) -> Optional[Goal]:
        return self._fetch_one("goals", Goal, goal_id)

    def create_goal(self, user_id: str, goal: GoalCreate) -> Goal:
        created = Goal(
            id=str(uuid.uuid4()),
            user_id=user_id,
            created_at=datetime.now(timezone.utc),
            **goal.model_dump(),
        )
        self._insert("goals", created)
        return created

    def update_goal(self, goal_id: str, changes: Dict[str, Any]) -> Optional[Goal]:
        return self._update("goals", Goal, goal_id, changes)

    def delete_goal(self, goal_id: str) -> bool:
        return self._delete("goals", goal_id)

    def get_ai_messages(self, user_id: str) -> List[AiMessage]:
        return self._fetch_all("ai_messages", AiMessage, user_id, "created_at ASC, rowid ASC")

    def create_ai_message(self, user_id: str, role: str, content: str) -> AiMessage:
        message = AiMessage(
            id=str(uuid.uuid4()),
            user_id=user_id,
            role=role,
            content=content,
            created_at=datetime.now(timezone.utc),
        )
        self._insert("ai_messages", message)
        return message

    def clear_ai_messages(self, user_id: str) -> int:
        with self._get_conn() as conn:
            cursor = conn.execute("DELETE FROM ai_messages WHERE user_id = ?", (user_id,))
            conn.commit()
            return cursor.rowcount
