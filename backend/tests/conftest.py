"""Shared fixtures."""
import pytest
from datetime import datetime, timezone
from fastapi.testclient import TestClient
from fintrack.config import Settings
from fintrack.main import create_app
from fintrack.models.goal import Goal
from fintrack.models.transaction import Transaction
from fintrack.storage.memory import MemoryStore

DEMO_USER = "demo-user-001"


def make_transaction(amount, category, type_, date, label=None, tx_id=None):
    """Build a stored transaction without going through a store."""
    return Transaction(
        id=tx_id or f"tx_{category}_{date}_{amount}",
        user_id=DEMO_USER,
        amount=amount,
        label=label or f"{category} {date}",
        category=category,
        type=type_,
        date=date,
        created_at=datetime.now(timezone.utc),
    )


def make_goal(name, target, current="0", goal_id=None):
    return Goal(
        id=goal_id or f"goal_{name}",
        user_id=DEMO_USER,
        name=name,
        target=target,
        current=current,
        created_at=datetime.now(timezone.utc),
    )


@pytest.fixture
def march_transactions():
    """Income $3000, expenses $800 Food + $200 Bills in March 2024."""
    return [
        make_transaction("3000", "Salary", "income", "2024-03-01"),
        make_transaction("800", "Food", "expense", "2024-03-05"),
        make_transaction("200", "Bills", "expense", "2024-03-10"),
    ]


@pytest.fixture
def settings():
    return Settings(storage_backend="memory", advisor_model="mock:advisor")


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def client(settings, store):
    """Client for an app whose advisor has no credential (fallback mode)."""
    app = create_app(settings=settings, store=store, adapter=None)
    return TestClient(app)
