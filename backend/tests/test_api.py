"""Tests for API endpoints."""
import pytest
from fastapi.testclient import TestClient
from fintrack.adapters.mock import MockLLMAdapter
from fintrack.main import create_app
from fintrack.services.prompts import PromptBuilder


@pytest.fixture
def sample_transaction_data():
    """March 2024: income $3000, expenses $800 Food + $200 Bills."""
    return [
        {"amount": "3000", "label": "Salary", "category": "Salary", "type": "income", "date": "2024-03-01"},
        {"amount": "800", "label": "Groceries", "category": "Food", "type": "expense", "date": "2024-03-05"},
        {"amount": "200", "label": "Electricity", "category": "Bills", "type": "expense", "date": "2024-03-10"},
    ]


def _post_all(client, transactions):
    for tx in transactions:
        response = client.post("/api/transactions", json=tx)
        assert response.status_code == 200


def test_root_endpoint(client):
    """Test root endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    assert "message" in response.json()


def test_get_demo_user(client):
    response = client.get("/api/user")

    assert response.status_code == 200
    data = response.json()
    assert data["id"] == "demo-user-001"
    assert data["currency"] == "USD"
    assert data["language"] == "en"
    assert "createdAt" in data


def test_update_user_settings(client):
    response = client.patch("/api/user", json={"currency": "EUR", "language": "fr"})

    assert response.status_code == 200
    assert response.json()["currency"] == "EUR"
    assert client.get("/api/user").json()["language"] == "fr"


def test_update_user_rejects_unknown_currency(client):
    response = client.patch("/api/user", json={"currency": "XYZ"})

    assert response.status_code == 400
    assert "currency" in response.json()["error"]


def test_create_transaction_round_trip(client):
    """Test an amount of "12.50" comes back unchanged."""
    response = client.post("/api/transactions", json={
        "amount": "12.50",
        "label": "Lunch",
        "category": "Food",
        "type": "expense",
        "date": "2024-03-15",
    })

    assert response.status_code == 200
    created = response.json()
    assert created["amount"] == "12.50"
    assert created["userId"] == "demo-user-001"

    listed = client.get("/api/transactions").json()
    assert listed[0]["id"] == created["id"]
    assert listed[0]["amount"] == "12.50"


def test_list_transactions_is_stable(client, sample_transaction_data):
    """Test repeated listing returns the same list, newest date first."""
    _post_all(client, sample_transaction_data)

    first = client.get("/api/transactions").json()
    second = client.get("/api/transactions").json()

    assert first == second
    assert [tx["date"] for tx in first] == ["2024-03-10", "2024-03-05", "2024-03-01"]


@pytest.mark.parametrize("override,field", [
    ({"label": ""}, "label"),
    ({"amount": "abc"}, "amount"),
    ({"amount": "-5"}, "amount"),
    ({"amount": "99999999999999999999999999999"}, "amount"),
    ({"amount": "1E+3"}, "amount"),
    ({"amount": "12.345"}, "amount"),
    ({"category": "Rent"}, "category"),
    ({"type": "transfer"}, "type"),
    ({"date": "2024-02-30"}, "date"),
])
def test_create_transaction_validation(client, sample_transaction_data, override, field):
    body = {**sample_transaction_data[1], **override}

    response = client.post("/api/transactions", json=body)

    assert response.status_code == 400
    assert field in response.json()["error"]
    assert client.get("/api/transactions").json() == []


def test_create_transaction_missing_field(client):
    response = client.post("/api/transactions", json={"amount": "10"})

    assert response.status_code == 400
    assert "error" in response.json()


def test_update_transaction(client, sample_transaction_data):
    created = client.post("/api/transactions", json=sample_transaction_data[1]).json()

    response = client.patch(f"/api/transactions/{created['id']}", json={"amount": "850.25"})

    assert response.status_code == 200
    assert response.json()["amount"] == "850.25"
    assert response.json()["label"] == "Groceries"


def test_update_missing_transaction(client):
    response = client.patch("/api/transactions/does-not-exist", json={"label": "x"})

    assert response.status_code == 404
    assert response.json()["error"] == "Transaction not found"


def test_delete_transaction(client, sample_transaction_data):
    created = client.post("/api/transactions", json=sample_transaction_data[0]).json()

    response = client.delete(f"/api/transactions/{created['id']}")

    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert client.get("/api/transactions").json() == []


def test_delete_missing_transaction_leaves_list(client, sample_transaction_data):
    """Test deleting an unknown id is a 404 and changes nothing."""
    _post_all(client, sample_transaction_data)
    before = client.get("/api/transactions").json()

    response = client.delete("/api/transactions/does-not-exist")

    assert response.status_code == 404
    assert "error" in response.json()
    assert client.get("/api/transactions").json() == before


def test_goal_funding_scenario(client):
    """Test a 2500/10000 goal funded with 500 ends at 3000 (30%)."""
    goal = client.post("/api/goals", json={"name": "Emergency Fund", "target": "10000", "current": "2500"}).json()
    assert goal["color"] == "#007aff"

    insights = client.get("/api/insights", params={"month": "2024-03"}).json()["insights"]
    assert insights[2]["message"] == "Emergency Fund is 25.0% complete - keep it up!"

    response = client.post(f"/api/goals/{goal['id']}/fund", json={"amount": "500"})
    assert response.status_code == 200
    assert response.json()["current"] == "3000"

    insights = client.get("/api/insights", params={"month": "2024-03"}).json()["insights"]
    assert insights[2]["message"] == "Emergency Fund is 30.0% complete - keep it up!"


def test_goal_validation(client):
    response = client.post("/api/goals", json={"name": "Nothing", "target": "0"})

    assert response.status_code == 400
    assert "target" in response.json()["error"]


def test_oversized_amount_keeps_derived_views_working(client, sample_transaction_data):
    _post_all(client, sample_transaction_data)

    response = client.post(
        "/api/transactions",
        json={**sample_transaction_data[1], "amount": "99999999999999999999999999999"},
    )
    assert response.status_code == 400

    assert client.get("/api/metrics", params={"month": "2024-03"}).status_code == 200
    assert client.get("/api/insights", params={"month": "2024-03"}).status_code == 200


def test_goal_funding_stays_plain_decimal(client):
    response = client.post("/api/goals", json={"name": "Trip", "target": "5000", "current": "1E+3"})
    assert response.status_code == 400

    goal = client.post("/api/goals", json={"name": "Trip", "target": "5000", "current": "1000"}).json()
    response = client.post(f"/api/goals/{goal['id']}/fund", json={"amount": "1000.50"})

    assert response.status_code == 200
    assert response.json()["current"] == "2000.50"

    response = client.post(f"/api/goals/{goal['id']}/fund", json={"amount": "1E+3"})
    assert response.status_code == 400


def test_goal_update_and_delete(client):
    goal = client.post("/api/goals", json={"name": "Car", "target": "5000"}).json()
    assert goal["current"] == "0"

    updated = client.patch(f"/api/goals/{goal['id']}", json={"name": "New car", "color": "#ff9500"})
    assert updated.status_code == 200
    assert updated.json()["name"] == "New car"

    assert client.delete(f"/api/goals/{goal['id']}").status_code == 200
    assert client.get("/api/goals").json() == []
    assert client.delete(f"/api/goals/{goal['id']}").status_code == 404
    assert client.post(f"/api/goals/{goal['id']}/fund", json={"amount": "1"}).status_code == 404


def test_metrics_endpoint(client, sample_transaction_data):
    _post_all(client, sample_transaction_data)

    response = client.get("/api/metrics", params={"month": "2024-03"})

    assert response.status_code == 200
    data = response.json()
    assert data["income"] == "3000"
    assert data["expenses"] == "1000"
    assert data["savingsRate"] == "66.67"
    assert data["usedPercent"] == "40.00"
    assert data["remaining"] == "1500"


def test_metrics_rejects_bad_month(client):
    response = client.get("/api/metrics", params={"month": "2024-13"})

    assert response.status_code == 400
    assert "month" in response.json()["error"].lower()


def test_insights_endpoint(client, sample_transaction_data):
    _post_all(client, sample_transaction_data)

    response = client.get("/api/insights", params={"month": "2024-03"})

    assert response.status_code == 200
    data = response.json()
    assert data["month"] == "2024-03"
    assert len(data["insights"]) == 5
    assert data["insights"][1]["message"] == "Your top spending is Food: $800.00 this month."
    assert data["tip"].startswith("Great financial discipline")


def test_calendar_endpoint(client, sample_transaction_data):
    _post_all(client, sample_transaction_data)

    response = client.get("/api/calendar", params={"month": "2024-03"})

    assert response.status_code == 200
    days = response.json()["days"]
    assert [d["date"] for d in days] == ["2024-03-01", "2024-03-05", "2024-03-10"]
    assert days[1]["net"] == "-800"


def test_conversation_starts_with_welcome(client):
    messages = client.get("/api/ai/messages").json()

    assert len(messages) == 1
    assert messages[0]["role"] == "assistant"
    assert messages[0]["content"] == PromptBuilder.WELCOME_MESSAGE


def test_chat_without_credential(client):
    """Test chat never fails without a credential and returns the fallback text."""
    response = client.post("/api/ai/chat", json={"message": "How are my finances?"})

    assert response.status_code == 200
    data = response.json()
    assert data["userMessage"]["role"] == "user"
    assert data["userMessage"]["content"] == "How are my finances?"
    assert data["assistantMessage"]["role"] == "assistant"
    assert data["assistantMessage"]["content"] == PromptBuilder.FALLBACK_MESSAGE


def test_chat_requires_message(client):
    response = client.post("/api/ai/chat", json={"message": ""})

    assert response.status_code == 400
    assert len(client.get("/api/ai/messages").json()) == 1


def test_chat_with_adapter(settings, store):
    client = TestClient(create_app(settings=settings, store=store, adapter=MockLLMAdapter(reply="Save more.")))

    response = client.post("/api/ai/chat", json={"message": "Tips?"})

    assert response.status_code == 200
    assert response.json()["assistantMessage"]["content"] == "Save more."
    assert [m["role"] for m in client.get("/api/ai/messages").json()] == ["assistant", "user", "assistant"]


def test_chat_failure_keeps_user_message(settings, store):
    """Test a failed model call is a 500 and the user message is still stored."""
    adapter = MockLLMAdapter(error=TimeoutError("rate limited"))
    client = TestClient(create_app(settings=settings, store=store, adapter=adapter))

    response = client.post("/api/ai/chat", json={"message": "Are you there?"})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to process AI request"}
    messages = client.get("/api/ai/messages").json()
    assert messages[-1]["role"] == "user"
    assert messages[-1]["content"] == "Are you there?"


def test_clear_conversation(client):
    """Test clearing always leaves exactly one assistant message."""
    client.post("/api/ai/chat", json={"message": "one"})
    client.post("/api/ai/chat", json={"message": "two"})

    response = client.delete("/api/ai/messages")

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["welcomeMessage"]["role"] == "assistant"

    messages = client.get("/api/ai/messages").json()
    assert len(messages) == 1
    assert messages[0]["id"] == data["welcomeMessage"]["id"]


def test_sqlite_backed_app(settings, tmp_path):
    from fintrack.storage.database import SqliteStore

    store = SqliteStore(str(tmp_path / "api.db"))
    client = TestClient(create_app(settings=settings, store=store, adapter=None))

    created = client.post("/api/transactions", json={
        "amount": "12.50", "label": "Lunch", "category": "Food", "type": "expense", "date": "2024-03-15",
    }).json()

    assert client.get("/api/transactions").json() == [created]
    assert client.get("/api/user").status_code == 200
