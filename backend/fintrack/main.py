"""FastAPI main application."""
import logging
from typing import List, Optional
from fastapi import Depends, FastAPI, HTTPException, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from fintrack.adapters.base import LLMAdapter
from fintrack.adapters.factory import get_advisor_adapter
from fintrack.config import Settings, settings as default_settings
from fintrack.models.ai_message import AiMessage, ChatRequest, ChatResponse, ClearConversationResponse
from fintrack.models.goal import Goal, GoalCreate, GoalFund, GoalUpdate
from fintrack.models.metrics import CalendarResponse, FinancialMetrics, InsightsResponse
from fintrack.models.transaction import Transaction, TransactionCreate, TransactionUpdate
from fintrack.models.user import User, UserCreate, UserUpdate
from fintrack.services.advisor import AdvisorError, AdvisorService
from fintrack.services.goals import fund_goal
from fintrack.services.insights import InsightGenerator
from fintrack.services.metrics import MetricsCalculator
from fintrack.services.prompts import PromptBuilder
from fintrack.storage.base import LedgerStore
from fintrack.storage.factory import create_store
from fintrack.utils.dates import current_month, validate_month

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# Passed as ``adapter`` to build the advisor adapter from settings
FROM_SETTINGS = object()


def _configure_logging(level: str) -> None:
    if logging.root.handlers:
        return
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def seed_demo_data(store: LedgerStore, user_id: str) -> None:
    """Create the demo user and the advisor welcome message if missing."""
    if store.get_user(user_id) is None:
        store.create_user(
            UserCreate(name="FinTrack User", email="user@fintrack.app"),
            user_id=user_id,
        )
        logger.info("Created demo user %s", user_id)

    if not store.get_ai_messages(user_id):
        store.create_ai_message(user_id, "assistant", PromptBuilder.WELCOME_MESSAGE)


# ---------------------------------------------------------------------------
# Dependencies
# ---------------------------------------------------------------------------

def get_store(request: Request) -> LedgerStore:
    return request.app.state.store


def get_advisor(request: Request) -> AdvisorService:
    return request.app.state.advisor


def get_user_id(request: Request) -> str:
    """All routes act on the single demo user."""
    return request.app.state.settings.demo_user_id


def resolve_month(month: Optional[str] = Query(None, description="Reference month, YYYY-MM")) -> str:
    if month is None:
        return current_month()
    try:
        return validate_month(month)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


# ---------------------------------------------------------------------------
# Error handlers
# ---------------------------------------------------------------------------

def _format_validation_errors(exc: RequestValidationError) -> str:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        message = error.get("msg", "Invalid value")
        messages.append(f"{location}: {message}" if location else message)
    return "; ".join(messages)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"error": _format_validation_errors(exc)})


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


async def advisor_error_handler(request: Request, exc: AdvisorError):
    return JSONResponse(status_code=500, content={"error": str(exc)})


async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": str(exc)})


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------

def create_app(
    settings: Optional[Settings] = None,
    store: Optional[LedgerStore] = None,
    adapter=FROM_SETTINGS,
) -> FastAPI:
    """
    Build the application with an explicitly constructed store and advisor.

    Args:
        settings: Application settings (defaults to the environment)
        store: Ledger store (defaults to ``create_store(settings)``)
        adapter: LLM adapter for the advisor; None runs the advisor in
            fallback mode, the default builds one from settings

    Returns:
        FastAPI application
    """
    settings = settings or default_settings
    _configure_logging(settings.log_level)

    if store is None:
        store = create_store(settings)
    if adapter is FROM_SETTINGS:
        adapter = get_advisor_adapter(settings.advisor_model)

    seed_demo_data(store, settings.demo_user_id)

    app = FastAPI(title=settings.app_name, debug=settings.debug)
    app.state.settings = settings
    app.state.store = store
    app.state.advisor = AdvisorService(store, adapter)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(AdvisorError, advisor_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)

    _register_routes(app)
    return app


def _register_routes(app: FastAPI) -> None:
    calculator = MetricsCalculator()
    insight_generator = InsightGenerator(calculator)

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {"message": "FinTrack API", "version": "1.0.0"}

    # User

    @app.get("/api/user", response_model=User)
    async def get_user(
        store: LedgerStore = Depends(get_store),
        user_id: str = Depends(get_user_id),
    ):
        user = store.get_user(user_id)
        if not user:
            raise HTTPException(status_code=404, detail="User not found")
        return user

    @app.patch("/api/user", response_model=User)
    async def update_user(
        body: UserUpdate,
        store: LedgerStore = Depends(get_store),
        user_id: str = Depends(get_user_id),
    ):
        """Update display currency and/or language."""
        user = store.update_user(user_id, body.model_dump(exclude_unset=True, exclude_none=True))
        if not user:
            raise HTTPException(status_code=404, detail="User not found")
        return user

    # Transactions

    @app.get("/api/transactions", response_model=List[Transaction])
    async def list_transactions(
        store: LedgerStore = Depends(get_store),
        user_id: str = Depends(get_user_id),
    ):
        """List transactions, newest date first."""
        return store.get_transactions(user_id)

    @app.post("/api/transactions", response_model=Transaction)
    async def create_transaction(
        body: TransactionCreate,
        store: LedgerStore = Depends(get_store),
        user_id: str = Depends(get_user_id),
    ):
        return store.create_transaction(user_id, body)

    @app.patch("/api/transactions/{transaction_id}", response_model=Transaction)
    async def update_transaction(
        transaction_id: str,
        body: TransactionUpdate,
        store: LedgerStore = Depends(get_store),
    ):
        transaction = store.update_transaction(
            transaction_id,
            body.model_dump(exclude_unset=True, exclude_none=True),
        )
        if not transaction:
            raise HTTPException(status_code=404, detail="Transaction not found")
        return transaction

    @app.delete("/api/transactions/{transaction_id}")
    async def delete_transaction(
        transaction_id: str,
        store: LedgerStore = Depends(get_store),
    ):
        if not store.delete_transaction(transaction_id):
            raise HTTPException(status_code=404, detail="Transaction not found")
        return {"success": True}

    # Goals

    @app.get("/api/goals", response_model=List[Goal])
    async def list_goals(
        store: LedgerStore = Depends(get_store),
        user_id: str = Depends(get_user_id),
    ):
        """List goals, most recently created first."""
        return store.get_goals(user_id)

    @app.post("/api/goals", response_model=Goal)
    async def create_goal(
        body: GoalCreate,
        store: LedgerStore = Depends(get_store),
        user_id: str = Depends(get_user_id),
    ):
        return store.create_goal(user_id, body)

    @app.patch("/api/goals/{goal_id}", response_model=Goal)
    async def update_goal(
        goal_id: str,
        body: GoalUpdate,
        store: LedgerStore = Depends(get_store),
    ):
        goal = store.update_goal(goal_id, body.model_dump(exclude_unset=True, exclude_none=True))
        if not goal:
            raise HTTPException(status_code=404, detail="Goal not found")
        return goal

    @app.post("/api/goals/{goal_id}/fund", response_model=Goal)
    async def fund_goal_endpoint(
        goal_id: str,
        body: GoalFund,
        store: LedgerStore = Depends(get_store),
    ):
        """Add an amount to a goal's current savings."""
        goal = fund_goal(store, goal_id, body.amount)
        if not goal:
            raise HTTPException(status_code=404, detail="Goal not found")
        return goal

    @app.delete("/api/goals/{goal_id}")
    async def delete_goal(
        goal_id: str,
        store: LedgerStore = Depends(get_store),
    ):
        if not store.delete_goal(goal_id):
            raise HTTPException(status_code=404, detail="Goal not found")
        return {"success": True}

    # Derived views

    @app.get("/api/metrics", response_model=FinancialMetrics)
    async def get_metrics(
        month: str = Depends(resolve_month),
        store: LedgerStore = Depends(get_store),
        user_id: str = Depends(get_user_id),
    ):
        """Income, expenses, budget usage and savings rate for a month."""
        return calculator.calculate(store.get_transactions(user_id), month)

    @app.get("/api/insights", response_model=InsightsResponse)
    async def get_insights(
        month: str = Depends(resolve_month),
        store: LedgerStore = Depends(get_store),
        user_id: str = Depends(get_user_id),
    ):
        transactions = store.get_transactions(user_id)
        goals = store.get_goals(user_id)
        user = store.get_user(user_id)
        metrics = calculator.calculate(transactions, month)

        insights = insight_generator.generate(
            transactions,
            goals,
            month,
            metrics,
            currency=user.currency if user else "USD",
        )
        return InsightsResponse(month=month, insights=insights, tip=insight_generator.quick_tip(metrics))

    @app.get("/api/calendar", response_model=CalendarResponse)
    async def get_calendar(
        month: str = Depends(resolve_month),
        store: LedgerStore = Depends(get_store),
        user_id: str = Depends(get_user_id),
    ):
        """Per-day totals for the calendar view."""
        days = calculator.daily_totals(store.get_transactions(user_id), month)
        return CalendarResponse(month=month, days=days)

    # AI advisor

    @app.get("/api/ai/messages", response_model=List[AiMessage])
    async def list_ai_messages(
        advisor: AdvisorService = Depends(get_advisor),
        user_id: str = Depends(get_user_id),
    ):
        return advisor.get_conversation(user_id)

    @app.post("/api/ai/chat", response_model=ChatResponse)
    async def chat(
        body: ChatRequest,
        advisor: AdvisorService = Depends(get_advisor),
        user_id: str = Depends(get_user_id),
    ):
        """Send a message to the advisor. Failures leave the user message stored."""
        user_message, assistant_message = await advisor.send_message(user_id, body.message)
        return ChatResponse(user_message=user_message, assistant_message=assistant_message)

    @app.delete("/api/ai/messages", response_model=ClearConversationResponse)
    async def clear_ai_messages(
        advisor: AdvisorService = Depends(get_advisor),
        user_id: str = Depends(get_user_id),
    ):
        welcome_message = advisor.clear_conversation(user_id)
        return ClearConversationResponse(success=True, welcome_message=welcome_message)


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
