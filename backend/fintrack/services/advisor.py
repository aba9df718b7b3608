"""AI advisor conversation service."""
import logging
from typing import List, Optional, Tuple
from fintrack.adapters.base import LLMAdapter
from fintrack.models.ai_message import AiMessage
from fintrack.services.metrics import MetricsCalculator
from fintrack.services.prompts import PromptBuilder
from fintrack.storage.base import LedgerStore
from fintrack.utils.dates import current_month

logger = logging.getLogger(__name__)


class AdvisorError(Exception):
    """The language-model request failed. The user's message is already stored."""


class AdvisorService:
    """Runs the advisor chat against the ledger store and an LLM adapter."""

    def __init__(self, store: LedgerStore, adapter: Optional[LLMAdapter] = None):
        """
        Args:
            store: Ledger storage
            adapter: LLM adapter, or None when no credential is configured
        """
        self.store = store
        self.adapter = adapter
        self.prompt_builder = PromptBuilder()
        self.calculator = MetricsCalculator()

    def get_conversation(self, user_id: str) -> List[AiMessage]:
        return self.store.get_ai_messages(user_id)

    async def send_message(
        self,
        user_id: str,
        message: str,
        month: Optional[str] = None,
    ) -> Tuple[AiMessage, AiMessage]:
        """
        Store a user message and produce the advisor's reply.

        The user message is persisted before the model is called, so it
        survives a failed request.

        Args:
            user_id: User identifier
            message: User-authored message
            month: Reference month for the financial summary (defaults to the current UTC month)

        Returns:
            (user_message, assistant_message)

        Raises:
            AdvisorError: If the model call fails
        """
        user_message = self.store.create_ai_message(user_id, "user", message)

        if self.adapter is None:
            assistant_message = self.store.create_ai_message(
                user_id, "assistant", self.prompt_builder.FALLBACK_MESSAGE
            )
            return user_message, assistant_message

        history = self.store.get_ai_messages(user_id)[-self.prompt_builder.HISTORY_LIMIT:]
        transactions = self.store.get_transactions(user_id)
        goals = self.store.get_goals(user_id)
        user = self.store.get_user(user_id)
        currency = user.currency if user else "USD"

        metrics = self.calculator.calculate(transactions, month or current_month())
        system_prompt = self.prompt_builder.build_advisor_prompt(
            metrics,
            len(transactions),
            goals,
            currency=currency,
        )

        try:
            reply = await self.adapter.chat(
                system_prompt,
                [{"role": m.role, "content": m.content} for m in history],
            )
        except Exception as e:
            logger.exception("AI chat request failed for user %s (model %s)", user_id, self.adapter.model_id)
            raise AdvisorError("Failed to process AI request") from e

        if not isinstance(reply, str) or not reply:
            logger.warning("Model %s returned no text content", self.adapter.model_id)
            reply = self.prompt_builder.NO_TEXT_REPLY

        assistant_message = self.store.create_ai_message(user_id, "assistant", reply)
        return user_message, assistant_message

    def clear_conversation(self, user_id: str) -> AiMessage:
        """Delete the conversation and start a new one with the welcome message."""
        removed = self.store.clear_ai_messages(user_id)
        logger.info("Cleared %d advisor messages for user %s", removed, user_id)
        return self.store.create_ai_message(user_id, "assistant", self.prompt_builder.WELCOME_MESSAGE)
