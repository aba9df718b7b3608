"""Mock LLM adapter for testing without API calls."""
from typing import Dict, List, Optional
from fintrack.adapters.base import LLMAdapter


class MockLLMAdapter(LLMAdapter):
    """
    Mock LLM adapter that returns deterministic responses.

    The last prompt and history are kept on the instance so tests can
    inspect what would have been sent to a real provider.
    """

    REPLY_TEMPLATE = (
        "Based on your {message_count} recent messages, keep tracking your spending "
        "and put any surplus towards your goals."
    )

    def __init__(self, model_id: str = "mock:advisor", **kwargs):
        super().__init__(model_id, **kwargs)
        self.reply: Optional[str] = kwargs.get("reply")
        self.error: Optional[Exception] = kwargs.get("error")
        self.last_system_prompt: Optional[str] = None
        self.last_messages: List[Dict[str, str]] = []
        self.call_count = 0

    async def chat(
        self,
        system_prompt: str,
        messages: List[Dict[str, str]],
        max_tokens: int = 1024,
        temperature: float = 0.7,
    ) -> Optional[str]:
        """Return the configured reply, or a templated one."""
        self.call_count += 1
        self.last_system_prompt = system_prompt
        self.last_messages = list(messages)

        if self.error is not None:
            raise RuntimeError(f"Mock API error: {self.error}")

        if "reply" in self.config:
            return self.reply
        return self.REPLY_TEMPLATE.format(message_count=len(messages))
