"""Base LLM adapter interface."""
from abc import ABC, abstractmethod
from typing import Dict, List, Optional


class LLMAdapter(ABC):
    """Abstract base class for LLM adapters."""

    def __init__(self, model_id: str, **kwargs):
        """
        Initialize the adapter.

        Args:
            model_id: Identifier for the model (e.g., "gpt-4o", "claude-3-5-sonnet-20241022")
            **kwargs: Additional provider-specific configuration
        """
        self.model_id = model_id
        self.config = kwargs

    @abstractmethod
    async def chat(
        self,
        system_prompt: str,
        messages: List[Dict[str, str]],
        max_tokens: int = 1024,
        temperature: float = 0.7,
    ) -> Optional[str]:
        """
        Generate the next assistant turn of a conversation.

        Args:
            system_prompt: Context and instructions for the model
            messages: Conversation history as {"role", "content"} dicts, oldest first
            max_tokens: Response length limit
            temperature: Sampling temperature

        Returns:
            The reply text, or None if the model returned no text content

        Raises:
            RuntimeError: If the provider call fails
        """
        pass
