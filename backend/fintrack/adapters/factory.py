"""Factory for creating LLM adapters."""
import logging
from typing import Optional
from fintrack.adapters.base import LLMAdapter
from fintrack.adapters.mock import MockLLMAdapter
from fintrack.adapters.openai_adapter import OpenAIAdapter
from fintrack.adapters.anthropic_adapter import AnthropicAdapter
from fintrack.adapters.gemini_adapter import GeminiAdapter

logger = logging.getLogger(__name__)


def get_llm_adapter(model_id: str, **kwargs) -> LLMAdapter:
    """
    Factory function to create appropriate LLM adapter based on model_id.

    Args:
        model_id: Model identifier (e.g., "mock:advisor", "gpt-4o", "claude-3-5-sonnet-20241022", "gemini-1.5-flash")
        **kwargs: Additional configuration for the adapter

    Returns:
        LLMAdapter instance

    Raises:
        ValueError: If the provider's API key is not configured
    """
    if model_id.startswith("mock:"):
        return MockLLMAdapter(model_id, **kwargs)
    elif model_id.startswith("gpt-") or model_id.startswith("o1-") or "openai" in model_id.lower():
        return OpenAIAdapter(model_id, **kwargs)
    elif "claude" in model_id.lower() or "anthropic" in model_id.lower():
        return AnthropicAdapter(model_id, **kwargs)
    elif "gemini" in model_id.lower() or "google" in model_id.lower():
        return GeminiAdapter(model_id, **kwargs)
    else:
        # Default to mock for unknown models
        return MockLLMAdapter(f"mock:{model_id}", **kwargs)


def get_advisor_adapter(model_id: str, **kwargs) -> Optional[LLMAdapter]:
    """
    Create the advisor's adapter, or None when no credential is configured.

    A missing API key is a supported configuration: the advisor then
    answers with a fixed fallback message instead of calling a model.
    """
    try:
        return get_llm_adapter(model_id, **kwargs)
    except ValueError as e:
        logger.warning("AI advisor running in fallback mode: %s", e)
        return None
