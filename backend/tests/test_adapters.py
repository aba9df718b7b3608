"""Tests for LLM adapter selection and reply extraction."""
import pytest
from types import SimpleNamespace
from fintrack.adapters.anthropic_adapter import AnthropicAdapter
from fintrack.adapters.factory import get_advisor_adapter, get_llm_adapter
from fintrack.adapters.gemini_adapter import GeminiAdapter
from fintrack.adapters.mock import MockLLMAdapter
from fintrack.adapters.openai_adapter import OpenAIAdapter
from fintrack.config import settings


class FakeMessages:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.kwargs = None

    async def create(self, **kwargs):
        self.kwargs = kwargs
        if self.error:
            raise self.error
        return self.response


def test_factory_selects_provider():
    assert isinstance(get_llm_adapter("mock:advisor"), MockLLMAdapter)
    assert isinstance(get_llm_adapter("claude-3-5-sonnet-20241022", api_key="test"), AnthropicAdapter)
    assert isinstance(get_llm_adapter("gpt-4o", api_key="test"), OpenAIAdapter)
    assert isinstance(get_llm_adapter("gemini-1.5-flash", api_key="test"), GeminiAdapter)
    assert isinstance(get_llm_adapter("something-else"), MockLLMAdapter)


def test_advisor_adapter_none_without_key(monkeypatch):
    """Test a missing credential selects fallback mode instead of failing."""
    monkeypatch.setattr(settings, "anthropic_api_key", "")

    assert get_advisor_adapter("claude-3-5-sonnet-20241022") is None


@pytest.mark.asyncio
async def test_anthropic_adapter_returns_text():
    adapter = AnthropicAdapter(api_key="test")
    fake = FakeMessages(SimpleNamespace(content=[SimpleNamespace(type="text", text="Hello!")]))
    adapter.client = SimpleNamespace(messages=fake)

    reply = await adapter.chat("system context", [{"role": "user", "content": "hi"}])

    assert reply == "Hello!"
    assert fake.kwargs["system"] == "system context"
    assert fake.kwargs["messages"] == [{"role": "user", "content": "hi"}]


@pytest.mark.asyncio
async def test_anthropic_adapter_non_text_reply():
    adapter = AnthropicAdapter(api_key="test")
    fake = FakeMessages(SimpleNamespace(content=[SimpleNamespace(type="tool_use", id="x")]))
    adapter.client = SimpleNamespace(messages=fake)

    assert await adapter.chat("system", [{"role": "user", "content": "hi"}]) is None


@pytest.mark.asyncio
async def test_anthropic_adapter_wraps_errors():
    adapter = AnthropicAdapter(api_key="test")
    adapter.client = SimpleNamespace(messages=FakeMessages(error=ConnectionError("down")))

    with pytest.raises(RuntimeError, match="Anthropic API error"):
        await adapter.chat("system", [{"role": "user", "content": "hi"}])
