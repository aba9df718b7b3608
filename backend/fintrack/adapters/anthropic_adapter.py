"""Anthropic Claude LLM adapter."""
from typing import Dict, List, Optional
from anthropic import AsyncAnthropic
from fintrack.adapters.base import LLMAdapter
from fintrack.config import settings


class AnthropicAdapter(LLMAdapter):
    """Anthropic Claude API adapter."""

    def __init__(self, model_id: str = "claude-3-5-sonnet-20241022", **kwargs):
        super().__init__(model_id, **kwargs)
        api_key = kwargs.get("api_key") or settings.anthropic_api_key
        if not api_key:
            raise ValueError("Anthropic API key required")
        self.client = AsyncAnthropic(api_key=api_key)

    async def chat(
        self,
        system_prompt: str,
        messages: List[Dict[str, str]],
        max_tokens: int = 1024,
        temperature: float = 0.7,
    ) -> Optional[str]:
        """Generate a reply using the Anthropic Messages API."""
        try:
            response = await self.client.messages.create(
                model=self.model_id,
                max_tokens=max_tokens,
                temperature=temperature,
                system=system_prompt,
                messages=[
                    {"role": m["role"], "content": m["content"]}
                    for m in messages
                ],
            )
        except Exception as e:
            raise RuntimeError(f"Anthropic API error: {str(e)}")

        if not response.content or response.content[0].type != "text":
            return None
        return response.content[0].text
