"""OpenAI LLM adapter."""
from typing import Dict, List, Optional
from openai import AsyncOpenAI
from fintrack.adapters.base import LLMAdapter
from fintrack.config import settings


class OpenAIAdapter(LLMAdapter):
    """OpenAI API adapter."""

    def __init__(self, model_id: str = "gpt-4o", **kwargs):
        super().__init__(model_id, **kwargs)
        api_key = kwargs.get("api_key") or settings.openai_api_key
        if not api_key:
            raise ValueError("OpenAI API key required")
        self.client = AsyncOpenAI(api_key=api_key)

    async def chat(
        self,
        system_prompt: str,
        messages: List[Dict[str, str]],
        max_tokens: int = 1024,
        temperature: float = 0.7,
    ) -> Optional[str]:
        """Generate a reply using the Chat Completions API."""
        try:
            response = await self.client.chat.completions.create(
                model=self.model_id,
                messages=[
                    {"role": "system", "content": system_prompt},
                    *({"role": m["role"], "content": m["content"]} for m in messages),
                ],
                max_tokens=max_tokens,
                temperature=temperature,
            )
        except Exception as e:
            raise RuntimeError(f"OpenAI API error: {str(e)}")

        if not response.choices:
            return None
        return response.choices[0].message.content
