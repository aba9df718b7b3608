"""Google Gemini LLM adapter."""
from typing import Dict, List, Optional
import google.generativeai as genai
from fintrack.adapters.base import LLMAdapter
from fintrack.config import settings


class GeminiAdapter(LLMAdapter):
    """Google Gemini API adapter."""

    def __init__(self, model_id: str = "gemini-1.5-flash", **kwargs):
        super().__init__(model_id, **kwargs)
        api_key = kwargs.get("api_key") or settings.google_api_key
        if not api_key:
            raise ValueError("Google API key required")
        genai.configure(api_key=api_key)

    async def chat(
        self,
        system_prompt: str,
        messages: List[Dict[str, str]],
        max_tokens: int = 1024,
        temperature: float = 0.7,
    ) -> Optional[str]:
        """Generate a reply using the Gemini API."""
        # The system prompt is fixed per model instance, so build one per call
        model = genai.GenerativeModel(self.model_id, system_instruction=system_prompt)
        generation_config = genai.types.GenerationConfig(
            temperature=temperature,
            max_output_tokens=max_tokens,
        )
        # Gemini calls the assistant role "model"
        contents = [
            {"role": "model" if m["role"] == "assistant" else "user", "parts": [m["content"]]}
            for m in messages
        ]

        try:
            response = await model.generate_content_async(
                contents,
                generation_config=generation_config,
            )
        except Exception as e:
            raise RuntimeError(f"Gemini API error: {str(e)}")

        try:
            return response.text
        except ValueError:
            # Raised when the candidate has no text parts (e.g. blocked)
            return None
