"""AI advisor conversation models."""
from datetime import datetime
from typing import Literal
from pydantic import Field
from fintrack.models.base import CamelModel

MessageRole = Literal["user", "assistant"]


class AiMessage(CamelModel):
    """One message of the advisor conversation."""

    id: str
    user_id: str
    role: MessageRole
    content: str
    created_at: datetime


class ChatRequest(CamelModel):
    """Message sent to the advisor."""

    message: str = Field(..., min_length=1, description="User-authored message")


class ChatResponse(CamelModel):
    """Stored user message and the advisor's reply."""

    user_message: AiMessage
    assistant_message: AiMessage


class ClearConversationResponse(CamelModel):
    """Result of resetting the conversation."""

    success: bool = True
    welcome_message: AiMessage
