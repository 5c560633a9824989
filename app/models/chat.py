from enum import Enum
from typing import List

from pydantic import BaseModel, Field


class MessageRole(str, Enum):
    """Mentor chat message role"""
    USER = "user"
    ASSISTANT = "assistant"


class ChatMessage(BaseModel):
    role: MessageRole
    text: str


class ChatRequest(BaseModel):
    message: str = Field(min_length=1)
    history: List[ChatMessage] = Field(default_factory=list)


class ChatResponse(BaseModel):
    response: str
