"""Project mentor chat service"""
import asyncio
import logging
from typing import Dict, List, Optional

from app.config import CHAT_MODEL, LLM_TIMEOUT_SECONDS
from app.models.chat import ChatMessage
from app.models.project import Project
from app.services.llm.call_llm import LLMService
from .prompts import build_mentor_system_prompt

logger = logging.getLogger(__name__)


FALLBACK_REPLY = "I'm having trouble responding right now. Could you try rephrasing your question?"


class MentorChatError(Exception):
    """The mentor model could not be reached"""


class MentorService:
    """Answers questions about a project in the context of its roadmap"""

    def __init__(self, llm: Optional[LLMService] = None, timeout: float = LLM_TIMEOUT_SECONDS):
        self._llm = llm
        self.timeout = timeout

    @property
    def llm(self) -> LLMService:
        if self._llm is None:
            self._llm = LLMService(model=CHAT_MODEL, temperature=0.9, max_output_tokens=1024)
        return self._llm

    async def reply(self, project: Project, message: str, history: List[ChatMessage]) -> str:
        """
        Get the mentor's reply to a user message.

        Args:
            project: Project the conversation is about
            message: The user's new message
            history: Earlier turns, oldest first (not stored server-side)

        Returns:
            Reply text; a fixed fallback when the model answers with nothing

        Raises:
            MentorChatError: If the model call fails or times out
        """
        messages: List[Dict[str, str]] = [
            {"role": "system", "content": build_mentor_system_prompt(project)}
        ]
        messages.extend({"role": msg.role.value, "content": msg.text} for msg in history)
        messages.append({"role": "user", "content": message})

        try:
            text = await asyncio.wait_for(self.llm.invoke(messages), timeout=self.timeout)
        except Exception as e:
            logger.error(f"Mentor chat failed for project {project.id}: {e!r}")
            raise MentorChatError("Mentor is temporarily unavailable") from e

        if not text or not text.strip():
            logger.warning(f"Empty mentor response for project {project.id}")
            return FALLBACK_REPLY

        return text
