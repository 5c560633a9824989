from typing import Any, Dict, List

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage
from langchain_core.prompts import ChatPromptTemplate
from langchain_google_genai import ChatGoogleGenerativeAI

from app.config import GOOGLE_API_KEY, ROADMAP_MODEL


class LLMService:
    """Thin wrapper around the Gemini chat model returning plain text"""

    def __init__(self, model: str = ROADMAP_MODEL, temperature: float = 0.7, **kwargs):
        # max_retries=0: exactly one request per call
        self.llm = ChatGoogleGenerativeAI(
            model=model,
            temperature=temperature,
            google_api_key=GOOGLE_API_KEY,
            max_retries=0,
            **kwargs
        )

    async def invoke(self, messages: List[Dict[str, str]]) -> str:
        """
        Invoke the LLM with a list of role/content dictionaries.

        Args:
            messages: List of message dictionaries with 'role' and 'content' keys

        Returns:
            Text of the model response (may be empty)
        """
        lc_messages: List[BaseMessage] = [
            SystemMessage(content=msg["content"]) if msg["role"] == "system"
            else HumanMessage(content=msg["content"]) if msg["role"] == "user"
            else AIMessage(content=msg["content"])
            for msg in messages
        ]

        response = await self.llm.ainvoke(lc_messages)
        return _content_text(response.content)

    async def invoke_prompt(self, prompt: ChatPromptTemplate, variables: Dict[str, Any]) -> str:
        """Render a prompt template and return the model's text response"""
        response = await (prompt | self.llm).ainvoke(variables)
        return _content_text(response.content)


def _content_text(content: Any) -> str:
    """Gemini may answer with a list of content parts instead of a string"""
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts: List[str] = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and part.get("type") == "text":
                parts.append(part.get("text", ""))
        return "".join(parts)
    return str(content) if content is not None else ""
