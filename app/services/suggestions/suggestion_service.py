"""Project suggestion and profile parsing service"""
import asyncio
import logging
from typing import Any, Dict, List, Optional, Tuple

from langchain_core.prompts import ChatPromptTemplate
from pydantic import TypeAdapter, ValidationError

from app.config import LLM_TIMEOUT_SECONDS, ROADMAP_MODEL
from app.models.profile import InputKind, ProjectIdea, SkillProfile
from app.services.llm.call_llm import LLMService
from app.services.llm.response_parser import ResponseParseError, parse_json_response
from .prompts import (
    classify_input_prompt,
    parse_profile_prompt,
    project_variants_prompt,
    skill_ideas_prompt,
    suggest_projects_prompt,
)

logger = logging.getLogger(__name__)

_ideas_adapter = TypeAdapter(List[ProjectIdea])


class SuggestionError(Exception):
    """The model call failed or its answer could not be used"""


def _profile_variables(profile: SkillProfile) -> Dict[str, Any]:
    return {
        "skills": ", ".join(profile.skills) if profile.skills else "general programming",
        "preferred_tech": ", ".join(profile.preferred_tech) if profile.preferred_tech else "any",
        "experience": profile.experience or "beginner",
        "time_budget": profile.time_budget or "flexible",
    }


class SuggestionService:
    """Project ideas and skill profiles from free text"""

    def __init__(self, llm: Optional[LLMService] = None, timeout: float = LLM_TIMEOUT_SECONDS):
        self._llm = llm
        self.timeout = timeout

    @property
    def llm(self) -> LLMService:
        if self._llm is None:
            self._llm = LLMService(model=ROADMAP_MODEL, temperature=0.7)
        return self._llm

    async def _ask(self, prompt: ChatPromptTemplate, variables: Dict[str, Any]) -> str:
        try:
            return await asyncio.wait_for(
                self.llm.invoke_prompt(prompt, variables), timeout=self.timeout
            )
        except Exception as e:
            logger.error(f"Suggestion model call failed: {e!r}")
            raise SuggestionError(f"Model call failed: {e!r}") from e

    async def _ask_json(self, prompt: ChatPromptTemplate, variables: Dict[str, Any]) -> Any:
        text = await self._ask(prompt, variables)
        try:
            return parse_json_response(text)
        except ResponseParseError as e:
            raise SuggestionError(str(e)) from e

    async def _ask_ideas(self, prompt: ChatPromptTemplate, variables: Dict[str, Any]) -> List[ProjectIdea]:
        data = await self._ask_json(prompt, variables)
        try:
            return _ideas_adapter.validate_python(data)
        except ValidationError as e:
            raise SuggestionError(f"Model returned malformed project ideas: {e.error_count()} errors") from e

    async def suggest_projects(self, profile: SkillProfile) -> List[ProjectIdea]:
        """Suggest 3 project ideas that fit a user's profile"""
        ideas = await self._ask_ideas(suggest_projects_prompt, _profile_variables(profile))
        logger.info(f"Suggested {len(ideas)} projects")
        return ideas

    async def classify_input(self, input_text: str) -> InputKind:
        """Decide whether free text names a skill to learn or a project to build"""
        answer = await self._ask(classify_input_prompt, {"input": input_text})
        return InputKind.SKILL if "skill" in answer.lower() else InputKind.PROJECT

    async def generate_project_ideas(
        self, input_text: str, profile: SkillProfile
    ) -> Tuple[List[ProjectIdea], InputKind]:
        """
        Turn a skill or project idea into 3 concrete project ideas.

        A skill yields 3 projects that teach it; a project idea yields 3
        variants of increasing scope.

        Returns:
            (ideas, how the input was interpreted)
        """
        kind = await self.classify_input(input_text)
        prompt = skill_ideas_prompt if kind == InputKind.SKILL else project_variants_prompt

        variables = _profile_variables(profile)
        variables["input"] = input_text

        ideas = await self._ask_ideas(prompt, variables)
        logger.info(f"Generated {len(ideas)} project ideas from {kind.value} input")
        return ideas, kind

    async def parse_profile(self, text: str) -> SkillProfile:
        """Extract a skill profile from the user's self-description"""
        data = await self._ask_json(parse_profile_prompt, {"text": text})
        try:
            return SkillProfile.model_validate(data)
        except ValidationError as e:
            raise SuggestionError(f"Model returned a malformed profile: {e.error_count()} errors") from e
