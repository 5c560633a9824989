"""Roadmap generation with Gemini

One model call per request. The response goes through three stages, each
with its own error type: request (GenerationError), parse
(MalformedResponseError) and validate (InvalidRoadmapError). Lock state
from the model is never trusted and is reset before returning.
"""
import asyncio
import logging
from typing import Any, Dict, Optional

from app.config import LLM_TIMEOUT_SECONDS, ROADMAP_MODEL
from app.models.profile import ProjectIdea, SkillProfile
from app.models.roadmap import Roadmap
from app.services.llm.call_llm import LLMService
from app.services.llm.response_parser import ResponseParseError, parse_json_response
from .errors import GenerationError, MalformedResponseError
from .prompts import prompt_template
from .progress import iter_tasks
from .state_machine import normalize_lock_state
from .validator import validate_roadmap

logger = logging.getLogger(__name__)


def build_prompt_variables(idea: ProjectIdea, profile: SkillProfile) -> Dict[str, Any]:
    """Map a project idea and skill profile onto the roadmap prompt variables"""
    return {
        "title": idea.title,
        "description": idea.description or "N/A",
        "difficulty": idea.difficulty,
        "skills": ", ".join(profile.skills) if profile.skills else "general programming",
        "experience": profile.experience or "beginner",
        "time_budget": profile.time_budget or "flexible",
    }


class RoadmapGenerator:
    """Builds validated roadmaps from the generative model"""

    def __init__(self, llm: Optional[LLMService] = None, timeout: float = LLM_TIMEOUT_SECONDS):
        self._llm = llm
        self.timeout = timeout

    @property
    def llm(self) -> LLMService:
        if self._llm is None:
            self._llm = LLMService(model=ROADMAP_MODEL, temperature=0.7)
        return self._llm

    async def request_text(self, idea: ProjectIdea, profile: SkillProfile) -> str:
        """Send the roadmap prompt and return the raw model text"""
        variables = build_prompt_variables(idea, profile)
        try:
            text = await asyncio.wait_for(
                self.llm.invoke_prompt(prompt_template, variables),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError as e:
            logger.error(f"Roadmap generation timed out after {self.timeout}s for '{idea.title}'")
            raise GenerationError(f"Model did not answer within {self.timeout} seconds") from e
        except Exception as e:
            logger.error(f"Roadmap generation request failed for '{idea.title}': {e}")
            raise GenerationError(f"Model call failed: {e}") from e

        if not text or not text.strip():
            raise GenerationError("Model returned an empty response")
        return text

    async def generate_roadmap(self, idea: ProjectIdea, profile: SkillProfile) -> Roadmap:
        """
        Generate a roadmap for a project idea.

        Args:
            idea: Project title, description and difficulty
            profile: The user's skills and experience

        Returns:
            Roadmap with every task pending and only the first task unlocked

        Raises:
            GenerationError: model call failed, timed out or returned no text
            MalformedResponseError: response is not JSON
            InvalidRoadmapError: JSON does not satisfy the roadmap invariants
        """
        logger.info(f"Generating roadmap for '{idea.title}' ({idea.difficulty})")
        text = await self.request_text(idea, profile)

        try:
            data = parse_json_response(text)
        except ResponseParseError as e:
            logger.warning(f"Unparseable roadmap response for '{idea.title}': {e}")
            raise MalformedResponseError(str(e)) from e

        roadmap = normalize_lock_state(validate_roadmap(data))

        task_count = sum(1 for _ in iter_tasks(roadmap))
        logger.info(
            f"Generated roadmap for '{idea.title}': "
            f"{len(roadmap.milestones)} milestones, {task_count} tasks"
        )
        return roadmap
