from .suggestion_prompts import (
    suggest_projects_prompt,
    classify_input_prompt,
    skill_ideas_prompt,
    project_variants_prompt,
    parse_profile_prompt,
)

__all__ = [
    "suggest_projects_prompt",
    "classify_input_prompt",
    "skill_ideas_prompt",
    "project_variants_prompt",
    "parse_profile_prompt",
]
