from .mentor_prompt import build_mentor_system_prompt

__all__ = ["build_mentor_system_prompt"]
