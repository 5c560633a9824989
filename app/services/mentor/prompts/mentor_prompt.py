"""System prompt for the project mentor chat"""
from app.models.project import Project
from app.services.roadmap.progress import (
    active_tasks,
    current_milestone,
    milestone_progress,
    recently_completed_tasks,
)


MENTOR_SYSTEM_PROMPT = (
    "You are an AI mentor helping a developer build their project. "
    "You have full awareness of their progress and current state. "
    "Remember the conversation and provide contextual, helpful responses."
)

RECENT_TASK_LIMIT = 5


def build_mentor_system_prompt(project: Project) -> str:
    """
    Build the mentor system prompt for a project.

    Args:
        project: Project whose roadmap and progress give the context

    Returns:
        Complete system prompt string
    """
    roadmap = project.roadmap
    progress = project.progress

    prompt = MENTOR_SYSTEM_PROMPT
    prompt += "\n\nPROJECT CONTEXT:\n"
    prompt += f"- Title: {project.title}\n"
    prompt += f"- Description: {project.description or 'N/A'}\n"
    prompt += f"- Difficulty: {project.difficulty or 'N/A'}\n"
    prompt += (
        f"- Overall Progress: {progress.progress_percent}% complete "
        f"({progress.completed_tasks}/{progress.total_tasks} tasks)\n"
    )

    milestone = current_milestone(roadmap)
    completed, total = milestone_progress(milestone)
    prompt += "\nCURRENT STATUS:\n"
    if progress.completed_tasks == 0:
        prompt += "- Starting the project\n"
    prompt += f"- Current Milestone: {milestone.title}\n"
    prompt += f"- Milestone Description: {milestone.description}\n"
    prompt += f"- Milestone Progress: {completed}/{total} tasks completed\n"

    prompt += "\nRECENTLY COMPLETED TASKS:\n"
    recent = recently_completed_tasks(roadmap, RECENT_TASK_LIMIT)
    if recent:
        prompt += "".join(f"- {m.title}: {t.title}\n" for m, t in recent)
    else:
        prompt += "- No tasks completed yet\n"

    prompt += "\nCURRENT ACTIVE TASKS:\n"
    active = active_tasks(roadmap)
    if active:
        prompt += "".join(f"- {m.title}: {t.title} - {t.description}\n" for m, t in active)
    else:
        prompt += "- All current tasks completed!\n"

    prompt += (
        "\nINSTRUCTIONS:\n"
        "- Build upon earlier messages in the conversation\n"
        "- Give specific, actionable advice for the current milestone\n"
        "- Be encouraging and conversational\n"
        "- Keep responses concise (2-5 sentences)\n"
    )
    return prompt
