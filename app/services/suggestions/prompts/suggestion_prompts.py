"""Prompt templates for project suggestions and profile parsing"""
from langchain_core.prompts import ChatPromptTemplate


IDEA_FORMAT = """Return ONLY a JSON array, no markdown and no extra text:
[
  {{
    "title": "Project Name",
    "description": "2-3 sentences",
    "difficulty": "beginner" | "intermediate" | "advanced",
    "estimatedTime": "e.g., 1-2 weeks",
    "stack": ["Tech1", "Tech2"]
  }}
]"""

PROFILE_BLOCK = """User profile:
- Current Skills: {skills}
- Preferred Tech: {preferred_tech}
- Experience: {experience}
- Time Budget: {time_budget}"""


suggest_projects_prompt = ChatPromptTemplate.from_messages([
    (
        "system",
        "You are a project suggestion AI. Based on the user's profile, suggest 3 diverse project ideas "
        "that match their skill level, use their preferred technologies, fit their time budget "
        "and provide good learning opportunities.\n\n" + IDEA_FORMAT
    ),
    ("user", PROFILE_BLOCK),
])


classify_input_prompt = ChatPromptTemplate.from_messages([
    (
        "user",
        """Analyze this input: "{input}"

Is this primarily:
A) A skill/technology the user wants to learn (e.g., "React", "machine learning", "Node.js")
B) A project idea description (e.g., "a task manager", "weather app", "e-commerce site")

Answer with just "skill" or "project"."""
    ),
])


skill_ideas_prompt = ChatPromptTemplate.from_messages([
    (
        "system",
        "You are a project generator AI. Generate 3 project ideas that teach the requested skill. "
        "Each project must focus on that skill, match the user's experience level, "
        "and be progressively more complex than the previous one.\n\n" + IDEA_FORMAT
    ),
    ("user", "The user wants to learn: \"{input}\"\n\n" + PROFILE_BLOCK),
])


project_variants_prompt = ChatPromptTemplate.from_messages([
    (
        "system",
        "You are a project generator AI. Generate 3 variations of the requested project:\n"
        "1. Beginner/Minimal version - core features only\n"
        "2. Intermediate version - with additional features\n"
        "3. Advanced/Production-ready version - full features, optimization and polish\n\n" + IDEA_FORMAT
    ),
    ("user", "The user wants to build: \"{input}\"\n\n" + PROFILE_BLOCK),
])


parse_profile_prompt = ChatPromptTemplate.from_messages([
    (
        "system",
        """You are a skills analyzer. Parse the user's description and extract structured information.

Return ONLY a JSON object, no markdown and no extra text, with:
- skills: array of specific technical skills mentioned (e.g., ["HTML", "CSS", "JavaScript"])
- preferredTech: array of technologies or frameworks mentioned (e.g., ["React", "Node.js"])
- experience: one of "beginner", "intermediate" or "advanced"
- timeBudget: estimated weekly hours as a string (e.g., "10 hours/week") or "flexible" if not specified"""
    ),
    ("user", "User description: \"{text}\""),
])
