import os
from dotenv import load_dotenv

load_dotenv(dotenv_path=".env")

# Supabase
SUPABASE_URL = os.getenv("SUPABASE_URL")
SUPABASE_SERVICE_ROLE_KEY = os.getenv("SUPABASE_SERVICE_ROLE_KEY")
PROJECTS_TABLE = os.getenv("PROJECTS_TABLE", "projects")

# Gemini
GOOGLE_API_KEY = os.getenv("GOOGLE_API_KEY") or os.getenv("GEMINI_API_KEY")
ROADMAP_MODEL = os.getenv("ROADMAP_MODEL", "gemini-2.0-flash")
CHAT_MODEL = os.getenv("CHAT_MODEL", "gemini-2.0-flash")
LLM_TIMEOUT_SECONDS = float(os.getenv("LLM_TIMEOUT_SECONDS", "60"))

# Optimistic concurrency for task toggles
TOGGLE_MAX_ATTEMPTS = int(os.getenv("TOGGLE_MAX_ATTEMPTS", "3"))
