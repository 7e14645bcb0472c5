"""
Shared configuration for the Content Studio.
All provider settings and token ceilings in one place.
"""
import os
from dotenv import load_dotenv

from studio import prompts

load_dotenv()

# ─── API Keys ───────────────────────────────────────────────────────────────
LLM_API_KEY = os.getenv("LLM_API_KEY", "")
LLM_BASE_URL = os.getenv("LLM_BASE_URL", "https://api.z.ai/api/anthropic")
LLM_MODEL = os.getenv("LLM_MODEL", "glm-4.7")

# ─── Output Token Ceilings (defaults live in studio/prompts.py) ─────────────
OUTLINE_MAX_TOKENS = int(os.getenv("OUTLINE_MAX_TOKENS", prompts.OUTLINE_MAX_TOKENS))
SUMMARY_MAX_TOKENS = int(os.getenv("SUMMARY_MAX_TOKENS", prompts.SUMMARY_MAX_TOKENS))
ANSWER_MAX_TOKENS = int(os.getenv("ANSWER_MAX_TOKENS", prompts.ANSWER_MAX_TOKENS))
