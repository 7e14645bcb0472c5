"""
Personas, prompt templates and default token ceilings for each stage.
"""

STRATEGIST_PERSONA = "You are an expert content strategist."

OUTLINE_PROMPT = 'Create a detailed blog post outline about: "{topic}"'

SUMMARY_PROMPT = "Summarize the following blog outline in exactly 2 sentences:\n\n{outline}"

REFUSAL_SENTENCE = "I don't have that information in the outline/summary."

GROUNDED_INSTRUCTIONS = (
    "You answer questions using ONLY the provided context. "
    "If the answer is not clearly supported by the context, say: "
    f'"{REFUSAL_SENTENCE}" '
    "Be concise and helpful."
)

ANSWER_PROMPT = "CONTEXT:\n{context}\n\nQUESTION:\n{question}\n\nANSWER:"

# ─── Output token ceilings ──────────────────────────────────────────────────
OUTLINE_MAX_TOKENS = 300
SUMMARY_MAX_TOKENS = 120       # kept below the outline ceiling
ANSWER_MAX_TOKENS = 200
