"""
Grounding context: the labeled concatenation of topic, outline and summary.
"""


def build_context(topic: str, outline: str, summary: str) -> str:
    """Compose the context string. Section labels and order are fixed."""
    return f"TOPIC:\n{topic}\n\nOUTLINE:\n{outline}\n\nSUMMARY:\n{summary}\n"
