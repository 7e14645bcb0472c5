"""
Summary stage: condense the outline into two sentences.

The two-sentence limit is only asked of the model. count_sentences() lets the
caller notice a mismatch; nothing here re-requests or trims the result.
"""
import re

from .errors import ValidationError
from .llm import GenerationClient, GenerationRequest
from .prompts import STRATEGIST_PERSONA, SUMMARY_MAX_TOKENS, SUMMARY_PROMPT

_SENTENCE_END = re.compile(r"[.!?]+(?=\s|$)")


def count_sentences(text: str) -> int:
    """Rough sentence count: runs of terminal punctuation followed by whitespace or the end."""
    text = text.strip()
    if not text:
        return 0
    count = len(_SENTENCE_END.findall(text))
    # trailing clause without terminal punctuation still counts as one
    if text[-1] not in ".!?":
        count += 1
    return count


class Summarizer:
    def __init__(self, client: GenerationClient, max_tokens: int = SUMMARY_MAX_TOKENS):
        self.client = client
        self.max_tokens = max_tokens

    def build_request(self, outline: str) -> GenerationRequest:
        return GenerationRequest(
            instructions=STRATEGIST_PERSONA,
            input=SUMMARY_PROMPT.format(outline=outline),
            max_output_tokens=self.max_tokens,
        )

    def run(self, outline: str) -> str:
        if not outline or not outline.strip():
            raise ValidationError("Cannot summarize an empty outline.")
        return self.client.complete(self.build_request(outline)).strip()
