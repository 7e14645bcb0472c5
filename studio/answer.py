"""
Answers follow-up questions from the grounding context only.

Grounding is an instruction to the model; the answer is not checked against
the context locally.
"""
from .errors import ValidationError
from .llm import GenerationClient, GenerationRequest
from .prompts import ANSWER_MAX_TOKENS, ANSWER_PROMPT, GROUNDED_INSTRUCTIONS, REFUSAL_SENTENCE


def is_refusal(answer: str) -> bool:
    """True if the whole answer is the fixed "not in the context" sentence."""
    normalized = answer.strip().strip('"').replace("’", "'")
    return normalized == REFUSAL_SENTENCE


class GroundedAnswerer:
    def __init__(self, client: GenerationClient, max_tokens: int = ANSWER_MAX_TOKENS):
        self.client = client
        self.max_tokens = max_tokens

    def build_request(self, context: str, question: str) -> GenerationRequest:
        return GenerationRequest(
            instructions=GROUNDED_INSTRUCTIONS,
            input=ANSWER_PROMPT.format(context=context, question=question),
            max_output_tokens=self.max_tokens,
        )

    def answer(self, context: str, question: str) -> str:
        question = (question or "").strip()
        if not question:
            raise ValidationError("Question cannot be empty.")
        return self.client.complete(self.build_request(context, question)).strip()
