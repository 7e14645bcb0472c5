"""
Outline stage: stream a blog post outline and accumulate it chunk by chunk.
"""
import logging
from typing import Callable

from .errors import ValidationError
from .llm import GenerationClient, GenerationRequest, TextDelta
from .prompts import OUTLINE_MAX_TOKENS, OUTLINE_PROMPT, STRATEGIST_PERSONA
from .ui import write_live

logger = logging.getLogger(__name__)


class StreamAccumulator:
    """
    Reduces a streaming outline response to its final text.

    Every text delta is appended to the buffer and forwarded to the sink in
    the order it arrives. Any other chunk kind is ignored. If the stream
    fails, the error propagates and no partial outline is returned.
    """

    def __init__(
        self,
        client: GenerationClient,
        sink: Callable[[str], None] = write_live,
        max_tokens: int = OUTLINE_MAX_TOKENS,
    ):
        self.client = client
        self.sink = sink
        self.max_tokens = max_tokens

    def build_request(self, topic: str) -> GenerationRequest:
        return GenerationRequest(
            instructions=STRATEGIST_PERSONA,
            input=OUTLINE_PROMPT.format(topic=topic),
            max_output_tokens=self.max_tokens,
        )

    def run(self, topic: str) -> str:
        topic = (topic or "").strip()
        if not topic:
            raise ValidationError("Topic cannot be empty.")

        parts = []
        skipped = 0
        for chunk in self.client.stream(self.build_request(topic)):
            if isinstance(chunk, TextDelta):
                parts.append(chunk.text)
                self.sink(chunk.text)
            else:
                skipped += 1

        outline = "".join(parts)
        logger.debug("outline complete: %d deltas, %d other chunks, %d chars",
                     len(parts), skipped, len(outline))
        return outline
