"""
LLM client setup and the two request shapes the studio needs.

GenerationClient wraps one Anthropic client instance and exposes:
  - complete(request) → the full response text
  - stream(request)   → a lazy sequence of tagged chunks (TextDelta / OtherChunk)

Provider errors are re-raised as GenerationFailure so the stages never have to
know which SDK is underneath.
"""
import logging
from dataclasses import dataclass
from typing import ClassVar, Iterator

import anthropic
import httpx2
from anthropic import Anthropic

from .errors import GenerationFailure

logger = logging.getLogger(__name__)


# ─── Request / chunk types ───────────────────────────────────────────────────

@dataclass(frozen=True)
class GenerationRequest:
    instructions: str
    input: str
    max_output_tokens: int


@dataclass(frozen=True)
class TextDelta:
    """Incremental output text from a streaming response."""
    text: str
    kind: ClassVar[str] = "text-delta"


@dataclass(frozen=True)
class OtherChunk:
    """Any stream event that carries no output text (start/stop, usage, ...)."""
    type: str
    kind: ClassVar[str] = "other"


Chunk = TextDelta | OtherChunk


def to_chunk(event) -> Chunk:
    """Map a raw Anthropic stream event onto the studio's chunk variants."""
    event_type = getattr(event, "type", "unknown")
    if event_type == "content_block_delta":
        delta = getattr(event, "delta", None)
        if getattr(delta, "type", None) == "text_delta":
            return TextDelta(text=delta.text)
    return OtherChunk(type=event_type)


# ─── Client ──────────────────────────────────────────────────────────────────

def create_client(api_key: str, base_url: str | None = None) -> Anthropic:
    return Anthropic(api_key=api_key, base_url=base_url)


class GenerationClient:
    """Thin request/response and request/stream facade over the Messages API."""

    def __init__(self, client: Anthropic, model: str):
        self.client = client
        self.model = model

    def _params(self, request: GenerationRequest) -> dict:
        return {
            "model": self.model,
            "max_tokens": request.max_output_tokens,
            "system": request.instructions,
            "messages": [{"role": "user", "content": request.input}],
        }

    def complete(self, request: GenerationRequest) -> str:
        """Send one request and return the text of the finished response."""
        logger.debug("complete: model=%s max_tokens=%d input_chars=%d",
                     self.model, request.max_output_tokens, len(request.input))
        try:
            response = self.client.messages.create(**self._params(request))
        except anthropic.APIError as e:
            raise GenerationFailure(f"Generation request failed: {e}") from e

        _log_stop_reason(getattr(response, "stop_reason", None))
        return "".join(b.text for b in response.content if b.type == "text")

    def stream(self, request: GenerationRequest) -> Iterator[Chunk]:
        """
        Open a streaming request and yield chunks in arrival order.

        Nothing is sent until the first chunk is requested. The provider
        stream is closed when iteration ends, fails, or is abandoned.
        """
        logger.debug("stream: model=%s max_tokens=%d input_chars=%d",
                     self.model, request.max_output_tokens, len(request.input))
        try:
            events = self.client.messages.create(**self._params(request), stream=True)
        except anthropic.APIError as e:
            raise GenerationFailure(f"Streaming request failed: {e}") from e

        try:
            for event in events:
                if event.type == "message_delta":
                    _log_stop_reason(getattr(event.delta, "stop_reason", None))
                yield to_chunk(event)
        # the SDK does not wrap transport errors raised while the body streams
        except (anthropic.APIError, httpx2.TransportError) as e:
            raise GenerationFailure(f"Stream ended abnormally: {e}") from e
        finally:
            events.close()


def _log_stop_reason(stop_reason: str | None):
    if stop_reason == "max_tokens":
        logger.warning("Response hit the output token ceiling and may be cut short")
    elif stop_reason:
        logger.debug("stop_reason=%s", stop_reason)
