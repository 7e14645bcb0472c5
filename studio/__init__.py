"""
Content Studio — staged topic → outline → summary → grounded Q&A pipeline.

1. STREAMS a detailed blog post outline for the topic, printing it live
2. SUMMARIZES the outline in two sentences
3. BUILDS a labeled context from topic, outline and summary
4. ANSWERS follow-up questions from that context only, refusing otherwise
"""
from .answer import GroundedAnswerer, is_refusal
from .context import build_context
from .errors import GenerationFailure, StudioError, ValidationError
from .llm import GenerationClient, GenerationRequest, OtherChunk, TextDelta, create_client
from .outline import StreamAccumulator
from .session import InteractiveSession
from .summary import Summarizer, count_sentences

__all__ = [
    "GenerationClient",
    "GenerationRequest",
    "TextDelta",
    "OtherChunk",
    "create_client",
    "StreamAccumulator",
    "Summarizer",
    "count_sentences",
    "build_context",
    "GroundedAnswerer",
    "is_refusal",
    "InteractiveSession",
    "StudioError",
    "ValidationError",
    "GenerationFailure",
]
