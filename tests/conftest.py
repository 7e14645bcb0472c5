"""Test configuration helpers and fakes for the generation client and terminal input."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from studio.llm import GenerationRequest  # noqa: E402


class FakeGenerationClient:
    """
    Stand-in for GenerationClient.

    ``chunks`` is what stream() yields; an Exception instance in the list is
    raised at that point. ``responder`` maps a request to complete()'s text.
    """

    model = "fake-model"

    def __init__(self, chunks=(), responder=None):
        self.chunks = list(chunks)
        self.responder = responder or (lambda request: "")
        self.requests: list[tuple[str, GenerationRequest]] = []

    def complete(self, request: GenerationRequest) -> str:
        self.requests.append(("complete", request))
        result = self.responder(request)
        if isinstance(result, Exception):
            raise result
        return result

    def stream(self, request: GenerationRequest):
        self.requests.append(("stream", request))
        for chunk in self.chunks:
            if isinstance(chunk, Exception):
                raise chunk
            yield chunk


class ScriptedReader:
    """Line source that replays a fixed list of lines, then hits end of input."""

    def __init__(self, lines=()):
        self.lines = list(lines)
        self.prompts: list[str] = []
        self.close_calls = 0

    def prompt(self, prompt_text: str) -> str:
        if self.close_calls:
            raise ValueError("prompt() on a closed reader")
        self.prompts.append(prompt_text)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)

    def close(self):
        self.close_calls += 1

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False


@pytest.fixture
def fake_client_factory():
    return FakeGenerationClient


@pytest.fixture
def reader_factory():
    return ScriptedReader
