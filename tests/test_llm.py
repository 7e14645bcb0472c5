"""Tests for the Anthropic-backed generation client."""

from __future__ import annotations

from types import SimpleNamespace

import anthropic
import httpx2
import pytest
from anthropic import Anthropic

from studio.errors import GenerationFailure
from studio.llm import GenerationClient, GenerationRequest, OtherChunk, TextDelta, to_chunk

REQUEST = GenerationRequest(instructions="Be brief.", input="Say hi", max_output_tokens=50)


def _connection_error() -> anthropic.APIConnectionError:
    return anthropic.APIConnectionError(request=httpx2.Request("POST", "https://llm.test/v1/messages"))


def _text_event(text: str):
    return SimpleNamespace(type="content_block_delta", delta=SimpleNamespace(type="text_delta", text=text))


class FakeEventStream:
    def __init__(self, events, fail_after: int | None = None):
        self.events = events
        self.fail_after = fail_after
        self.closed = 0

    def __iter__(self):
        for i, event in enumerate(self.events):
            if self.fail_after is not None and i == self.fail_after:
                raise _connection_error()
            yield event

    def close(self):
        self.closed += 1


class FakeMessages:
    def __init__(self, result):
        self.result = result
        self.calls: list[dict] = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if isinstance(self.result, Exception):
            raise self.result
        return self.result


def _client(result) -> tuple[GenerationClient, FakeMessages]:
    messages = FakeMessages(result)
    return GenerationClient(SimpleNamespace(messages=messages), "test-model"), messages


@pytest.mark.unit
def test_to_chunk_maps_text_deltas_and_ignores_everything_else() -> None:
    assert to_chunk(_text_event("abc")) == TextDelta(text="abc")
    assert to_chunk(SimpleNamespace(type="message_start")) == OtherChunk(type="message_start")
    json_delta = SimpleNamespace(type="content_block_delta", delta=SimpleNamespace(type="input_json_delta"))
    assert isinstance(to_chunk(json_delta), OtherChunk)
    assert TextDelta(text="x").kind == "text-delta"
    assert OtherChunk(type="ping").kind == "other"


@pytest.mark.unit
def test_complete_sends_request_shape_and_joins_text_blocks() -> None:
    response = SimpleNamespace(
        stop_reason="end_turn",
        content=[
            SimpleNamespace(type="text", text="Hello"),
            SimpleNamespace(type="tool_use", id="t1"),
            SimpleNamespace(type="text", text=" there"),
        ],
    )
    client, messages = _client(response)

    assert client.complete(REQUEST) == "Hello there"
    assert messages.calls == [
        {
            "model": "test-model",
            "max_tokens": 50,
            "system": "Be brief.",
            "messages": [{"role": "user", "content": "Say hi"}],
        }
    ]


@pytest.mark.unit
def test_complete_wraps_provider_errors() -> None:
    client, _ = _client(_connection_error())

    with pytest.raises(GenerationFailure) as excinfo:
        client.complete(REQUEST)
    assert isinstance(excinfo.value.__cause__, anthropic.APIConnectionError)


@pytest.mark.unit
def test_stream_yields_chunks_in_order_and_closes() -> None:
    events = FakeEventStream(
        [
            SimpleNamespace(type="message_start"),
            _text_event("one "),
            _text_event("two"),
            SimpleNamespace(type="message_delta", delta=SimpleNamespace(stop_reason="end_turn")),
            SimpleNamespace(type="message_stop"),
        ]
    )
    client, messages = _client(events)

    chunks = list(client.stream(REQUEST))

    assert [c.text for c in chunks if isinstance(c, TextDelta)] == ["one ", "two"]
    assert [c.type for c in chunks if isinstance(c, OtherChunk)] == [
        "message_start",
        "message_delta",
        "message_stop",
    ]
    assert messages.calls[0]["stream"] is True
    assert events.closed == 1


@pytest.mark.unit
def test_stream_is_lazy_until_iterated() -> None:
    client, messages = _client(FakeEventStream([]))

    iterator = client.stream(REQUEST)
    assert messages.calls == []
    list(iterator)
    assert len(messages.calls) == 1


@pytest.mark.unit
def test_stream_failure_midway_raises_generation_failure_and_closes() -> None:
    events = FakeEventStream([_text_event("partial"), _text_event("never")], fail_after=1)
    client, _ = _client(events)

    received = []
    with pytest.raises(GenerationFailure):
        for chunk in client.stream(REQUEST):
            received.append(chunk)

    assert received == [TextDelta(text="partial")]
    assert events.closed == 1


@pytest.mark.unit
def test_stream_open_failure_raises_generation_failure() -> None:
    client, _ = _client(_connection_error())

    with pytest.raises(GenerationFailure):
        list(client.stream(REQUEST))


@pytest.mark.unit
def test_stream_logs_token_ceiling(caplog: pytest.LogCaptureFixture) -> None:
    events = FakeEventStream(
        [_text_event("cut"), SimpleNamespace(type="message_delta", delta=SimpleNamespace(stop_reason="max_tokens"))]
    )
    client, _ = _client(events)

    with caplog.at_level("WARNING", logger="studio.llm"):
        list(client.stream(REQUEST))

    assert "token ceiling" in caplog.text


@pytest.mark.unit
def test_abandoning_stream_closes_provider_stream() -> None:
    events = FakeEventStream([_text_event("one"), _text_event("two"), _text_event("three")])
    client, _ = _client(events)

    chunks = client.stream(REQUEST)
    assert next(chunks) == TextDelta(text="one")
    chunks.close()

    assert events.closed == 1


class DroppedBodyStream(httpx2.SyncByteStream):
    """Sends one text delta, then the peer goes away mid-body."""

    def __iter__(self):
        yield (
            b"event: content_block_delta\n"
            b'data: {"type": "content_block_delta", "index": 0, '
            b'"delta": {"type": "text_delta", "text": "1. Intro\\n"}}\n\n'
        )
        raise httpx2.RemoteProtocolError("peer closed connection without sending complete message body")


@pytest.mark.unit
def test_connection_dropped_mid_stream_raises_generation_failure() -> None:
    def handler(request: httpx2.Request) -> httpx2.Response:
        return httpx2.Response(
            200,
            headers={"content-type": "text/event-stream"},
            stream=DroppedBodyStream(),
        )

    sdk = Anthropic(
        api_key="test-key",
        base_url="https://llm.test",
        max_retries=0,
        http_client=httpx2.Client(transport=httpx2.MockTransport(handler)),
    )
    client = GenerationClient(sdk, "test-model")

    received = []
    with pytest.raises(GenerationFailure) as excinfo:
        for chunk in client.stream(REQUEST):
            received.append(chunk)

    assert received == [TextDelta(text="1. Intro\n")]
    assert isinstance(excinfo.value.__cause__, httpx2.TransportError)
    assert "Stream ended abnormally" in str(excinfo.value)
