from __future__ import annotations

import json

from lite_providers.base.models import ChatCompletionRequest, CompletionRequest, Message
from lite_providers.base.openai_style_parts import (
    build_chat_payload,
    build_completion_payload,
    chat_event_to_chunk,
    completion_event_to_chunk,
    map_finish_reason,
    parse_chat_response,
    parse_completion_response,
)


def test_finish_reason_mapping():
    assert map_finish_reason("stop") == "stop"
    assert map_finish_reason("length") == "length"
    assert map_finish_reason("content_filter") == "content_filter"
    assert map_finish_reason("tool_calls") is None
    assert map_finish_reason(None) is None


def test_chat_payload_omits_unset_sampling_fields():
    request = ChatCompletionRequest(
        model="m",
        messages=[Message(role="system", content="s"), Message(role="user", content="u")],
        temperature=0.0,
        stop=("a", "b"),
    )
    payload = build_chat_payload(request, stream=True)
    assert payload == {
        "model": "m",
        "messages": [{"role": "system", "content": "s"}, {"role": "user", "content": "u"}],
        "temperature": 0.0,
        "stop": ["a", "b"],
        "stream": True,
    }
    json.dumps(payload)


def test_completion_payload():
    payload = build_completion_payload(CompletionRequest(model="m", prompt="p", max_tokens=5))
    assert payload == {"model": "m", "prompt": "p", "max_tokens": 5, "stream": False}


def test_parse_chat_response_defaults():
    response = parse_chat_response({"id": "c1", "model": "m", "choices": [{"message": {"content": None}}]})
    assert response.content == ""
    assert response.finish_reason is None
    assert response.usage is None


def test_parse_completion_response_with_usage():
    response = parse_completion_response(
        {
            "id": "x",
            "model": "m",
            "choices": [{"text": "ok", "finish_reason": "length"}],
            "usage": {"prompt_tokens": 3, "completion_tokens": 1, "total_tokens": 4},
        }
    )
    assert response.text == "ok"
    assert response.finish_reason == "length"
    assert response.usage.total_tokens == 4


def test_chat_event_translation():
    chunk = chat_event_to_chunk(json.dumps({"choices": [{"delta": {"content": "He"}, "finish_reason": None}]}))
    assert chunk.delta == "He"
    assert chunk.finish_reason is None
    final = chat_event_to_chunk(json.dumps({"choices": [{"delta": {}, "finish_reason": "stop"}]}))
    assert final.delta == ""
    assert final.finish_reason == "stop"


def test_events_without_choices_or_bad_json_are_skipped():
    assert chat_event_to_chunk("{not json") is None
    assert chat_event_to_chunk(json.dumps({"choices": []})) is None
    assert completion_event_to_chunk(json.dumps({"usage": {}})) is None
    assert completion_event_to_chunk(json.dumps({"choices": [{"text": "t"}]})).delta == "t"
