"""Inference envelopes and chat models."""
from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from insu_core.models import InferenceRequestEnvelope, InferenceResponseEnvelope


def test_request_envelope_for_prompt():
    envelope = InferenceRequestEnvelope.for_prompt("gemma3", "hello")

    assert envelope.model == "gemma3"
    assert len(envelope.messages) == 1
    assert envelope.messages[0].role == "user"
    assert envelope.messages[0].content == "hello"
    assert envelope.stream is False


def test_request_envelope_wire_format_round_trip():
    envelope = InferenceRequestEnvelope.for_prompt("gemma3", "상품A 가격은?")

    wire = envelope.model_dump_json()
    restored = InferenceRequestEnvelope.model_validate_json(wire)

    assert restored == envelope
    assert json.loads(wire) == {
        "model": "gemma3",
        "messages": [{"role": "user", "content": "상품A 가격은?"}],
        "stream": False,
    }


def test_request_envelope_rejects_streaming():
    with pytest.raises(ValidationError):
        InferenceRequestEnvelope(model="gemma3", messages=[], stream=True)


def test_response_envelope_ignores_extra_fields():
    payload = {
        "model": "gemma3",
        "created_at": "2025-01-01T00:00:00Z",
        "message": {"role": "assistant", "content": "답변"},
        "done": True,
        "total_duration": 123,
    }

    reply = InferenceResponseEnvelope.model_validate(payload)

    assert reply.message.content == "답변"
    assert reply.message.role == "assistant"
