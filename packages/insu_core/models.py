from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Literal

from pydantic import BaseModel, Field


@dataclass(frozen=True)
class Document:
    """Extracted text of one PDF, indexed in corpus load order."""

    index: int
    path: Path
    text: str


class ChatRequest(BaseModel):
    """Inbound chat query."""

    prompt: str = Field(..., description="The raw user question.")


class ChatAnswer(BaseModel):
    """Outbound chat reply."""

    answer: str = Field(..., description="Model reply, returned verbatim.")


class InferenceMessage(BaseModel):
    """Single chat message exchanged with the inference server."""

    role: str = Field(default="user")
    content: str


class InferenceRequestEnvelope(BaseModel):
    """Body of a non-streaming chat call."""

    model: str
    messages: List[InferenceMessage] = Field(default_factory=list)
    # Streaming replies arrive as a sequence of partial frames; only whole replies are supported.
    stream: Literal[False] = False

    @classmethod
    def for_prompt(cls, model: str, prompt: str) -> "InferenceRequestEnvelope":
        """Build a single-turn envelope carrying prompt as the only user message."""
        return cls(model=model, messages=[InferenceMessage(role="user", content=prompt)])


class InferenceResponseEnvelope(BaseModel):
    """Reply of a non-streaming chat call; fields other than message are ignored."""

    message: InferenceMessage


__all__ = [
    "Document",
    "ChatRequest",
    "ChatAnswer",
    "InferenceMessage",
    "InferenceRequestEnvelope",
    "InferenceResponseEnvelope",
]
