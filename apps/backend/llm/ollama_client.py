from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from insu_core.config import InsuSettings
from insu_core.errors import InferenceError
from insu_core.models import InferenceRequestEnvelope, InferenceResponseEnvelope

_log = logging.getLogger(__name__)


class OllamaClient:
    """
    Non-streaming chat client for an Ollama server.

    Holds a single httpx.Client and no per-call state, so one instance can be
    shared across concurrent requests.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 120.0,
        chat_path: str = "/api/chat",
        http_client: httpx.Client | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.chat_path = chat_path
        self._http = http_client or httpx.Client(base_url=self.base_url, timeout=timeout)

    def chat(self, model: str, prompt: str) -> str:
        """Send prompt as the only user message and return the reply content."""
        envelope = InferenceRequestEnvelope.for_prompt(model, prompt)
        _log.info("Calling %s%s with model=%s", self.base_url, self.chat_path, model)

        try:
            resp = self._http.post(
                self.chat_path,
                content=envelope.model_dump_json(),
                headers={"Content-Type": "application/json", "Accept": "application/json"},
            )
            resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            raise InferenceError(
                f"Inference server returned HTTP {status}: {exc.response.text[:500]}",
                status_code=status,
            ) from exc
        except httpx.HTTPError as exc:
            raise InferenceError(f"Inference server request failed: {exc}") from exc

        try:
            reply = InferenceResponseEnvelope.model_validate_json(resp.content)
        except ValidationError as exc:
            raise InferenceError(f"Malformed inference response: {exc}") from exc

        _log.info("Inference reply received (%d chars)", len(reply.message.content))
        return reply.message.content

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "OllamaClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


# Lazily initialise the shared client so that an unreachable server does not
# block API startup. Errors surface on the first chat call instead.
_client: OllamaClient | None = None


def get_client(settings: InsuSettings) -> OllamaClient:
    """Return a singleton OllamaClient, initialising it on first use."""
    global _client
    if _client is None:
        _client = OllamaClient(
            base_url=settings.ollama_base_url,
            timeout=settings.ollama_timeout,
            chat_path=settings.ollama_chat_path,
        )
    return _client


def close_client() -> None:
    """Close and drop the shared client."""
    global _client
    if _client is not None:
        _client.close()
        _client = None


__all__ = ["OllamaClient", "get_client", "close_client"]
