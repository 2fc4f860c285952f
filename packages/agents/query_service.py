from __future__ import annotations

import logging
from dataclasses import dataclass

from insu_core.config import InsuSettings
from insu_core.errors import InputError
from insu_core.models import ChatRequest
from insu_core.prompt import assemble
from pdf_corpus.loader import load_corpus
from apps.backend.llm.ollama_client import OllamaClient

_log = logging.getLogger(__name__)

PREVIEW_CHARS = 100


@dataclass
class QueryService:
    """Answers a chat question from the PDF corpus: load corpus, assemble prompt, call the model."""

    settings: InsuSettings
    client: OllamaClient

    def build_prompt(self, question: str) -> str:
        """Load the corpus fresh and assemble the prompt for question."""
        corpus = load_corpus(
            self.settings.pdf_dir,
            sort_by_name=self.settings.sort_by_name,
            strict=self.settings.strict_extraction,
        )
        prompt = assemble(corpus, question)

        _log.info("Assembled prompt from %d documents, length %d chars", len(corpus), len(prompt))
        _log.debug("Prompt head: %s", prompt[:PREVIEW_CHARS])
        _log.debug("Prompt tail: %s", prompt[-PREVIEW_CHARS:])
        return prompt

    def handle(self, request: ChatRequest) -> str:
        """Return the model's answer to request.prompt, verbatim."""
        if not request.prompt or not request.prompt.strip():
            raise InputError("Question text is required.")

        prompt = self.build_prompt(request.prompt)
        return self.client.chat(self.settings.ollama_model, prompt)


__all__ = ["QueryService"]
