from __future__ import annotations

from pathlib import Path

import fitz
import pytest

from insu_core.config import InsuSettings


@pytest.fixture
def make_pdf(tmp_path):
    """Write a small PDF with one page per text argument and return its path."""

    def _make(name: str, *pages: str, directory: Path | None = None) -> Path:
        path = (directory or tmp_path) / name
        doc = fitz.open()
        for text in pages or ("",):
            page = doc.new_page()
            page.insert_text((72, 72), text)
        doc.save(path)
        doc.close()
        return path

    return _make


@pytest.fixture
def settings(tmp_path) -> InsuSettings:
    return InsuSettings(
        pdf_dir=tmp_path,
        ollama_base_url="http://ollama.test",
        ollama_model="test-model",
    )


class FakeClient:
    """Stands in for OllamaClient and records every chat call."""

    def __init__(self, reply: str = "ok", error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.calls: list[tuple[str, str]] = []

    def chat(self, model: str, prompt: str) -> str:
        self.calls.append((model, prompt))
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def fake_client() -> FakeClient:
    return FakeClient()
