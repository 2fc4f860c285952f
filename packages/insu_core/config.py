from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class InsuSettings(BaseSettings):
    """Configuration for the PDF chat service."""

    project_root: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parents[2],
        description="Repository root directory.",
    )

    pdf_dir: Path = Field(
        default_factory=lambda: Path("data") / "pdf",
        description="Directory containing the product PDF files.",
    )

    ollama_base_url: str = Field(
        default="http://localhost:11434",
        description="Base URL of the Ollama inference server.",
    )
    ollama_chat_path: str = Field(
        default="/api/chat",
        description="Chat endpoint path on the inference server.",
    )
    ollama_model: str = Field(
        default="gemma3:12b",
        description="Model identifier sent with every chat request.",
    )
    ollama_timeout: float = Field(
        default=120.0,
        description="Transport timeout (seconds) for a single chat call.",
    )

    # Listing order is whatever the OS returns unless this is set.
    sort_by_name: bool = Field(
        default=False,
        description="Sort PDF files by name before assigning product indices.",
    )
    strict_extraction: bool = Field(
        default=False,
        description="Abort the corpus load on the first unreadable PDF instead of skipping it.",
    )

    log_level: str = Field(default="INFO", description="Root logging level.")

    class Config:
        env_prefix = "INSU_"
        env_file = ".env"
        env_file_encoding = "utf-8"

    def resolve_paths(self) -> "InsuSettings":
        """Return a copy with pdf_dir resolved against project_root."""
        if self.pdf_dir.is_absolute():
            return self
        return self.model_copy(update={"pdf_dir": self.project_root / self.pdf_dir})


def get_settings() -> InsuSettings:
    """Return settings with resolved paths."""
    return InsuSettings().resolve_paths()


__all__ = ["InsuSettings", "get_settings"]
