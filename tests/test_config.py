"""Settings loading and path resolution."""
from __future__ import annotations

from pathlib import Path

from insu_core.config import InsuSettings, get_settings


def test_relative_pdf_dir_resolves_against_project_root(tmp_path):
    settings = InsuSettings(project_root=tmp_path, pdf_dir=Path("docs"))

    assert settings.resolve_paths().pdf_dir == tmp_path / "docs"


def test_absolute_pdf_dir_is_kept(tmp_path):
    settings = InsuSettings(project_root=Path("/elsewhere"), pdf_dir=tmp_path)

    assert settings.resolve_paths().pdf_dir == tmp_path


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("INSU_PDF_DIR", str(tmp_path))
    monkeypatch.setenv("INSU_OLLAMA_MODEL", "llama3.1:8b")
    monkeypatch.setenv("INSU_SORT_BY_NAME", "true")

    settings = get_settings()

    assert settings.pdf_dir == tmp_path
    assert settings.ollama_model == "llama3.1:8b"
    assert settings.sort_by_name is True
    assert settings.ollama_base_url == "http://localhost:11434"
