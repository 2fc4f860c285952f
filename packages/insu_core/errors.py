"""Error taxonomy for the PDF chat service."""
from __future__ import annotations

from pathlib import Path


class InsuError(Exception):
    """Base class for all service errors."""


class ExtractionError(InsuError):
    """A single PDF could not be opened or read."""

    def __init__(self, path: Path, cause: Exception | None = None) -> None:
        self.path = Path(path)
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Failed to extract text from {self.path}{detail}")


class CorpusUnavailableError(InsuError):
    """The configured PDF directory is missing or cannot be listed."""

    def __init__(self, path: Path, cause: Exception | None = None) -> None:
        self.path = Path(path)
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"PDF directory unavailable: {self.path}{detail}")


class InferenceError(InsuError):
    """The inference backend call failed or returned an unusable reply."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class InputError(InsuError):
    """The inbound chat request is missing its question."""


__all__ = [
    "InsuError",
    "ExtractionError",
    "CorpusUnavailableError",
    "InferenceError",
    "InputError",
]
