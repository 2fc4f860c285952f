from __future__ import annotations

import logging
from pathlib import Path

import fitz  # PyMuPDF

from insu_core.errors import ExtractionError

_log = logging.getLogger(__name__)


def extract_text(pdf_path: Path) -> str:
    """
    Return the plain text of every page of a PDF, concatenated in page order.

    No page separators are inserted. Any failure to open or read the file
    raises ExtractionError; partial text is never returned.
    """
    pdf_path = Path(pdf_path)
    try:
        with fitz.open(pdf_path, filetype="pdf") as doc:
            text = "".join(page.get_text() for page in doc)
    except Exception as exc:  # noqa: BLE001
        raise ExtractionError(pdf_path, exc) from exc

    _log.debug("Extracted %d characters from %s", len(text), pdf_path.name)
    return text


__all__ = ["extract_text"]
