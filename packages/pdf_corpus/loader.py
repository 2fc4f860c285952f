from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from insu_core.errors import CorpusUnavailableError, ExtractionError
from insu_core.models import Document

from .parser import extract_text

_log = logging.getLogger(__name__)

PDF_SUFFIX = ".pdf"


def list_pdf_files(directory: Path, sort_by_name: bool = False) -> List[Path]:
    """
    Return the PDF files directly under directory.

    Matching is case-insensitive on the `.pdf` suffix. Without sort_by_name the
    files come back in directory-listing order, which is not stable across runs.
    """
    directory = Path(directory)
    try:
        entries = list(directory.iterdir())
    except OSError as exc:
        raise CorpusUnavailableError(directory, exc) from exc

    pdf_files = [p for p in entries if p.name.lower().endswith(PDF_SUFFIX) and p.is_file()]
    if sort_by_name:
        pdf_files.sort(key=lambda p: p.name)
    return pdf_files


def load_corpus(directory: Path, sort_by_name: bool = False, strict: bool = False) -> List[Document]:
    """
    Extract every PDF under directory into an indexed corpus.

    A missing or unreadable directory yields an empty corpus. A PDF that fails
    to extract is skipped with a warning, unless strict is set, in which case
    the ExtractionError propagates. Indices are dense and count only the files
    that were extracted.
    """
    try:
        pdf_files = list_pdf_files(directory, sort_by_name=sort_by_name)
    except CorpusUnavailableError as exc:
        _log.warning("%s; continuing with an empty corpus", exc)
        return []

    if not pdf_files:
        _log.warning("No PDF files found under %s", directory)
        return []

    documents: list[Document] = []
    for pdf in pdf_files:
        try:
            text = extract_text(pdf)
        except ExtractionError as exc:
            if strict:
                raise
            _log.warning("Skipping unreadable PDF: %s", exc)
            continue
        documents.append(Document(index=len(documents), path=pdf, text=text))

    _log.info("Loaded %d/%d PDF files from %s", len(documents), len(pdf_files), directory)
    return documents


__all__ = ["list_pdf_files", "load_corpus", "PDF_SUFFIX"]
