"""
PDF corpus handling for the Insu chat service.

This package is responsible for:
- Extracting raw text from product PDF files with PyMuPDF
- Loading every PDF in the configured directory into an indexed corpus
- Providing a CLI for inspecting the corpus and running one-off questions
"""
