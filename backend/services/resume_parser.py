"""Resume file ingestion: PDF, DOCX and plain text to a single string."""

import io
from pathlib import Path

import pdfplumber

TEXT_SUFFIXES = frozenset({".txt", ".md"})


class UnsupportedFileType(ValueError):
    pass


def extract_text(pdf_bytes: bytes) -> str:
    """Extract all text from a PDF file."""
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    return "\n".join(pages).strip()


def extract_text_docx(docx_bytes: bytes) -> str:
    """Extract all text from a DOCX file."""
    from docx import Document

    doc = Document(io.BytesIO(docx_bytes))
    return "\n".join(p.text for p in doc.paragraphs).strip()


def extract_resume_text(filename: str, content: bytes) -> str:
    """Dispatch on the file suffix. Parser errors propagate to the caller."""
    suffix = Path(filename or "").suffix.lower()
    if suffix == ".pdf":
        return extract_text(content)
    if suffix == ".docx":
        return extract_text_docx(content)
    if suffix in TEXT_SUFFIXES:
        return content.decode("utf-8", errors="replace").strip()
    raise UnsupportedFileType(f"Unsupported resume file type: {suffix or filename!r}")
