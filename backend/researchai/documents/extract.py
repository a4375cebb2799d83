import io
import os
from dataclasses import dataclass
from typing import Optional

import docx
import fitz  # PyMuPDF

from researchai.config import MAX_UPLOAD_BYTES


INVALID_FILE_MESSAGE = "Please upload a valid file (PDF, DOC, DOCX, or TXT)"
EMPTY_TEXT_MESSAGE = "Could not extract text from file"

PDF = "pdf"
DOC = "doc"
DOCX = "docx"
TXT = "txt"

MIME_TYPES = {
    "application/pdf": PDF,
    "application/msword": DOC,
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": DOCX,
    "text/plain": TXT,
}

EXTENSIONS = {
    ".pdf": PDF,
    ".doc": DOC,
    ".docx": DOCX,
    ".txt": TXT,
}


class DocumentError(ValueError):
    """Upload rejected or unreadable. The message is safe to show the user."""


@dataclass
class PaperDocument:
    filename: str
    kind: str
    size: int
    text: str


def detect_kind(filename: Optional[str], content_type: Optional[str]) -> Optional[str]:
    """
    Resolve the document kind from the MIME type, falling back to the
    extension (browsers often send application/octet-stream).
    """
    if content_type:
        mime = content_type.split(";")[0].strip().lower()
        if mime in MIME_TYPES:
            return MIME_TYPES[mime]

    if filename:
        _, ext = os.path.splitext(filename.lower())
        return EXTENSIONS.get(ext)

    return None


def validate_upload(
    filename: Optional[str],
    content_type: Optional[str],
    size: int,
    max_bytes: int = MAX_UPLOAD_BYTES,
) -> str:
    kind = detect_kind(filename, content_type)
    if kind is None or size > max_bytes:
        raise DocumentError(INVALID_FILE_MESSAGE)
    return kind


# ============================================================
# TEXT EXTRACTION
# ============================================================

def extract_pdf_text(data: bytes) -> str:
    try:
        doc = fitz.open(stream=data, filetype="pdf")
    except Exception as e:
        raise DocumentError(EMPTY_TEXT_MESSAGE) from e

    parts = []
    with doc:
        for page in doc:
            txt = (page.get_text("text") or "").strip()
            if txt:
                parts.append(txt)

    return "\n\n".join(parts)


def extract_docx_text(data: bytes) -> str:
    try:
        document = docx.Document(io.BytesIO(data))
    except Exception as e:
        raise DocumentError(EMPTY_TEXT_MESSAGE) from e

    paragraphs = [p.text.strip() for p in document.paragraphs]
    return "\n".join(p for p in paragraphs if p)


def extract_plain_text(data: bytes) -> str:
    # Legacy .doc has no parser here; decode whatever text it carries
    return data.decode("utf-8", errors="replace")


EXTRACTORS = {
    PDF: extract_pdf_text,
    DOCX: extract_docx_text,
    DOC: extract_plain_text,
    TXT: extract_plain_text,
}


def extract_text(kind: str, data: bytes) -> str:
    return EXTRACTORS[kind](data)


def load_document(
    filename: Optional[str],
    content_type: Optional[str],
    data: bytes,
) -> PaperDocument:
    """Validate an upload and pull its text. Raises DocumentError."""
    kind = validate_upload(filename, content_type, len(data))
    text = extract_text(kind, data)

    if not text.strip():
        raise DocumentError(EMPTY_TEXT_MESSAGE)

    return PaperDocument(
        filename=filename or "upload",
        kind=kind,
        size=len(data),
        text=text,
    )
