"""
Upload validation and text extraction for research papers.
"""

from researchai.documents.extract import (
    DocumentError,
    PaperDocument,
    INVALID_FILE_MESSAGE,
    EMPTY_TEXT_MESSAGE,
    detect_kind,
    validate_upload,
    extract_text,
    load_document,
)
