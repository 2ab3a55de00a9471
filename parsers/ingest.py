import io
import logging
import mimetypes
import re
from typing import Iterable, List

import fitz  # PyMuPDF

from errors import ExtractionFailedError, UnsupportedTypeError
from schemas import IngestResult

logger = logging.getLogger(__name__)

PDF = "application/pdf"
DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
DOC = "application/msword"
TXT = "text/plain"

SUPPORTED_TYPES = (PDF, DOCX, DOC, TXT)
UPLOAD_EXTENSIONS = ["pdf", "docx", "doc", "txt"]

_CONTROL_CHARS = re.compile(r"[\x00-\x1F\x7F]+")
_WHITESPACE = re.compile(r"\s+")


def media_type_of(upload) -> str:
    """Media type reported by the upload, or guessed from its file name."""
    declared = (getattr(upload, "type", None) or "").strip().lower()
    if declared and declared != "application/octet-stream":
        return declared
    guessed, _ = mimetypes.guess_type(getattr(upload, "name", "") or "")
    return guessed or declared


def _read_bytes(upload) -> bytes:
    if hasattr(upload, "getvalue"):
        return upload.getvalue()
    return upload.read()


def decode_text(data: bytes) -> str:
    """Decode a plain-text upload as UTF-8, falling back to latin-1."""
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        # latin-1 maps every byte, so this cannot fail
        return data.decode("latin-1")


def clean_text(text: str) -> str:
    text = _CONTROL_CHARS.sub(" ", text)
    return _WHITESPACE.sub(" ", text).strip()


def join_pages(pages: Iterable[str]) -> str:
    """Join page strings in order with single spaces and normalize whitespace."""
    return clean_text(" ".join(pages))


def pdf_to_text(data: bytes) -> str:
    """
    Extract text from an in-memory PDF, page by page.

    Raises ExtractionFailedError if PyMuPDF cannot read the document or no
    text survives cleaning (typically a scanned, image-only PDF).
    """
    try:
        with fitz.open(stream=io.BytesIO(data), filetype="pdf") as doc:
            pages: List[str] = [page.get_text("text") or "" for page in doc]
    except Exception as e:
        logger.warning(f"PDF extraction failed: {e}")
        raise ExtractionFailedError() from e

    text = join_pages(pages)
    if not text:
        logger.warning(f"No text extracted from {len(pages)} PDF page(s)")
        raise ExtractionFailedError(
            "This PDF may be scanned or image-based. Please paste text manually.",
            title="Could not extract text",
        )

    logger.info(f"Extracted {len(text)} characters from {len(pages)} PDF page(s)")
    return text


def ingest(upload) -> IngestResult:
    """
    Turn an uploaded resume into plain text.

    Args:
        upload: file-like object with ``name`` and ``type`` attributes
            (Streamlit's UploadedFile, or anything shaped like it)

    Returns:
        IngestResult; ``text`` is empty and ``warning`` set for DOC/DOCX.
    """
    name = getattr(upload, "name", "") or ""
    media_type = media_type_of(upload)
    if media_type not in SUPPORTED_TYPES:
        logger.info(f"Rejected upload {name!r} with media type {media_type!r}")
        raise UnsupportedTypeError(media_type)

    if media_type == TXT:
        text = decode_text(_read_bytes(upload))
        return IngestResult(file_name=name, media_type=media_type, text=text)

    if media_type == PDF:
        text = pdf_to_text(_read_bytes(upload))
        return IngestResult(file_name=name, media_type=media_type, text=text)

    return IngestResult(
        file_name=name,
        media_type=media_type,
        warning=f"{name} ready for analysis. If analysis fails, paste text manually.",
    )
