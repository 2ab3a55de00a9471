"""Errors raised while ingesting a resume or running an analysis.

Every error carries a short ``title`` and a ``description`` so the page can
show it as a notification without knowing the concrete type.
"""
from __future__ import annotations


class AnalyzerError(RuntimeError):
    title = "Analysis Failed"

    def __init__(self, description: str):
        super().__init__(description)
        self.description = description


class UnsupportedTypeError(AnalyzerError):
    title = "Invalid File Type"

    def __init__(self, media_type: str | None):
        super().__init__("Please upload a PDF, DOCX, or TXT file.")
        self.media_type = media_type


class ExtractionFailedError(AnalyzerError):
    """Raised when no text could be pulled out of a PDF; the user can paste it instead."""

    title = "PDF Extraction Failed"

    def __init__(
        self,
        description: str = "Please paste your resume text or upload a TXT/DOCX.",
        title: str | None = None,
    ):
        super().__init__(description)
        if title:
            self.title = title


class MissingInputError(AnalyzerError):
    def __init__(self, field: str):
        if field == "resume":
            self.title = "Missing Resume Text"
            description = "Please paste resume text or ensure PDF text extraction succeeded."
        else:
            self.title = "Missing Job Description"
            description = "Please provide at least one job description."
        super().__init__(description)
        self.field = field


class ConfigurationError(AnalyzerError):
    title = "Configuration Error"


class UpstreamError(AnalyzerError):
    def __init__(self, status: int | None, description: str | None = None):
        super().__init__(description or f"Gemini error {status}")
        self.status = status


class EmptyResponseError(AnalyzerError):
    def __init__(self, description: str = "No content returned from Gemini"):
        super().__init__(description)


class MalformedResponseError(AnalyzerError):
    pass


class InvalidInputError(AnalyzerError):
    """The model itself rejected the resume or job description."""

    title = "Invalid Input"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
