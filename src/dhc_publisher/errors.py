"""Error taxonomy shared by the extraction and rendering stages."""

from __future__ import annotations


class PublisherError(RuntimeError):
    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code


class InvalidArgumentError(PublisherError):
    """Raised for inputs that abort the whole run."""


class ExtractionError(PublisherError):
    """Raised when one archive cannot be extracted."""


class RenderError(PublisherError):
    """Raised when one subdirectory cannot be rendered to PDF."""


SOURCE_NOT_FOUND = "SOURCE_NOT_FOUND"
TARGET_NOT_FOUND = "TARGET_NOT_FOUND"
BAD_ARCHIVE = "BAD_ARCHIVE"
WRITE_FAILED = "WRITE_FAILED"
UNSAFE_PATH = "UNSAFE_PATH"
NO_HTML_FOUND = "NO_HTML_FOUND"
PIPELINE_FAILURE = "PIPELINE_FAILURE"
RENDERER_UNAVAILABLE = "RENDERER_UNAVAILABLE"


__all__ = [
    "PublisherError",
    "InvalidArgumentError",
    "ExtractionError",
    "RenderError",
    "SOURCE_NOT_FOUND",
    "TARGET_NOT_FOUND",
    "BAD_ARCHIVE",
    "WRITE_FAILED",
    "UNSAFE_PATH",
    "NO_HTML_FOUND",
    "PIPELINE_FAILURE",
    "RENDERER_UNAVAILABLE",
]
