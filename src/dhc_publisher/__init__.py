"""Batch publisher turning zipped DHC document collections into PDFs."""

from .config import AppConfig
from .core import PublisherService
from .errors import ExtractionError, InvalidArgumentError, PublisherError, RenderError
from .models import ConversionUnit, ExtractionTarget, PublishResult

__all__ = [
    "AppConfig",
    "PublisherService",
    "PublisherError",
    "InvalidArgumentError",
    "ExtractionError",
    "RenderError",
    "ConversionUnit",
    "ExtractionTarget",
    "PublishResult",
]
