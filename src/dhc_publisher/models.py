"""Domain models for the unzip and convert batches."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .logging import BatchSummary


@dataclass(slots=True)
class ExtractionTarget:
    """Numbered subdirectory that receives one archive's contents."""

    index: int
    archive: Path
    directory: Path

    @property
    def name(self) -> str:
        return self.directory.name


@dataclass(slots=True)
class ConversionUnit:
    """Subdirectory with the HTML document selected for rendering."""

    directory: Path
    html_file: Path
    pdf_file: Path
    ignored: tuple[Path, ...] = ()


@dataclass(slots=True)
class PublishResult:
    """Batch summaries produced by one CLI invocation."""

    unzip: BatchSummary | None = None
    convert: BatchSummary | None = None

    @property
    def failures(self) -> int:
        return sum(summary.failures for summary in (self.unzip, self.convert) if summary)


__all__ = [
    "ExtractionTarget",
    "ConversionUnit",
    "PublishResult",
]
