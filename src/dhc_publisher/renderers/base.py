from __future__ import annotations

from pathlib import Path
from typing import Protocol


class PdfRenderer(Protocol):
    def render(self, html: bytes, base_dir: Path) -> bytes:  # pragma: no cover - interface
        ...
