from __future__ import annotations

import io
from pathlib import Path
from typing import Any

from ..config import RenderConfig
from ..errors import PIPELINE_FAILURE, RENDERER_UNAVAILABLE, RenderError


class WeasyPrintRenderer:
    """HTML to PDF through WeasyPrint's CSS, layout and PDF writer stages."""

    name = "weasyprint"

    def __init__(self, config: RenderConfig | None = None) -> None:
        self._config = config or RenderConfig()
        self._html_cls: Any = None

    def _load(self) -> Any:
        if self._html_cls is None:
            try:
                from weasyprint import HTML
            except (ImportError, OSError) as exc:
                raise RenderError(
                    RENDERER_UNAVAILABLE,
                    f"weasyprint and its native libraries are required for PDF output: {exc}",
                ) from exc
            self._html_cls = HTML
        return self._html_cls

    def render(self, html: bytes, base_dir: Path) -> bytes:
        html_cls = self._load()
        try:
            document = html_cls(file_obj=io.BytesIO(html), base_url=str(base_dir.resolve()))
            pdf = document.write_pdf(
                presentational_hints=self._config.presentational_hints,
                pdf_forms=self._config.pdf_forms,
                uncompressed_pdf=not self._config.compress_pdf,
            )
        except Exception as exc:
            raise RenderError(PIPELINE_FAILURE, f"WeasyPrint failed: {exc}") from exc
        if not pdf:
            raise RenderError(PIPELINE_FAILURE, "WeasyPrint produced an empty document")
        return pdf
