from __future__ import annotations

from typing import Callable, Dict

from ..config import RenderConfig
from .base import PdfRenderer
from .weasy import WeasyPrintRenderer

_RENDERER_FACTORIES: Dict[str, Callable[[RenderConfig], PdfRenderer]] = {
    WeasyPrintRenderer.name: WeasyPrintRenderer,
}

DEFAULT_RENDERER = WeasyPrintRenderer.name


def get_renderer(name: str = DEFAULT_RENDERER, config: RenderConfig | None = None) -> PdfRenderer:
    factory = _RENDERER_FACTORIES.get(name)
    if not factory:
        raise KeyError(f"No renderer registered for {name}")
    return factory(config or RenderConfig())


__all__ = [
    "DEFAULT_RENDERER",
    "PdfRenderer",
    "WeasyPrintRenderer",
    "get_renderer",
]
