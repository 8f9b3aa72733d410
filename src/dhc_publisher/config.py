from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(slots=True)
class NamingConfig:
    max_dir_name_length: int = 60
    separator: str = "_"


@dataclass(slots=True)
class RenderConfig:
    html_suffix: str = ".html"
    pdf_suffix: str = ".pdf"
    presentational_hints: bool = True
    pdf_forms: bool = True
    compress_pdf: bool = True


@dataclass(slots=True)
class AppConfig:
    naming: NamingConfig = field(default_factory=NamingConfig)
    render: RenderConfig = field(default_factory=RenderConfig)
    verbose: bool = False
    log_file: Path | None = None
    show_summary: bool = True


def build_config(
    *,
    verbose: bool = False,
    log_file: Path | None = None,
    show_summary: bool = True,
) -> AppConfig:
    return AppConfig(verbose=verbose, log_file=log_file, show_summary=show_summary)


__all__ = ["AppConfig", "NamingConfig", "RenderConfig", "build_config"]
