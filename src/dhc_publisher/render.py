from __future__ import annotations

from contextlib import suppress
from pathlib import Path

from .config import AppConfig, RenderConfig
from .errors import NO_HTML_FOUND, PIPELINE_FAILURE, RenderError
from .logging import ConsoleReporter
from .models import ConversionUnit
from .renderers import PdfRenderer
from .utils import find_by_suffix, replace_extension


def select_unit(sub_dir: Path, config: RenderConfig | None = None) -> ConversionUnit:
    """Pick the HTML document of ``sub_dir`` and derive its PDF path.

    The first ``.html`` file by name wins; any further ones are ignored.
    """

    config = config or RenderConfig()
    html_files = find_by_suffix(sub_dir, config.html_suffix)
    if not html_files:
        raise RenderError(NO_HTML_FOUND, f"{sub_dir} does not contain HTML files!")
    html_file = html_files[0]
    pdf_file = sub_dir / replace_extension(html_file.name, config.pdf_suffix)
    return ConversionUnit(
        directory=sub_dir,
        html_file=html_file,
        pdf_file=pdf_file,
        ignored=tuple(html_files[1:]),
    )


def _remove_existing(pdf_file: Path, reporter: ConsoleReporter) -> None:
    try:
        pdf_file.unlink(missing_ok=True)
    except OSError as exc:
        reporter.warning(f"Could not delete existing {pdf_file}, overwriting: {exc}")


def _write_pdf(pdf_file: Path, payload: bytes) -> None:
    try:
        with pdf_file.open("wb") as handle:
            handle.write(payload)
    except OSError as exc:
        with suppress(OSError):
            pdf_file.unlink(missing_ok=True)
        raise RenderError(PIPELINE_FAILURE, f"Cannot write {pdf_file}: {exc}") from exc


def render_directory(
    sub_dir: Path,
    renderer: PdfRenderer,
    *,
    config: AppConfig | None = None,
    reporter: ConsoleReporter | None = None,
) -> ConversionUnit:
    config = config or AppConfig()
    reporter = reporter or ConsoleReporter(verbose=config.verbose)

    unit = select_unit(sub_dir, config.render)
    if unit.ignored:
        ignored = ", ".join(path.name for path in unit.ignored)
        reporter.warning(f"{sub_dir} holds several HTML files, using {unit.html_file.name} and ignoring {ignored}")

    _remove_existing(unit.pdf_file, reporter)
    try:
        html = unit.html_file.read_bytes()
    except OSError as exc:
        raise RenderError(PIPELINE_FAILURE, f"Cannot read {unit.html_file}: {exc}") from exc

    payload = renderer.render(html, sub_dir)
    _write_pdf(unit.pdf_file, payload)
    return unit


__all__ = ["select_unit", "render_directory"]
