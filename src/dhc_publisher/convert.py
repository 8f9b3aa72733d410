from __future__ import annotations

import time
from pathlib import Path

from .config import AppConfig
from .errors import TARGET_NOT_FOUND, InvalidArgumentError, RenderError
from .logging import BatchSummary, ConsoleReporter, RunLogEntry, RunLogger
from .render import render_directory
from .renderers import PdfRenderer
from .utils import elapsed_ms, list_subdirectories


def convert_all(
    target_dir: Path,
    renderer: PdfRenderer,
    *,
    config: AppConfig | None = None,
    reporter: ConsoleReporter | None = None,
    run_logger: RunLogger | None = None,
) -> BatchSummary:
    config = config or AppConfig()
    reporter = reporter or ConsoleReporter(verbose=config.verbose)
    run_logger = run_logger or RunLogger(config.log_file)

    if not target_dir.is_dir():
        raise InvalidArgumentError(TARGET_NOT_FOUND, f"{target_dir} does not exist!")

    summary = BatchSummary(stage="convert")
    for sub_dir in list_subdirectories(target_dir):
        reporter.start(f"Processing directory {sub_dir}...")
        start = time.perf_counter()
        try:
            unit = render_directory(sub_dir, renderer, config=config, reporter=reporter)
        except RenderError as exc:
            reporter.failed(f"Could not convert HTML in {sub_dir}", exc)
            entry = RunLogEntry(
                stage="convert",
                source=str(sub_dir),
                status="failure",
                error_code=exc.code,
                message=str(exc),
                output_path=None,
                elapsed_ms=elapsed_ms(start),
            )
        else:
            reporter.done(f"Conversion in {sub_dir} done.")
            entry = RunLogEntry(
                stage="convert",
                source=str(sub_dir),
                status="success",
                error_code=None,
                message=f"Rendered {unit.html_file.name}",
                output_path=str(unit.pdf_file),
                elapsed_ms=elapsed_ms(start),
            )
        summary.record(entry)
        run_logger.append(entry)
    return summary


__all__ = ["convert_all"]
