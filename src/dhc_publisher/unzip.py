from __future__ import annotations

import time
from pathlib import Path

from .config import AppConfig
from .errors import SOURCE_NOT_FOUND, WRITE_FAILED, ExtractionError, InvalidArgumentError
from .extract import extract_archive
from .logging import BatchSummary, ConsoleReporter, RunLogEntry, RunLogger
from .models import ExtractionTarget
from .utils import elapsed_ms, list_files, target_dir_name


def prepare_target(counter: int, archive: Path, target_dir: Path, config: AppConfig) -> ExtractionTarget:
    directory = target_dir / target_dir_name(counter, archive, config.naming)
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ExtractionError(WRITE_FAILED, f"Cannot create {directory}: {exc}") from exc
    return ExtractionTarget(index=counter, archive=archive, directory=directory)


def unzip_all(
    source_dir: Path,
    target_dir: Path,
    *,
    config: AppConfig | None = None,
    reporter: ConsoleReporter | None = None,
    run_logger: RunLogger | None = None,
) -> BatchSummary:
    """Extract every file in ``source_dir`` into numbered subdirectories of ``target_dir``.

    A missing ``source_dir`` aborts with :class:`InvalidArgumentError`. Failures of
    single archives are reported and skipped.
    """

    config = config or AppConfig()
    reporter = reporter or ConsoleReporter(verbose=config.verbose)
    run_logger = run_logger or RunLogger(config.log_file)

    if not source_dir.is_dir():
        raise InvalidArgumentError(SOURCE_NOT_FOUND, f"{source_dir} does not exist!")
    target_dir.mkdir(parents=True, exist_ok=True)

    summary = BatchSummary(stage="unzip")
    for counter, archive in enumerate(list_files(source_dir), start=1):
        reporter.start(f"Unzipping {counter}. file {archive}...")
        start = time.perf_counter()
        try:
            target = prepare_target(counter, archive, target_dir, config)
            extract_archive(archive, target.directory)
        except ExtractionError as exc:
            reporter.failed(f"Unable to unzip {archive}", exc)
            entry = RunLogEntry(
                stage="unzip",
                source=str(archive),
                status="failure",
                error_code=exc.code,
                message=str(exc),
                output_path=None,
                elapsed_ms=elapsed_ms(start),
            )
        else:
            reporter.done(f"Unzip for {counter}. file {archive} done.")
            entry = RunLogEntry(
                stage="unzip",
                source=str(archive),
                status="success",
                error_code=None,
                message=f"Extracted into {target.name}",
                output_path=str(target.directory),
                elapsed_ms=elapsed_ms(start),
            )
        summary.record(entry)
        run_logger.append(entry)
    return summary


__all__ = ["prepare_target", "unzip_all"]
