from __future__ import annotations

from pathlib import Path

from .config import AppConfig
from .convert import convert_all
from .logging import BatchSummary, ConsoleReporter, RunLogger
from .models import PublishResult
from .renderers import PdfRenderer, get_renderer
from .unzip import unzip_all


class PublisherService:
    def __init__(
        self,
        config: AppConfig | None = None,
        *,
        renderer: PdfRenderer | None = None,
        reporter: ConsoleReporter | None = None,
    ) -> None:
        self._config = config or AppConfig()
        self._renderer = renderer
        self._reporter = reporter or ConsoleReporter(verbose=self._config.verbose)
        self._run_logger = RunLogger(self._config.log_file)

    @property
    def renderer(self) -> PdfRenderer:
        if self._renderer is None:
            self._renderer = get_renderer(config=self._config.render)
        return self._renderer

    def unzip(self, source_dir: Path, target_dir: Path) -> PublishResult:
        summary = self._unzip(source_dir, target_dir)
        return PublishResult(unzip=summary)

    def convert(self, target_dir: Path) -> PublishResult:
        summary = self._convert(target_dir)
        return PublishResult(convert=summary)

    def unzip_and_convert(self, source_dir: Path, target_dir: Path) -> PublishResult:
        unzipped = self._unzip(source_dir, target_dir)
        converted = self._convert(target_dir)
        return PublishResult(unzip=unzipped, convert=converted)

    def _unzip(self, source_dir: Path, target_dir: Path) -> BatchSummary:
        summary = unzip_all(
            source_dir,
            target_dir,
            config=self._config,
            reporter=self._reporter,
            run_logger=self._run_logger,
        )
        self._report(summary)
        return summary

    def _convert(self, target_dir: Path) -> BatchSummary:
        summary = convert_all(
            target_dir,
            self.renderer,
            config=self._config,
            reporter=self._reporter,
            run_logger=self._run_logger,
        )
        self._report(summary)
        return summary

    def _report(self, summary: BatchSummary) -> None:
        if self._config.show_summary and summary.total:
            self._reporter.summary(summary)


__all__ = ["PublisherService"]
