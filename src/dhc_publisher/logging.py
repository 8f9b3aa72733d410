from __future__ import annotations

import json
import time
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Literal

from rich.console import Console
from rich.markup import escape
from rich.table import Table


Status = Literal["success", "failure"]


@dataclass(slots=True)
class RunLogEntry:
    stage: str
    source: str
    status: Status
    error_code: str | None
    message: str
    output_path: str | None
    elapsed_ms: float
    timestamp: float = field(default_factory=time.time)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class RunLogger:
    """Append-only JSON lines log of item outcomes. A ``None`` path disables it."""

    def __init__(self, log_file: Path | None) -> None:
        self._log_file = log_file

    @property
    def enabled(self) -> bool:
        return self._log_file is not None

    def append(self, entry: RunLogEntry) -> None:
        if self._log_file is None:
            return
        self._log_file.parent.mkdir(parents=True, exist_ok=True)
        line = json.dumps(entry.to_dict(), ensure_ascii=False)
        with self._log_file.open("a", encoding="utf-8") as handle:
            handle.write(line + "\n")


@dataclass(slots=True)
class BatchSummary:
    stage: str
    timestamp: float = field(default_factory=time.time)
    total: int = 0
    successes: int = 0
    failures: int = 0
    entries: list[RunLogEntry] = field(default_factory=list)

    def record(self, entry: RunLogEntry) -> None:
        self.total += 1
        if entry.status == "success":
            self.successes += 1
        else:
            self.failures += 1
        self.entries.append(entry)

    @property
    def failed_sources(self) -> list[str]:
        return [entry.source for entry in self.entries if entry.status == "failure"]

    def as_table(self) -> Table:
        table = Table(title=f"{self.stage.capitalize()} summary")
        table.add_column("Item")
        table.add_column("Status")
        table.add_column("Detail")
        for entry in self.entries:
            if entry.status == "success":
                status = "[green]ok[/green]"
                detail = escape(entry.output_path or "-")
            else:
                status = "[red]failed[/red]"
                detail = escape(f"{entry.error_code}: {entry.message}")
            table.add_row(escape(Path(entry.source).name), status, detail)
        return table


class ConsoleReporter:
    """Progress and failure messages for the batch loops."""

    def __init__(
        self,
        console: Console | None = None,
        error_console: Console | None = None,
        *,
        verbose: bool = False,
    ) -> None:
        self.console = console or Console()
        self.error_console = error_console or Console(stderr=True)
        self.verbose = verbose

    def start(self, message: str) -> None:
        self.console.print(escape(message))

    def done(self, message: str) -> None:
        self.console.print(f"[green]{escape(message)}[/green]")

    def warning(self, message: str) -> None:
        self.error_console.print(f"[yellow]Warning[/yellow]: {escape(message)}")

    def failed(self, message: str, exc: BaseException) -> None:
        code = getattr(exc, "code", type(exc).__name__)
        self.error_console.print(f"[red]{escape(message)}[/red] {escape(f'[{code}]')} {escape(str(exc))}")
        if self.verbose:
            self.error_console.print_exception()

    def summary(self, summary: BatchSummary) -> None:
        self.console.print(summary.as_table())
        self.console.print(
            f"Processed {summary.total} {summary.stage} item(s): "
            f"{summary.successes} succeeded, {summary.failures} failed."
        )


__all__ = ["RunLogEntry", "RunLogger", "BatchSummary", "ConsoleReporter"]
