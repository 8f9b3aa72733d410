from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from ..config import AppConfig, build_config
from ..core import PublisherService
from ..errors import PublisherError
from ..logging import ConsoleReporter
from ..models import PublishResult

console = Console()
error_console = Console(stderr=True)

app = typer.Typer(
    help="Publishing tool for DHC file collections",
    add_completion=False,
)

PROGRAM = "dhc-publisher"
USAGE_LINES = (
    "Usage",
    "=====",
    f"Unzip: {PROGRAM} 1 dhcDir targetDir",
    f"PDF: {PROGRAM} 2 dirWithUnzippedDhcs",
    f"Unzip+PDF: {PROGRAM} 3 dhcDir targetDir",
)

UNZIP, CONVERT, UNZIP_AND_CONVERT = 1, 2, 3
MODE_ARITY = {UNZIP: 2, CONVERT: 1, UNZIP_AND_CONVERT: 2}


def usage() -> None:
    for line in USAGE_LINES:
        console.print(line, highlight=False)


def parse_mode(token: str) -> int | None:
    try:
        mode = int(token)
    except ValueError:
        return None
    return mode if mode in MODE_ARITY else None


def build_service(config: AppConfig) -> PublisherService:
    reporter = ConsoleReporter(console, error_console, verbose=config.verbose)
    return PublisherService(config, reporter=reporter)


def dispatch(service: PublisherService, mode: int, args: list[str]) -> PublishResult:
    if mode == UNZIP:
        return service.unzip(Path(args[0]), Path(args[1]))
    if mode == CONVERT:
        return service.convert(Path(args[0]))
    return service.unzip_and_convert(Path(args[0]), Path(args[1]))


@app.command(context_settings={"ignore_unknown_options": True})
def publish(
    mode: str | None = typer.Argument(None, help="1 = unzip, 2 = PDF, 3 = unzip + PDF"),
    paths: list[str] | None = typer.Argument(None, help="Directories for the selected mode"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print tracebacks for failed items"),
    log_file: Path | None = typer.Option(None, "--log-file", help="Append item outcomes as JSON lines"),
    no_summary: bool = typer.Option(False, "--no-summary", help="Skip the summary tables"),
) -> None:
    if mode is None:
        usage()
        raise typer.Exit()
    action = parse_mode(mode)
    args = list(paths or [])
    if action is None or len(args) != MODE_ARITY[action]:
        usage()
        raise typer.Exit(2)

    config = build_config(verbose=verbose, log_file=log_file, show_summary=not no_summary)
    failure: BaseException | None = None
    try:
        service = build_service(config)
        result = dispatch(service, action, args)
        if result.failures:
            error_console.print(f"[yellow]Finished with {result.failures} failed item(s)[/yellow]")
    except PublisherError as exc:
        error_console.print(f"[red]Aborted[/red]: {escape(exc.code)} - {escape(str(exc))}")
        failure = exc
    except Exception as exc:
        error_console.print(f"[red]Unexpected error[/red]: {escape(repr(exc))}")
        if verbose:
            error_console.print_exception()
        failure = exc
    if failure is not None:
        usage()
        raise typer.Exit(1) from failure


if __name__ == "__main__":
    app()
