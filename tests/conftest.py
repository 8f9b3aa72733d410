from __future__ import annotations

import io
import zipfile
from pathlib import Path

import pytest
from rich.console import Console

from dhc_publisher.errors import PIPELINE_FAILURE, RenderError
from dhc_publisher.logging import ConsoleReporter

FAKE_PDF = b"%PDF-1.7\n% fake\n"


class FakeRenderer:
    def __init__(self, *, fail: bool = False) -> None:
        self.fail = fail
        self.calls: list[tuple[bytes, Path]] = []

    def render(self, html: bytes, base_dir: Path) -> bytes:
        self.calls.append((html, base_dir))
        if self.fail:
            raise RenderError(PIPELINE_FAILURE, "boom")
        return FAKE_PDF


class BufferedReporter(ConsoleReporter):
    def __init__(self) -> None:
        self.out = io.StringIO()
        self.err = io.StringIO()
        super().__init__(
            Console(file=self.out, width=200),
            Console(file=self.err, width=200),
        )


def make_archive(path: Path, entries: dict[str, bytes]) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(path, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        for name, payload in entries.items():
            archive.writestr(name, payload)
    return path


@pytest.fixture
def reporter() -> BufferedReporter:
    return BufferedReporter()


@pytest.fixture
def fake_renderer() -> FakeRenderer:
    return FakeRenderer()


@pytest.fixture
def archive_factory():
    return make_archive
