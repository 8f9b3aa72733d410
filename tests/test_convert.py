import sys
from pathlib import Path

import pytest

from dhc_publisher.convert import convert_all
from dhc_publisher.errors import NO_HTML_FOUND, PIPELINE_FAILURE, RENDERER_UNAVAILABLE, InvalidArgumentError
from dhc_publisher.renderers import WeasyPrintRenderer

from conftest import FAKE_PDF, FakeRenderer


def test_convert_continues_past_missing_html(tmp_path: Path, fake_renderer, reporter) -> None:
    (tmp_path / "1_first").mkdir()
    (tmp_path / "1_first" / "notes.txt").write_text("no html here")
    (tmp_path / "2_second").mkdir()
    (tmp_path / "2_second" / "report.html").write_text("<p>report</p>")
    (tmp_path / "stray.html").write_text("ignored, not a subdirectory")

    summary = convert_all(tmp_path, fake_renderer, reporter=reporter)

    assert summary.total == 2
    assert summary.successes == 1
    assert summary.entries[0].error_code == NO_HTML_FOUND
    assert (tmp_path / "2_second" / "report.pdf").exists()
    assert not (tmp_path / "stray.pdf").exists()
    out = reporter.out.getvalue()
    assert "Processing directory" in out
    assert "done." in out
    assert "Could not convert HTML in" in reporter.err.getvalue()


def test_convert_isolates_pipeline_failures(tmp_path: Path, reporter) -> None:
    for name in ("a", "b"):
        (tmp_path / name).mkdir()
        (tmp_path / name / "index.html").write_text(name)
    renderer = FakeRenderer(fail=True)
    summary = convert_all(tmp_path, renderer, reporter=reporter)
    assert summary.failures == 2
    assert len(renderer.calls) == 2


def test_convert_missing_directory(tmp_path: Path, fake_renderer, reporter) -> None:
    with pytest.raises(InvalidArgumentError):
        convert_all(tmp_path / "missing", fake_renderer, reporter=reporter)


def test_convert_survives_unwritable_output(tmp_path: Path, fake_renderer, reporter) -> None:
    (tmp_path / "a").mkdir()
    (tmp_path / "a" / "report.html").write_text("<p>a</p>")
    (tmp_path / "a" / "report.pdf").mkdir()
    (tmp_path / "b").mkdir()
    (tmp_path / "b" / "ok.html").write_text("<p>b</p>")

    summary = convert_all(tmp_path, fake_renderer, reporter=reporter)

    assert summary.total == 2
    assert summary.successes == 1
    assert summary.entries[0].error_code == PIPELINE_FAILURE
    assert (tmp_path / "b" / "ok.pdf").read_bytes() == FAKE_PDF
    assert "Could not delete existing" in reporter.err.getvalue()


def test_convert_reports_missing_engine(tmp_path: Path, monkeypatch, reporter) -> None:
    monkeypatch.setitem(sys.modules, "weasyprint", None)
    (tmp_path / "1_doc").mkdir()
    (tmp_path / "1_doc" / "doc.html").write_text("<p>doc</p>")

    summary = convert_all(tmp_path, WeasyPrintRenderer(), reporter=reporter)

    assert summary.failures == 1
    assert summary.entries[0].error_code == RENDERER_UNAVAILABLE
    assert not (tmp_path / "1_doc" / "doc.pdf").exists()
