from __future__ import annotations

import lzma
import shutil
import zipfile
import zlib
from pathlib import Path

from .errors import BAD_ARCHIVE, UNSAFE_PATH, WRITE_FAILED, ExtractionError
from .utils import is_within


def _entry_destination(destination: Path, name: str) -> Path:
    relative = Path(name)
    if relative.is_absolute() or ".." in relative.parts:
        raise ExtractionError(UNSAFE_PATH, f"Entry escapes destination: {name}")
    target = destination / relative
    if not is_within(target, destination):
        raise ExtractionError(UNSAFE_PATH, f"Entry escapes destination: {name}")
    return target


def _write_entry(archive: zipfile.ZipFile, info: zipfile.ZipInfo, target: Path) -> None:
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        with archive.open(info) as source, target.open("wb") as handle:
            shutil.copyfileobj(source, handle)
    except (
        zipfile.BadZipFile,
        zlib.error,
        lzma.LZMAError,
        EOFError,
        NotImplementedError,
        RuntimeError,
    ) as exc:
        raise ExtractionError(BAD_ARCHIVE, f"Corrupt entry {info.filename}: {exc}") from exc
    except OSError as exc:
        raise ExtractionError(WRITE_FAILED, f"Cannot write {target}: {exc}") from exc


def extract_archive(archive_path: Path, destination: Path) -> list[Path]:
    """Unpack every entry of ``archive_path`` below ``destination``.

    Entries are written in archive order and keep their internal directory
    layout. Existing files are overwritten. Returns the written file paths.
    """

    written: list[Path] = []
    try:
        archive = zipfile.ZipFile(archive_path)
    except (zipfile.BadZipFile, OSError) as exc:
        raise ExtractionError(BAD_ARCHIVE, f"Cannot open archive {archive_path.name}: {exc}") from exc

    with archive:
        for info in archive.infolist():
            target = _entry_destination(destination, info.filename)
            if info.is_dir():
                try:
                    target.mkdir(parents=True, exist_ok=True)
                except OSError as exc:
                    raise ExtractionError(WRITE_FAILED, f"Cannot create {target}: {exc}") from exc
                continue
            _write_entry(archive, info, target)
            written.append(target)
    return written


__all__ = ["extract_archive"]
