from __future__ import annotations

import time
from pathlib import Path

from .config import NamingConfig


def target_dir_name(counter: int, archive: Path, naming: NamingConfig | None = None) -> str:
    naming = naming or NamingConfig()
    name = f"{counter}{naming.separator}{archive.stem}"
    prefix = f"{counter}{naming.separator}"
    limit = max(naming.max_dir_name_length, len(prefix))
    return name[:limit]


def replace_extension(name: str, suffix: str) -> str:
    stem, dot, _ = name.rpartition(".")
    if not dot or not stem:
        return f"{name}{suffix}"
    return f"{stem}{suffix}"


def list_files(directory: Path) -> list[Path]:
    return sorted((p for p in directory.iterdir() if p.is_file()), key=lambda p: p.name)


def list_subdirectories(directory: Path) -> list[Path]:
    return sorted((p for p in directory.iterdir() if p.is_dir()), key=lambda p: p.name)


def find_by_suffix(directory: Path, suffix: str) -> list[Path]:
    return [p for p in list_files(directory) if p.name.endswith(suffix)]


def is_within(path: Path, root: Path) -> bool:
    try:
        path.resolve().relative_to(root.resolve())
    except ValueError:
        return False
    return True


def elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000
