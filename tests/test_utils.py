from pathlib import Path

from dhc_publisher.config import NamingConfig
from dhc_publisher.utils import find_by_suffix, list_files, list_subdirectories, replace_extension, target_dir_name


def test_target_dir_name_basic() -> None:
    assert target_dir_name(1, Path("collection.dhc")) == "1_collection"


def test_target_dir_name_truncates_but_keeps_prefix() -> None:
    name = target_dir_name(12, Path("x" * 100 + ".dhc"))
    assert len(name) == 60
    assert name.startswith("12_x")


def test_target_dir_name_keeps_prefix_with_tiny_limit() -> None:
    name = target_dir_name(123, Path("abc.zip"), NamingConfig(max_dir_name_length=2))
    assert name == "123_"


def test_replace_extension() -> None:
    assert replace_extension("report.html", ".pdf") == "report.pdf"
    assert replace_extension("a.b.html", ".pdf") == "a.b.pdf"
    assert replace_extension("README", ".pdf") == "README.pdf"


def test_listing_is_sorted_and_typed(tmp_path: Path) -> None:
    (tmp_path / "b.html").write_text("b")
    (tmp_path / "a.html").write_text("a")
    (tmp_path / "notes.txt").write_text("n")
    (tmp_path / "sub").mkdir()
    assert [p.name for p in list_files(tmp_path)] == ["a.html", "b.html", "notes.txt"]
    assert [p.name for p in list_subdirectories(tmp_path)] == ["sub"]
    assert [p.name for p in find_by_suffix(tmp_path, ".html")] == ["a.html", "b.html"]


def test_target_dir_name_keeps_dotfile_names_whole() -> None:
    assert target_dir_name(1, Path(".dhc")) == "1_.dhc"
