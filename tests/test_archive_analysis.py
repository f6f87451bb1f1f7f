"""Tests for extension discovery and line counting over archives."""

from __future__ import annotations

from pathlib import Path

import pytest

from loc_counter.models.archive import (
    ClassifiedFile,
    EmptyArchiveError,
    NoExtensionsSelectedError,
    UnsafePathError,
)
from loc_counter.services.archive_analysis import (
    build_count_result,
    count_lines_from_archive,
    normalize_extensions,
    scan_extensions_from_archive,
)


class TestScanExtensions:
    """Test cases for scan_extensions_from_archive."""

    def test_binary_files_are_excluded(self, make_zip) -> None:
        data = make_zip([("a.txt", "hello\n"), ("b.bin", b"\x00\x01")])

        assert scan_extensions_from_archive(data) == [".txt"]

    def test_extensions_are_sorted_lowercase_and_unique(self, make_zip) -> None:
        data = make_zip(
            [
                ("src/app.PY", "x = 1\n"),
                ("src/lib.py", "y = 2\n"),
                ("web/index.ts", "export {}\n"),
                ("README.md", "# Title\n"),
                ("LICENSE", "MIT\n"),
            ]
        )

        assert scan_extensions_from_archive(data) == [".md", ".py", ".ts"]

    def test_scan_is_idempotent(self, make_zip) -> None:
        data = make_zip([("b.js", "1\n"), ("a.css", "2\n"), ("c.html", "3\n")])

        assert scan_extensions_from_archive(data) == scan_extensions_from_archive(data)

    def test_workspace_is_removed_after_scan(self, make_zip, workspace_root: Path) -> None:
        scan_extensions_from_archive(make_zip([("a.txt", "hello\n")]))

        assert list(workspace_root.iterdir()) == []

    def test_empty_upload_is_rejected(self, workspace_root: Path) -> None:
        with pytest.raises(EmptyArchiveError):
            scan_extensions_from_archive(b"")

        assert list(workspace_root.iterdir()) == []

    def test_unsafe_path_leaves_no_artifacts(self, make_zip, workspace_root: Path) -> None:
        data = make_zip([("src/ok.py", "x = 1\n"), ("../../escape.py", "x = 2\n")])

        with pytest.raises(UnsafePathError):
            scan_extensions_from_archive(data)

        assert list(workspace_root.iterdir()) == []
        assert not (workspace_root.parent / "escape.py").exists()


class TestCountLines:
    """Test cases for count_lines_from_archive."""

    def test_single_python_file(self, make_zip) -> None:
        data = make_zip([("a.py", "x=1\ny=2\nz=3")])

        result = count_lines_from_archive(data, [".py"])

        assert result.to_dict() == {
            "total_files": 1,
            "total_lines": 3,
            "line_counts_by_ext": {".py": 3},
            "file_counts_by_ext": {".py": 1},
            "top_files": [{"path": "a.py", "lines": 3}],
        }

    def test_only_selected_text_files_are_counted(self, make_zip) -> None:
        data = make_zip(
            [
                ("src/main.py", "a\nb\nc\nd"),
                ("src/util.js", "a\nb"),
                ("docs/guide.md", "a\nb\nc\nd\ne\nf"),
                ("data/blob.py", b"\x00binary\npayload"),
            ]
        )

        result = count_lines_from_archive(data, [".PY", ".js"])

        assert result.total_files == 2
        assert result.total_lines == 6
        assert list(result.line_counts_by_ext.items()) == [(".py", 4), (".js", 2)]
        assert result.file_counts_by_ext == {".js": 1, ".py": 1}
        assert [(entry.path, entry.lines) for entry in result.top_files] == [
            ("src/main.py", 4),
            ("src/util.js", 2),
        ]

    def test_totals_match_per_extension_sums(self, make_zip) -> None:
        entries = [(f"pkg/mod{i}.py", "\n" * i) for i in range(12)]
        entries += [(f"web/page{i}.ts", "x\n" * i) for i in range(7)]
        entries.append(("notes/todo.txt", "skip me\n"))
        data = make_zip(entries)

        result = count_lines_from_archive(data, [".py", ".ts"])

        assert result.total_files == sum(result.file_counts_by_ext.values())
        assert result.total_lines == sum(result.line_counts_by_ext.values())
        assert result.total_files == 19

    def test_top_files_are_capped(self, make_zip) -> None:
        data = make_zip([(f"files/f{i:03d}.txt", "one line") for i in range(250)])

        result = count_lines_from_archive(data, [".txt"])

        assert result.total_files == 250
        assert len(result.top_files) == 200
        assert all(entry.lines == 1 for entry in result.top_files)
        assert result.top_files[0].path == "files/f000.txt"
        assert result.top_files[-1].path == "files/f199.txt"

    def test_top_files_sorted_by_lines_descending(self, make_zip) -> None:
        data = make_zip([("small.py", "a"), ("big.py", "a\nb\nc\nd"), ("mid.py", "a\nb")])

        result = count_lines_from_archive(data, [".py"])

        assert [entry.path for entry in result.top_files] == ["big.py", "mid.py", "small.py"]

    def test_paths_are_forward_slash_relative(self, make_zip) -> None:
        data = make_zip([("deep/nested/dir/file.rs", "fn main() {}\n")])

        result = count_lines_from_archive(data, [".rs"])

        assert result.top_files[0].path == "deep/nested/dir/file.rs"

    def test_no_extensions_selected(self, make_zip, workspace_root: Path) -> None:
        data = make_zip([("a.py", "x")])

        with pytest.raises(NoExtensionsSelectedError, match="At least one extension"):
            count_lines_from_archive(data, [])

        assert list(workspace_root.iterdir()) == []

    def test_unselected_extensions_produce_empty_report(self, make_zip) -> None:
        result = count_lines_from_archive(make_zip([("a.py", "x")]), [".go"])

        assert result.total_files == 0
        assert result.total_lines == 0
        assert result.top_files == []

    def test_workspace_is_removed_after_count(self, make_zip, workspace_root: Path) -> None:
        count_lines_from_archive(make_zip([("a.py", "x")]), [".py"])

        assert list(workspace_root.iterdir()) == []


class TestBuildCountResult:
    """Test cases for aggregation and ordering rules."""

    @staticmethod
    def _text_file(tmp_path: Path, rel_path: str, content: str) -> ClassifiedFile:
        path = tmp_path / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return ClassifiedFile(
            path=rel_path,
            absolute_path=path,
            extension=Path(rel_path).suffix.lower(),
            is_binary=False,
        )

    def test_tied_extension_counts_are_ordered_by_extension(self, tmp_path: Path) -> None:
        files = [
            self._text_file(tmp_path, "z.ts", "a\nb"),
            self._text_file(tmp_path, "a.py", "a\nb"),
            self._text_file(tmp_path, "m.go", "a\nb\nc"),
        ]

        result = build_count_result(files, {".ts", ".py", ".go"})

        assert list(result.line_counts_by_ext) == [".go", ".py", ".ts"]
        assert list(result.file_counts_by_ext) == [".go", ".py", ".ts"]

    def test_result_does_not_depend_on_input_order(self, tmp_path: Path) -> None:
        files = [
            self._text_file(tmp_path, "b.py", "a\nb"),
            self._text_file(tmp_path, "a.py", "a\nb"),
            self._text_file(tmp_path, "c.js", "a"),
        ]

        forward = build_count_result(files, {".py", ".js"})
        backward = build_count_result(list(reversed(files)), {".py", ".js"})

        assert forward == backward

    def test_binary_files_are_skipped(self, tmp_path: Path) -> None:
        info = self._text_file(tmp_path, "a.py", "a\nb")
        info.is_binary = True

        result = build_count_result([info], {".py"})

        assert result.total_files == 0
        assert result.line_counts_by_ext == {}


class TestNormalizeExtensions:
    """Test cases for extension selection normalization."""

    def test_lowercases_and_deduplicates(self) -> None:
        assert normalize_extensions([".PY", ".py", ".Js"]) == {".py", ".js"}

    def test_blank_values_do_not_count_as_selection(self) -> None:
        with pytest.raises(NoExtensionsSelectedError):
            normalize_extensions(["", "  "])
