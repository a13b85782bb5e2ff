"""Tests for Go package preamble and detection."""

import io
from pathlib import Path

import pytest

from goembed.contracts import PackageDetectionError, SinkWriteError
from goembed.core.package import PREAMBLE, detect_package, parse_package_clause, write_package
from tests.helpers.streams import FailingWriter


class TestWritePackage:
    def test_writes_banner_and_clause(self) -> None:
        dst = io.BytesIO()
        write_package(dst, "assets")
        assert dst.getvalue() == b"// MACHINE GENERATED - DO NOT EDIT //\n\npackage assets\n"

    def test_preamble_template(self) -> None:
        assert PREAMBLE.format(package="x").endswith("package x\n")

    def test_write_failure(self) -> None:
        with pytest.raises(SinkWriteError, match="failed to write package statement"):
            write_package(FailingWriter(), "assets", name="out.go")


class TestParsePackageClause:
    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("package main\n", "main"),
            ("// Copyright\n// license\n\npackage foo\n\nimport \"fmt\"\n", "foo"),
            ("/* block\n comment */\npackage bar // trailing\n", "bar"),
            ("//go:build linux\n\npackage sys;\n", "sys"),
            ("\n\n  package   spaced\n", "spaced"),
        ],
    )
    def test_finds_package(self, source: str, expected: str) -> None:
        assert parse_package_clause(source) == expected

    @pytest.mark.parametrize("source", ["", "// only a comment\n", "func main() {}\n", "var package = 1\n"])
    def test_missing_clause(self, source: str) -> None:
        assert parse_package_clause(source) is None


class TestDetectPackage:
    def test_single_file(self, go_package_dir: Path) -> None:
        assert detect_package(go_package_dir) == "assets"

    def test_files_agree(self, go_package_dir: Path) -> None:
        (go_package_dir / "other.go").write_text("package assets\n\nfunc F() {}\n")
        assert detect_package(go_package_dir) == "assets"

    def test_test_files_are_ignored(self, go_package_dir: Path) -> None:
        (go_package_dir / "doc_test.go").write_text("package assets_test\n")
        assert detect_package(go_package_dir) == "assets"

    def test_underscore_and_dot_files_are_ignored(self, go_package_dir: Path) -> None:
        (go_package_dir / "_scratch.go").write_text("package scratch\n")
        (go_package_dir / ".hidden.go").write_text("package hidden\n")
        assert detect_package(go_package_dir) == "assets"

    def test_conflicting_packages(self, go_package_dir: Path) -> None:
        (go_package_dir / "other.go").write_text("package other\n")
        with pytest.raises(PackageDetectionError, match="multiple packages"):
            detect_package(go_package_dir)

    def test_no_go_files(self, tmp_path: Path) -> None:
        (tmp_path / "README.md").write_text("# nothing here\n")
        with pytest.raises(PackageDetectionError, match="no buildable Go source files"):
            detect_package(tmp_path)

    def test_file_without_clause(self, tmp_path: Path) -> None:
        (tmp_path / "broken.go").write_text("func main() {}\n")
        with pytest.raises(PackageDetectionError, match="no package clause"):
            detect_package(tmp_path)

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(PackageDetectionError, match="failed to read directory") as exc_info:
            detect_package(tmp_path / "nope")
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_invalid_name(self, tmp_path: Path) -> None:
        (tmp_path / "dot.go").write_text("package .\n")
        with pytest.raises(PackageDetectionError, match="invalid package name"):
            detect_package(tmp_path)
