# src/goembed/core/package.py
"""Go package preamble and package-name detection.

Generated files start with a machine-generated banner and a package clause.
When no package name is configured, it is read from the Go sources already
present in the destination directory, the way `go build` would see them.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import BinaryIO

from goembed.contracts import PackageDetectionError, SinkWriteError
from goembed.core.logging import get_logger

logger = get_logger(__name__)

PREAMBLE = "// MACHINE GENERATED - DO NOT EDIT //\n\npackage {package}\n"

# Leading whitespace and comments that may precede the package clause
_LEADING_NOISE = re.compile(r"\A(?:\s+|//[^\n]*|/\*.*?\*/)+", re.DOTALL)
_PACKAGE_CLAUSE = re.compile(r"\Apackage\s+([^\s;/]+)")


def write_package(dst: BinaryIO, package: str, *, name: str = "<output>") -> None:
    """Write the generated-file banner and package clause.

    Args:
        dst: Writable binary stream (caller-owned, not closed)
        package: Go package name
        name: Output name used in error messages

    Raises:
        SinkWriteError: If the write fails
    """
    try:
        dst.write(PREAMBLE.format(package=package).encode("utf-8"))
    except OSError as e:
        raise SinkWriteError(name, f"failed to write package statement: {e}") from e


def parse_package_clause(source: str) -> str | None:
    """Extract the package name from Go source text, or None if absent."""
    noise = _LEADING_NOISE.match(source)
    body = source[noise.end() :] if noise else source
    match = _PACKAGE_CLAUSE.match(body)
    return match.group(1) if match else None


def detect_package(directory: Path) -> str:
    """Determine the Go package declared by the sources in a directory.

    Test files (*_test.go) and files ignored by the go tool (leading "_" or
    ".") are skipped. All remaining files must agree on one package.

    Args:
        directory: Directory to inspect

    Returns:
        Package name

    Raises:
        PackageDetectionError: If the directory can't be read, holds no Go
            sources, or its sources declare conflicting packages
    """
    try:
        candidates = sorted(p for p in directory.iterdir() if p.suffix == ".go" and p.is_file())
    except OSError as e:
        raise PackageDetectionError(str(directory), f"failed to read directory: {e}") from e

    packages: dict[str, str] = {}
    for path in candidates:
        if path.name.endswith("_test.go") or path.name.startswith(("_", ".")):
            continue
        try:
            text = path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            raise PackageDetectionError(str(path), f"failed to read Go source: {e}") from e

        package = parse_package_clause(text)
        if package is None:
            raise PackageDetectionError(str(path), "no package clause found")
        packages.setdefault(package, path.name)

    if not packages:
        raise PackageDetectionError(str(directory), "no buildable Go source files")
    if len(packages) > 1:
        found = ", ".join(f"{pkg} ({file})" for pkg, file in sorted(packages.items()))
        raise PackageDetectionError(str(directory), f"found multiple packages: {found}")

    (package,) = packages
    if package in ("", "."):
        raise PackageDetectionError(str(directory), "invalid package name")

    logger.debug("package_detected", directory=str(directory), package=package)
    return package
